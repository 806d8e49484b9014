import logging

import typer

from tinystitch.common import bus, needle
from tinystitch.needle import L
from .rendering import CliRenderer

from .commands.merge import merge_command, merge_legacy_command

app = typer.Typer(
    name="tinystitch",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
):
    # The CLI is the composition root: it picks the renderer and log level.
    bus.set_renderer(CliRenderer(verbose=verbose))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="merge", help=needle.get(L.cli.command.merge.help))(merge_command)
app.command(name="merge-legacy", help=needle.get(L.cli.command.merge_legacy.help))(
    merge_legacy_command
)


if __name__ == "__main__":
    app()
