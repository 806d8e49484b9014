import typer
from tinystitch.common.messaging import protocols

# level -> (color, prefix, stderr)
LEVEL_STYLES = {
    "debug": (typer.colors.BRIGHT_BLACK, "", False),
    "info": (None, "", False),
    "success": (typer.colors.GREEN, "", False),
    "warning": (typer.colors.YELLOW, "warning: ", True),
    "error": (typer.colors.RED, "error: ", True),
}


class CliRenderer(protocols.Renderer):
    """
    Writes bus messages to the terminal. Warnings and errors go to stderr
    with a level prefix so merged output piped from stdout stays clean.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return

        color, prefix, to_stderr = LEVEL_STYLES.get(level, (None, "", False))
        typer.secho(f"{prefix}{message}", fg=color, err=to_stderr)
