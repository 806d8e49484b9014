from pathlib import Path
from typing import Optional

import typer
from tinystitch.common import needle
from tinystitch.needle import L
from tinystitch.cli.factories import make_app

InputA = typer.Argument(
    ...,
    exists=True,
    dir_okay=False,
    readable=True,
    help=needle.get(L.cli.argument.input_a.help),
)
InputB = typer.Argument(
    ...,
    exists=True,
    dir_okay=False,
    readable=True,
    help=needle.get(L.cli.argument.input_b.help),
)
Output = typer.Argument(
    ..., dir_okay=False, help=needle.get(L.cli.argument.output.help)
)
CommonNamespace = typer.Option(
    None,
    "--common-namespace",
    "-c",
    help=needle.get(L.cli.option.common_namespace.help),
)
LeaveHoles = typer.Option(
    None,
    "--leave-holes/--fill-holes",
    "-h",
    help=needle.get(L.cli.option.leave_holes.help),
)


def merge_command(
    input_a: Path = InputA,
    input_b: Path = InputB,
    output: Path = Output,
    common_namespace: Optional[str] = CommonNamespace,
    leave_holes: Optional[bool] = LeaveHoles,
):
    app_instance = make_app()
    result = app_instance.run_merge(
        input_a,
        input_b,
        output,
        common_namespace=common_namespace,
        leave_holes=leave_holes,
    )
    if not result.success:
        raise typer.Exit(code=1)


def merge_legacy_command(
    input_a: Path = InputA,
    input_b: Path = InputB,
    output: Path = Output,
    common_namespace: Optional[str] = CommonNamespace,
    leave_holes: Optional[bool] = LeaveHoles,
):
    app_instance = make_app()
    result = app_instance.run_merge_legacy(
        input_a,
        input_b,
        output,
        common_namespace=common_namespace,
        leave_holes=leave_holes,
    )
    if not result.success:
        raise typer.Exit(code=1)
