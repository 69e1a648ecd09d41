# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

import sys
from typing import Annotated, Optional

import typer

from coreason_pawprint import __version__
from coreason_pawprint.ansi import strip_ansi
from coreason_pawprint.printer import PawPrint
from coreason_pawprint.utils.logger import enable_diagnostics, logger

app = typer.Typer(
    name="coreason-pawprint",
    help="CLI for coreason-pawprint: decorated console logs for development.",
    add_completion=False,
)


def _raise_sample_error() -> None:
    raise NotImplementedError("Oops! You've forgotten to implement this feature")


@app.command()
def demo(
    name: Annotated[str, typer.Option("--name", "-n", help="Name printed in front of every line")] = "PAW",
    max_stack_traces: Annotated[
        int, typer.Option("--max-stack-traces", "-m", min=0, help="Max stack frames printed for errors")
    ] = 5,
    hide_name: Annotated[bool, typer.Option("--hide-name", help="Do not print the name badge")] = False,
) -> None:
    """
    Print one sample line of every severity.
    """
    paw = PawPrint.init(
        name=name,
        max_stack_traces=max_stack_traces,
        should_print_name=not hide_name,
        debug_mode=lambda: True,
        writer=typer.echo,
    )

    paw.info("This is an informational message")
    paw.warn("This is a warning message")
    paw.debug({"key": "value", "count": 42, "nested": {"items": [1, 2, 3]}})
    try:
        _raise_sample_error()
    except NotImplementedError as e:
        paw.error("An unexpected error occurred", error=e)


@app.command()
def strip(
    text: Annotated[Optional[str], typer.Argument(help="Decorated text; read from stdin when omitted")] = None,
) -> None:
    """
    Remove ANSI color codes from decorated text.
    """
    try:
        raw = text if text is not None else sys.stdin.read()
        typer.echo(strip_ansi(raw), nl=text is not None)
    except Exception:
        logger.exception("Strip Failed")
        sys.exit(1)


@app.command()
def version() -> None:
    """Print the version of coreason-pawprint."""
    typer.echo(f"coreason-pawprint v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    enable_diagnostics(level="INFO")
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
