# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import sys
from typing import Annotated, Any, Dict, List, Optional

import typer
from loguru import logger

from coreason_console import __version__
from coreason_console.environment import detect_environment
from coreason_console.pipeline import create_record, create_reporter, dispatch
from coreason_console.reporters import BasicReporter, FancyReporter
from coreason_console.schemas import BoxStyle, LogContext

app = typer.Typer(
    name="coreason-console",
    help="CLI for coreason-console: render log records for the terminal.",
    add_completion=False,
)

REPORTERS = ("auto", "basic", "fancy")


def _make_reporter(name: str) -> BasicReporter:
    if name not in REPORTERS:
        raise typer.BadParameter(f"Unknown reporter '{name}'. Choose one of: {', '.join(REPORTERS)}")
    if name == "basic":
        return BasicReporter()
    if name == "fancy":
        return FancyReporter()
    return create_reporter(detect_environment())


def _context(columns: Optional[int], date: bool = True) -> LogContext:
    options: Dict[str, Any] = {"date": date}
    if columns is not None:
        options["columns"] = columns
    return LogContext(format_options=options)


@app.command()
def log(
    log_type: Annotated[str, typer.Argument(help="Log type, e.g. info, warn, error, success")],
    message: Annotated[List[str], typer.Argument(help="Message parts, printf-style placeholders allowed")],
    tag: Annotated[str, typer.Option("--tag", "-t", help="Tag shown next to the message")] = "",
    level: Annotated[Optional[int], typer.Option("--level", "-l", help="Override the level of the type")] = None,
    reporter: Annotated[str, typer.Option("--reporter", "-r", help="auto, basic or fancy")] = "auto",
    badge: Annotated[Optional[bool], typer.Option("--badge/--no-badge", help="Force badge rendering")] = None,
    columns: Annotated[Optional[int], typer.Option("--columns", "-c", help="Terminal width override")] = None,
    date: Annotated[bool, typer.Option("--date/--no-date", help="Show the time")] = True,
) -> None:
    """
    Render a single log record.
    """
    fields: Dict[str, Any] = {"tag": tag, "badge": badge}
    if level is not None:
        fields["level"] = level
    record = create_record(log_type, *message, **fields)

    failures = dispatch(record, [_make_reporter(reporter)], _context(columns, date))
    if failures:
        sys.exit(1)


@app.command()
def box(
    text: Annotated[str, typer.Argument(help="Text to draw a box around")],
    title: Annotated[Optional[str], typer.Option("--title", help="Title in the top border")] = None,
    border_style: Annotated[str, typer.Option("--border-style", "-s", help="Border preset")] = "solid",
    border_color: Annotated[str, typer.Option("--border-color", help="Border color")] = "white",
    valign: Annotated[str, typer.Option("--valign", help="top, center or bottom")] = "center",
    padding: Annotated[int, typer.Option("--padding", "-p", help="Inner padding")] = 2,
    reporter: Annotated[str, typer.Option("--reporter", "-r", help="auto, basic or fancy")] = "fancy",
) -> None:
    """
    Render a boxed message.
    """
    try:
        style = BoxStyle(border_style=border_style, border_color=border_color, valign=valign, padding=padding)
        record = create_record("box", text, title=title, style=style)
    except Exception:
        logger.exception("Invalid box options")
        sys.exit(1)

    failures = dispatch(record, [_make_reporter(reporter)], _context(None))
    if failures:
        sys.exit(1)


@app.command()
def version() -> None:
    """Print the version of coreason-console."""
    typer.echo(f"coreason-console v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
