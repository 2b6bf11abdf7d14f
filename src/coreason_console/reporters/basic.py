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
from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence

from coreason_console.colors import Palette
from coreason_console.environment import detect_environment, stream_columns
from coreason_console.errors import get_message, get_stack, is_error_like, parse_stack, walk_causes
from coreason_console.schemas import Environment, FormatOptions, LogContext, LogRecord
from coreason_console.utils.formatting import format_args as format_with_options
from coreason_console.utils.formatting import stringify
from coreason_console.utils.stream import write_stream


def bracket(text: Optional[str]) -> str:
    return f"[{text}]" if text else ""


class BasicReporter:
    """
    Plain-text reporter: `[type] [tag] message`, no colors.

    Warnings and errors (level < 2) go to stderr, everything else to stdout.
    """

    def __init__(self, environment: Optional[Environment] = None, palette: Optional[Palette] = None):
        self.environment = environment or detect_environment()
        self.palette = palette or Palette(enabled=self.environment.color)

    def format_stack(self, stack: str, opts: FormatOptions, message: str = "") -> str:
        indent = "  " * (opts.error_level + 1)
        frames = parse_stack(stack, message)
        if not frames:
            return ""
        return indent + f"\n{indent}".join(frames)

    def format_error(self, err: Any, opts: FormatOptions) -> str:
        """
        Renders an error and its cause chain.

        Each cause is indented one level deeper and prefixed with `[cause]:`.
        Cyclic or overly deep chains end with a truncation marker instead of
        recursing forever.
        """
        chain, truncated = walk_causes(err)
        blocks: List[str] = []

        for depth, item in enumerate(chain):
            level = opts.error_level + depth
            level_opts = opts.model_copy(update={"error_level": level})
            message = get_message(item)
            if message is None:
                message = stringify(item)
            stack = self.format_stack(get_stack(item), level_opts, message) if is_error_like(item) else ""

            prefix = f"{'  ' * level}[cause]: " if level > 0 else ""
            blocks.append(prefix + message + (f"\n{stack}" if stack else ""))

        if truncated:
            level = opts.error_level + len(chain)
            blocks.append(f"{'  ' * level}[cause]: [Truncated: {truncated}]")

        return "\n\n".join(blocks)

    def format_args(self, args: Sequence[Any], opts: FormatOptions) -> str:
        formatted = [self.format_error(arg, opts) if is_error_like(arg) else arg for arg in args]
        return format_with_options(*formatted)

    def format_date(self, date: datetime, opts: FormatOptions) -> str:
        return date.strftime("%X") if opts.date else ""

    def filter_and_join(self, items: Iterable[Optional[str]]) -> str:
        return " ".join(item for item in items if item)

    def format_log_obj(self, record: LogRecord, opts: FormatOptions) -> str:
        message = self.format_args(record.args, opts)

        if record.type == "box":
            lines = [bracket(record.tag), record.title or "", *message.split("\n")]
            return "\n" + "\n".join(" > " + line for line in lines if line) + "\n"

        return self.filter_and_join([bracket(record.type), bracket(record.tag), message])

    def format_line(self, record: LogRecord, ctx: LogContext) -> str:
        stdout = ctx.stdout or sys.stdout
        options = {"columns": stream_columns(stdout), **ctx.format_options}
        return self.format_log_obj(record, FormatOptions(**options))

    def log(self, record: LogRecord, ctx: LogContext) -> None:
        line = self.format_line(record, ctx)
        stream = (ctx.stderr or sys.stderr) if record.level < 2 else (ctx.stdout or sys.stdout)
        write_stream(line + "\n", stream)
