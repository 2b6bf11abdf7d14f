# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import re
from typing import Dict, Optional, Tuple

from coreason_console.box import box
from coreason_console.colors import Palette, visible_width
from coreason_console.errors import capture_stack, parse_stack
from coreason_console.reporters.basic import BasicReporter
from coreason_console.schemas import Environment, FormatOptions, LogRecord

TYPE_COLOR_MAP: Dict[str, str] = {
    "info": "cyan",
    "fail": "red",
    "success": "green",
    "ready": "green",
    "start": "magenta",
}

LEVEL_COLOR_MAP: Dict[int, str] = {
    0: "red",
    1: "yellow",
}

DEFAULT_TYPE_COLOR = "gray"

# type -> (unicode glyph, fallback glyph for terminals without unicode support)
TYPE_ICON_GLYPHS: Dict[str, Tuple[str, str]] = {
    "error": ("✖", "×"),
    "fatal": ("✖", "×"),
    "ready": ("✔", "√"),
    "warn": ("⚠", "‼"),
    "info": ("ℹ", "i"),
    "success": ("✔", "√"),
    "debug": ("⚙", "D"),
    "trace": ("→", "→"),
    "fail": ("✖", "×"),
    "start": ("◐", "o"),
    "log": ("", ""),
}

# Terminals narrower than this never get the two-column layout.
MIN_COLUMNS = 80

BACKTICK_RE = re.compile(r"`([^`]+)`", re.MULTILINE)
FRAME_AT_RE = re.compile(r"^at +")
FRAME_LOCATION_RE = re.compile(r"\((.+)\)")


def type_icons(unicode: bool) -> Dict[str, str]:
    return {name: glyphs[0] if unicode else glyphs[1] for name, glyphs in TYPE_ICON_GLYPHS.items()}


def resolve_type_color(record: LogRecord) -> str:
    """Type color, then level color, then gray."""
    return TYPE_COLOR_MAP.get(record.type) or LEVEL_COLOR_MAP.get(record.level) or DEFAULT_TYPE_COLOR


class FancyReporter(BasicReporter):
    """
    Colored reporter with icons, badges and a two-column layout.

    Messages go on the left; tag and time are right-aligned when the terminal
    is at least 80 columns wide and the line fits. Badges (uppercase type on a
    colored background) are used for warnings and errors unless the record
    says otherwise.
    """

    def __init__(self, environment: Optional[Environment] = None, palette: Optional[Palette] = None):
        super().__init__(environment=environment, palette=palette)
        self.icons = type_icons(self.environment.unicode)

    def highlight_backticks(self, text: str) -> str:
        return BACKTICK_RE.sub(lambda m: self.palette.cyan(m.group(1)), text)

    def format_stack(self, stack: str, opts: FormatOptions, message: str = "") -> str:
        indent = "  " * (opts.error_level + 1)
        lines = []
        for frame in parse_stack(stack, message):
            frame = FRAME_AT_RE.sub(lambda m: self.palette.gray(m.group(0)), frame)
            frame = FRAME_LOCATION_RE.sub(lambda m: f"({self.palette.cyan(m.group(1))})", frame)
            lines.append(indent + frame)
        return "\n".join(lines)

    def format_type(self, record: LogRecord, is_badge: bool, opts: FormatOptions) -> str:
        type_color = resolve_type_color(record)

        if is_badge:
            return self.palette.get_bg(type_color)(self.palette.black(f" {record.type.upper()} "))

        if record.type in self.icons:
            icon = self.icons[record.type]
        else:
            icon = record.icon or record.type

        return self.palette.get(type_color)(icon) if icon else ""

    def format_log_obj(self, record: LogRecord, opts: FormatOptions) -> str:
        message, *additional = self.format_args(record.args, opts).split("\n")

        if record.type == "box":
            return box(
                self.highlight_backticks("\n".join([message, *additional])),
                title=record.title,
                style=record.style,
                palette=self.palette,
            )

        date = self.format_date(record.date, opts)
        colored_date = self.palette.gray(date) if date else ""

        is_badge = record.badge if record.badge is not None else record.level < 2
        type_segment = self.format_type(record, is_badge, opts)
        tag = self.palette.gray(record.tag) if record.tag else ""

        wide = opts.columns >= MIN_COLUMNS
        left = self.filter_and_join([type_segment, self.highlight_backticks(message)])
        right = self.filter_and_join([tag, colored_date] if wide else [tag])
        space = opts.columns - visible_width(left) - visible_width(right) - 2

        if space > 0 and wide:
            line = left + " " * space + right
        else:
            line = (f"{self.palette.gray(f'[{right}]')} " if right else "") + left

        if additional:
            line += self.highlight_backticks("\n" + "\n".join(additional))

        if record.type == "trace":
            header = "Trace: " + (record.message or message)
            stack = self.format_stack(capture_stack(header), opts, header)
            if stack:
                line += "\n" + stack

        return "\n" + line + "\n" if is_badge else line
