# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

"""
coreason-console
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .box import box
from .colors import Palette, colorize, strip_ansi, visible_width
from .levels import LogLevels
from .pipeline import create_record, create_reporter, dispatch, format_record
from .reporters import BasicReporter, FancyReporter
from .schemas import BoxBorderStyle, BoxStyle, Environment, FormatOptions, LogContext, LogRecord

__all__ = [
    "BasicReporter",
    "FancyReporter",
    "LogRecord",
    "LogContext",
    "FormatOptions",
    "BoxStyle",
    "BoxBorderStyle",
    "Environment",
    "LogLevels",
    "Palette",
    "box",
    "colorize",
    "strip_ansi",
    "visible_width",
    "create_record",
    "create_reporter",
    "dispatch",
    "format_record",
]
