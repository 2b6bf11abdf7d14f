# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from typing import Dict


class LogLevels:
    """
    Numeric severities. Lower is more severe.

    Reporters route WARN and anything more severe to stderr.
    """

    SILENT = -999
    FATAL = 0
    ERROR = 0
    WARN = 1
    LOG = 2
    INFO = 3
    SUCCESS = 3
    FAIL = 3
    READY = 3
    START = 3
    BOX = 3
    DEBUG = 4
    TRACE = 5
    VERBOSE = 999


# Default level for each known log type.
LOG_TYPES: Dict[str, int] = {
    "silent": LogLevels.SILENT,
    "fatal": LogLevels.FATAL,
    "error": LogLevels.ERROR,
    "warn": LogLevels.WARN,
    "log": LogLevels.LOG,
    "info": LogLevels.INFO,
    "success": LogLevels.SUCCESS,
    "fail": LogLevels.FAIL,
    "ready": LogLevels.READY,
    "start": LogLevels.START,
    "box": LogLevels.BOX,
    "debug": LogLevels.DEBUG,
    "trace": LogLevels.TRACE,
    "verbose": LogLevels.VERBOSE,
}


def level_for_type(log_type: str, default: int = LogLevels.LOG) -> int:
    """Returns the default level for a log type, or `default` for unknown types."""
    return LOG_TYPES.get(log_type, default)
