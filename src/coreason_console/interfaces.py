# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from typing import Protocol, runtime_checkable

from coreason_console.schemas import LogContext, LogRecord


@runtime_checkable
class Reporter(Protocol):
    """
    Protocol for log reporters.
    """

    def log(self, record: LogRecord, ctx: LogContext) -> None:
        """
        Formats a record and writes it to the stream chosen from `ctx`.
        """
        ...
