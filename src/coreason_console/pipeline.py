# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from coreason_console.environment import detect_environment
from coreason_console.interfaces import Reporter
from coreason_console.levels import level_for_type
from coreason_console.reporters import BasicReporter, FancyReporter
from coreason_console.schemas import Environment, FormatOptions, LogContext, LogRecord
from coreason_console.utils.logger import logger


def create_reporter(environment: Optional[Environment] = None) -> BasicReporter:
    """
    Picks the default reporter: plain output under CI or tests, fancy otherwise.
    """
    env = environment or detect_environment()
    if env.ci or env.test:
        return BasicReporter(environment=env)
    return FancyReporter(environment=env)


def create_record(log_type: str, *args: Any, **fields: Any) -> LogRecord:
    """
    Builds a record for `log_type`, defaulting its level from the type.
    """
    fields.setdefault("level", level_for_type(log_type))
    return LogRecord(type=log_type, args=args, **fields)


def dispatch(
    record: LogRecord,
    reporters: Sequence[Reporter],
    ctx: Optional[LogContext] = None,
) -> List[Tuple[Reporter, Exception]]:
    """
    Hands `record` to every reporter in registration order.

    A failing reporter is logged and skipped; the remaining reporters still run.
    Returns the failures.
    """
    context = ctx or LogContext()
    failures: List[Tuple[Reporter, Exception]] = []
    for reporter in reporters:
        try:
            reporter.log(record, context)
        except Exception as e:
            logger.exception(f"Reporter {type(reporter).__name__} failed on '{record.type}' record")
            failures.append((reporter, e))
    return failures


def format_record(
    record: LogRecord,
    reporter: Optional[BasicReporter] = None,
    options: Union[FormatOptions, Dict[str, Any], None] = None,
) -> str:
    """
    Formats a record to text without writing it anywhere.
    """
    reporter = reporter or create_reporter()
    if options is None:
        opts = FormatOptions()
    elif isinstance(options, FormatOptions):
        opts = options
    else:
        opts = FormatOptions(**options)
    return reporter.format_log_obj(record, opts)
