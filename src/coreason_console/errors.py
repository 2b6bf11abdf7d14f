# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import os
import re
import traceback
from typing import Any, Iterable, List, Optional, Tuple

# Cause chains deeper than this are cut off.
MAX_CAUSE_DEPTH = 16

FRAME_RE = re.compile(r"^at\s+\S")

TRUNCATED_CIRCULAR = "circular cause"
TRUNCATED_DEPTH = "max cause depth reached"


def is_error_like(value: Any) -> bool:
    """Exceptions and any object carrying a string `stack`."""
    return isinstance(value, BaseException) or isinstance(getattr(value, "stack", None), str)


def get_message(err: Any) -> Optional[str]:
    """
    The human message of an error-like value.

    Python exceptions render as `Type: message`, mirroring the last line of a traceback.
    Returns None when the value carries no message of its own.
    """
    message = getattr(err, "message", None)
    if isinstance(message, str):
        return message
    if isinstance(err, BaseException):
        text = str(err)
        name = type(err).__name__
        return f"{name}: {text}" if text else name
    return None


def format_frames(frames: Iterable[traceback.FrameSummary]) -> List[str]:
    return [f"    at {fs.name} ({fs.filename}:{fs.lineno})" for fs in frames]


def get_stack(err: Any) -> str:
    """
    The stack trace text of an error-like value.

    Objects with a `stack` string are used as is. Exceptions get a stack built from
    their traceback, header line first and oldest call first.
    """
    stack = getattr(err, "stack", None)
    if isinstance(stack, str):
        return stack
    if isinstance(err, BaseException):
        header = get_message(err) or type(err).__name__
        frames = traceback.extract_tb(err.__traceback__) if err.__traceback__ else []
        return "\n".join([header] + format_frames(frames))
    return ""


def capture_stack(header: str, skip: int = 1) -> str:
    """
    Synthesizes a stack trace for the current call site.

    `skip` drops that many innermost frames (this function included).
    """
    frames = traceback.extract_stack()
    if skip > 0:
        frames = frames[:-skip]
    return "\n".join([header] + format_frames(frames))


def parse_stack(stack: str, message: str = "") -> List[str]:
    """
    Returns the frame lines of a stack trace.

    Drops the header (one line per message line), trims each frame, shortens
    paths relative to the working directory and discards non-frame lines.
    """
    cwd = os.getcwd() + os.sep
    header_lines = len(message.split("\n")) if message else 1
    frames = []
    for line in stack.split("\n")[header_lines:]:
        line = line.strip().replace("file://", "").replace(cwd, "")
        if FRAME_RE.match(line):
            frames.append(line)
    return frames


def get_cause(err: Any) -> Any:
    """
    The next error in the chain.

    An explicit `cause` attribute wins, then `raise ... from` and finally the
    implicit exception context unless it was suppressed.
    """
    cause = getattr(err, "cause", None)
    if cause is not None:
        return cause
    if isinstance(err, BaseException):
        if err.__cause__ is not None:
            return err.__cause__
        if err.__context__ is not None and not err.__suppress_context__:
            return err.__context__
    return None


def walk_causes(err: Any, max_depth: int = MAX_CAUSE_DEPTH) -> Tuple[List[Any], Optional[str]]:
    """
    Flattens a cause chain, root error first.

    Returns the chain and, when it was cut short, the truncation reason. A value
    seen twice is a cycle; chains longer than `max_depth` are cut at that depth.
    """
    chain: List[Any] = []
    seen = set()
    current = err
    while current is not None:
        if id(current) in seen:
            return chain, TRUNCATED_CIRCULAR
        if len(chain) >= max_depth:
            return chain, TRUNCATED_DEPTH
        seen.add(id(current))
        chain.append(current)
        current = get_cause(current)
    return chain, None
