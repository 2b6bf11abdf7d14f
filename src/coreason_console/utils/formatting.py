# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import json
import math
import re
from typing import Any, List

PLACEHOLDER_RE = re.compile(r"%([sdifjoOc%])")


def inspect(value: Any) -> str:
    return repr(value)


def stringify(value: Any) -> str:
    """Strings as-is, everything else through `inspect`."""
    return value if isinstance(value, str) else inspect(value)


def _number(value: Any) -> str:
    if isinstance(value, int):
        return str(int(value))
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "NaN"
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    return str(int(number)) if number.is_integer() else repr(number)


def _integer(value: Any) -> str:
    try:
        return str(int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _json(value: Any) -> str:
    try:
        return json.dumps(value, default=str)
    except ValueError:
        return "[Circular]"


def _convert(conversion: str, value: Any) -> str:
    if conversion == "s":
        return stringify(value)
    if conversion in ("d", "f"):
        return _number(value)
    if conversion == "i":
        return _integer(value)
    if conversion == "j":
        return _json(value)
    if conversion == "c":
        # CSS directives only apply to browser consoles
        return ""
    return inspect(value)


def format_args(*args: Any) -> str:
    """
    printf-style join of log arguments.

    When the first argument is a string, its `%s %d %i %f %j %o %O %c` placeholders
    consume the following arguments and `%%` yields `%`. Placeholders without a
    matching argument stay literal. Leftover arguments are appended space-separated.
    """
    if not args:
        return ""

    first, rest = args[0], list(args[1:])
    if not isinstance(first, str):
        return " ".join(stringify(a) for a in args)

    def substitute(match: "re.Match[str]") -> str:
        conversion = match.group(1)
        if conversion == "%":
            return "%"
        if not rest:
            return match.group(0)
        return _convert(conversion, rest.pop(0))

    parts: List[str] = [PLACEHOLDER_RE.sub(substitute, first)]
    parts.extend(stringify(a) for a in rest)
    return " ".join(parts)
