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
import sys
from functools import lru_cache
from typing import Any, Mapping, Optional

from coreason_console.schemas import Environment
from coreason_console.utils.logger import logger

CI_VARIABLES = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "BUILD_NUMBER",
    "RUN_ID",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "BUILDKITE",
    "CIRCLECI",
    "JENKINS_URL",
    "TF_BUILD",
)

UNICODE_TERM_PROGRAMS = ("Terminus-Sublime", "vscode")
UNICODE_TERMS = ("xterm-256color", "alacritty")


def _is_truthy(value: Optional[str]) -> bool:
    return value is not None and value != "" and value.lower() not in ("0", "false", "no")


def is_ci(environ: Mapping[str, str]) -> bool:
    return any(_is_truthy(environ.get(name)) for name in CI_VARIABLES)


def is_test(environ: Mapping[str, str]) -> bool:
    return "PYTEST_CURRENT_TEST" in environ or environ.get("ENV", "").lower() == "test"


def is_unicode_supported(environ: Mapping[str, str], platform: str = sys.platform) -> bool:
    """
    Whether the terminal can draw unicode glyphs.

    Everything except the Linux console does on POSIX. On Windows only a known
    set of modern terminals do.
    """
    term = environ.get("TERM", "")
    if platform != "win32":
        return term != "linux"

    return (
        bool(environ.get("WT_SESSION"))
        or bool(environ.get("TERMINUS_SUBLIME"))
        or environ.get("ConEmuTask") == "{cmd::Cmder}"
        or environ.get("TERM_PROGRAM", "") in UNICODE_TERM_PROGRAMS
        or term in UNICODE_TERMS
        or environ.get("TERMINAL_EMULATOR") == "JetBrains-JediTerm"
    )


def is_color_supported(environ: Mapping[str, str], isatty: bool, platform: str = sys.platform) -> bool:
    """
    Whether ANSI colors should be emitted.

    NO_COLOR always wins; FORCE_COLOR, Windows, a non-dumb TTY or a CI run enable color.
    """
    if "NO_COLOR" in environ:
        return False
    return (
        "FORCE_COLOR" in environ
        or platform == "win32"
        or (isatty and environ.get("TERM") != "dumb")
        or is_ci(environ)
    )


def stream_columns(stream: Any) -> int:
    """Terminal width of `stream`, or 0 when it is not attached to a terminal."""
    try:
        if stream is not None and stream.isatty():
            return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return 0
    return 0


def build_environment(environ: Mapping[str, str], isatty: bool, columns: int = 0) -> Environment:
    return Environment(
        color=is_color_supported(environ, isatty),
        unicode=is_unicode_supported(environ),
        ci=is_ci(environ),
        test=is_test(environ),
        columns=columns,
    )


@lru_cache(maxsize=1)
def detect_environment() -> Environment:
    """
    Detects the process terminal capabilities once.

    The result is cached for the lifetime of the process.
    """
    isatty = bool(getattr(sys.stdout, "isatty", lambda: False)())
    env = build_environment(os.environ, isatty, columns=stream_columns(sys.stdout))
    logger.debug(f"Detected console environment: {env}")
    return env
