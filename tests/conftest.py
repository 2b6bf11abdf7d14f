# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from datetime import datetime
from typing import Any, Optional

import pytest

from coreason_console.colors import Palette
from coreason_console.schemas import Environment, FormatOptions

# --- Mocks ---


class ErrorLike:
    """
    Error-shaped object carrying its own stack text and optional cause.
    """

    def __init__(self, message: str, stack: Optional[str] = None, cause: Any = None):
        self.message = message
        self.stack = stack if stack is not None else f"Error: {message}\n    at handler (/srv/app.js:10:5)"
        self.cause = cause


# --- Fixtures ---


@pytest.fixture
def plain_env() -> Environment:
    return Environment(color=False, unicode=True)


@pytest.fixture
def color_env() -> Environment:
    return Environment(color=True, unicode=True)


@pytest.fixture
def ascii_env() -> Environment:
    return Environment(color=False, unicode=False)


@pytest.fixture
def plain_palette() -> Palette:
    return Palette(enabled=False)


@pytest.fixture
def color_palette() -> Palette:
    return Palette(enabled=True)


@pytest.fixture
def fixed_date() -> datetime:
    return datetime(2025, 1, 1, 9, 30, 15)


@pytest.fixture
def no_date() -> FormatOptions:
    return FormatOptions(columns=0, date=False)


@pytest.fixture
def error_like() -> type:
    return ErrorLike
