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
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BoxBorderStyle(BaseModel):
    """
    The six glyphs of a box border.
    """

    model_config = ConfigDict(frozen=True)

    tl: str
    tr: str
    bl: str
    br: str
    h: str
    v: str


class BoxStyle(BaseModel):
    """
    Visual style of a box.

    border_color: one of black, red, green, yellow, blue, magenta, cyan, white,
        gray or a `*_bright` variant. Unknown names render uncolored.
    border_style: a preset name (see `box.BOX_STYLE_PRESETS`) or explicit glyphs.
    valign: "top", "center" or "bottom".
    padding: inner padding, rounded up to an even number when rendering.
    """

    border_color: str = "white"
    border_style: Union[BoxBorderStyle, str] = "solid"
    valign: str = "center"
    padding: int = 2

    @field_validator("padding")
    @classmethod
    def _clamp_padding(cls, v: int) -> int:
        return max(v, 0)


class LogRecord(BaseModel):
    """
    A single log event as handed to reporters.

    Created once per log call; reporters only read it.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: str = "log"
    level: int = 2
    args: Tuple[Any, ...] = ()
    tag: str = ""
    date: datetime = Field(default_factory=datetime.now)
    title: Optional[str] = None
    style: Optional[BoxStyle] = None
    badge: Optional[bool] = None
    icon: Optional[str] = None
    message: Optional[str] = None


class FormatOptions(BaseModel):
    columns: int = 0
    date: bool = True
    error_level: int = Field(default=0, ge=0)


class LogContext(BaseModel):
    """
    Delivery context for a record: target streams plus format overrides.

    Streams left as None resolve to sys.stdout / sys.stderr at write time.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stdout: Optional[Any] = None
    stderr: Optional[Any] = None
    format_options: Dict[str, Any] = Field(default_factory=dict)


class Environment(BaseModel):
    """
    Terminal capabilities, detected once per process.
    """

    model_config = ConfigDict(frozen=True)

    color: bool = False
    unicode: bool = True
    ci: bool = False
    test: bool = False
    columns: int = 0
