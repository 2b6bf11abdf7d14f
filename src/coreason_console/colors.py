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
import unicodedata
from functools import lru_cache
from typing import Callable, Dict, Optional, Tuple

from coreason_console.environment import detect_environment

ColorFn = Callable[[str], str]

ESC = "\x1b["

# Regex pattern to strip ANSI escape sequences (CSI/SGR and OSC hyperlinks)
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")

# name -> (open, close, replacement for an embedded close)
STYLES: Dict[str, Tuple[str, str, Optional[str]]] = {
    "reset": (f"{ESC}0m", f"{ESC}0m", None),
    "bold": (f"{ESC}1m", f"{ESC}22m", f"{ESC}22m{ESC}1m"),
    "dim": (f"{ESC}2m", f"{ESC}22m", f"{ESC}22m{ESC}2m"),
    "italic": (f"{ESC}3m", f"{ESC}23m", None),
    "underline": (f"{ESC}4m", f"{ESC}24m", None),
    "inverse": (f"{ESC}7m", f"{ESC}27m", None),
    "hidden": (f"{ESC}8m", f"{ESC}28m", None),
    "strikethrough": (f"{ESC}9m", f"{ESC}29m", None),
}

_FOREGROUND = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

for _i, _name in enumerate(_FOREGROUND):
    STYLES[_name] = (f"{ESC}{30 + _i}m", f"{ESC}39m", None)
    STYLES[f"{_name}_bright"] = (f"{ESC}{90 + _i}m", f"{ESC}39m", None)
    STYLES[f"bg_{_name}"] = (f"{ESC}{40 + _i}m", f"{ESC}49m", None)
    STYLES[f"bg_{_name}_bright"] = (f"{ESC}{100 + _i}m", f"{ESC}49m", None)

STYLES["gray"] = (f"{ESC}90m", f"{ESC}39m", None)

# Border colors accepted by BoxStyle.
COLOR_NAMES = ("gray",) + _FOREGROUND + tuple(f"{n}_bright" for n in _FOREGROUND)


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def _char_width(char: str) -> int:
    if unicodedata.combining(char) or unicodedata.category(char) in ("Cc", "Cf", "Mn", "Me"):
        return 0
    return 2 if unicodedata.east_asian_width(char) in "WF" else 1


def visible_width(text: str) -> int:
    """Calculate the display width of a string in terminal columns, ignoring escape sequences."""
    return sum(_char_width(c) for c in strip_ansi(text))


def _formatter(open_code: str, close: str, replace: Optional[str]) -> ColorFn:
    # An embedded close would end the outer style early, so re-open it.
    reopen = replace if replace is not None else open_code

    def apply(text: str) -> str:
        text = str(text)
        if not text:
            return ""
        return open_code + text.replace(close, reopen) + close

    return apply


def _identity(text: str) -> str:
    return str(text)


class Palette:
    """
    Named style functions.

    A disabled palette returns text unchanged so output degrades to plain text.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._styles: Dict[str, ColorFn] = {
            name: _formatter(*codes) if enabled else _identity for name, codes in STYLES.items()
        }

    def __getattr__(self, name: str) -> ColorFn:
        styles = self.__dict__.get("_styles", {})
        if name in styles:
            return styles[name]
        raise AttributeError(name)

    def has(self, name: str) -> bool:
        return name in self._styles

    def get(self, name: Optional[str] = "white") -> ColorFn:
        """Returns the style function for `name`, falling back to white."""
        return self._styles.get(name or "white", self._styles["white"])

    def get_bg(self, name: Optional[str] = "white") -> ColorFn:
        """Returns the background function for a foreground color name, falling back to bg_white."""
        return self._styles.get(f"bg_{name or 'white'}", self._styles["bg_white"])


@lru_cache(maxsize=1)
def default_palette() -> Palette:
    """Palette matching the detected terminal color support."""
    return Palette(enabled=detect_environment().color)


def colorize(name: str, text: str, palette: Optional[Palette] = None) -> str:
    """
    Wraps `text` with the named style.

    Uses the process palette unless one is given, so text stays plain where
    the terminal has no color support.
    """
    return (palette or default_palette()).get(name)(text)
