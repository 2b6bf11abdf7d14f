# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from typing import Any, Dict, List, Mapping, Optional, Union

from coreason_console.colors import COLOR_NAMES, Palette, default_palette, visible_width
from coreason_console.schemas import BoxBorderStyle, BoxStyle
from coreason_console.utils.logger import logger

BOX_STYLE_PRESETS: Dict[str, BoxBorderStyle] = {
    "solid": BoxBorderStyle(tl="┌", tr="┐", bl="└", br="┘", h="─", v="│"),
    "double": BoxBorderStyle(tl="╔", tr="╗", bl="╚", br="╝", h="═", v="║"),
    "double-single": BoxBorderStyle(tl="╓", tr="╖", bl="╙", br="╜", h="─", v="║"),
    "double-single-rounded": BoxBorderStyle(tl="╭", tr="╮", bl="╰", br="╯", h="─", v="║"),
    "single-thick": BoxBorderStyle(tl="┏", tr="┓", bl="┗", br="┛", h="━", v="┃"),
    "single-double": BoxBorderStyle(tl="╒", tr="╕", bl="╘", br="╛", h="═", v="│"),
    "single-double-rounded": BoxBorderStyle(tl="╭", tr="╮", bl="╰", br="╯", h="═", v="│"),
    "rounded": BoxBorderStyle(tl="╭", tr="╮", bl="╰", br="╯", h="─", v="│"),
}

DEFAULT_BORDER_STYLE = "solid"


def resolve_style(style: Union[BoxStyle, Mapping[str, Any], None]) -> BoxStyle:
    """Merges a partial style over the defaults."""
    if style is None:
        return BoxStyle()
    if isinstance(style, BoxStyle):
        return style
    return BoxStyle(**style)


def resolve_border(style: BoxStyle, palette: Palette) -> BoxBorderStyle:
    """
    Returns the border glyphs for `style`, each wrapped in the border color.

    Unknown preset names fall back to the solid preset; unknown colors leave the
    glyphs uncolored.
    """
    if isinstance(style.border_style, BoxBorderStyle):
        glyphs = style.border_style
    else:
        preset = BOX_STYLE_PRESETS.get(style.border_style)
        if preset is None:
            logger.debug(f"Unknown box border style '{style.border_style}', using '{DEFAULT_BORDER_STYLE}'")
            preset = BOX_STYLE_PRESETS[DEFAULT_BORDER_STYLE]
        glyphs = preset

    if style.border_color not in COLOR_NAMES:
        return glyphs

    color = palette.get(style.border_color)
    return BoxBorderStyle(**{key: color(glyph) for key, glyph in glyphs.model_dump().items()})


def valign_offset(valign: str, height: int, line_count: int, padding: int) -> int:
    """Row index of the first text line inside a box of `height` rows."""
    if valign == "center":
        return (height - line_count) // 2
    if valign == "top":
        return height - line_count - padding
    return height - line_count


def box(
    text: str,
    title: Optional[str] = None,
    style: Union[BoxStyle, Mapping[str, Any], None] = None,
    palette: Optional[Palette] = None,
) -> str:
    """
    Draws a border around `text`.

    Every row has the same visible width, whatever color codes the text or
    title carry. Odd padding is rounded up to keep left and right padding equal.
    A title wider than the text widens the box to fit it.

    Args:
        text: The content, possibly multi-line and colorized.
        title: Optional text centered in the top border.
        style: A BoxStyle or a partial mapping of its fields.
        palette: Color functions; defaults to the process palette.
    """
    opts = resolve_style(style)
    border = resolve_border(opts, palette or default_palette())

    text_lines = text.split("\n")
    padding = opts.padding if opts.padding % 2 == 0 else opts.padding + 1
    title_width = visible_width(title) if title else 0

    height = len(text_lines) + padding
    width = max(max(visible_width(line) for line in text_lines) + padding, title_width)
    width_offset = width + padding

    box_lines: List[str] = []

    if title:
        left = (width - title_width) // 2
        right = width - title_width - left + padding
        box_lines.append(f"{border.tl}{border.h * left}{title}{border.h * right}{border.tr}")
    else:
        box_lines.append(f"{border.tl}{border.h * width_offset}{border.tr}")

    offset = valign_offset(opts.valign, height, len(text_lines), padding)
    for i in range(height):
        if i < offset or i >= offset + len(text_lines):
            box_lines.append(f"{border.v}{' ' * width_offset}{border.v}")
        else:
            line = text_lines[i - offset]
            fill = " " * (width - visible_width(line))
            box_lines.append(f"{border.v}{' ' * padding}{line}{fill}{border.v}")

    box_lines.append(f"{border.bl}{border.h * width_offset}{border.br}")

    return "\n".join(box_lines)
