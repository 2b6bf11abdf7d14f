# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import pytest

from coreason_console.box import BOX_STYLE_PRESETS, box, resolve_border, resolve_style, valign_offset
from coreason_console.colors import Palette, colorize, strip_ansi, visible_width
from coreason_console.schemas import BoxBorderStyle, BoxStyle


def _rows(text: str) -> list:
    return text.split("\n")


def test_box_two_lines_default_style(plain_palette: Palette) -> None:
    """Width comes from the longest line (6) plus padding (2); the rule is 10 wide."""
    result = box("line1\nline22", palette=plain_palette)

    assert _rows(result) == [
        "┌──────────┐",
        "│          │",
        "│  line1   │",
        "│  line22  │",
        "│          │",
        "└──────────┘",
    ]


def test_box_rows_share_visible_width(color_palette: Palette) -> None:
    text = colorize("red", "colored", color_palette) + "\nplain\n" + colorize("cyan", "x", color_palette)
    result = box(text, title=colorize("green", "Title", color_palette), palette=color_palette)

    widths = {visible_width(row) for row in _rows(result)}
    # widest line 7 + padding 2 = 9, offset 11, plus two border glyphs
    assert widths == {13}


def test_box_odd_padding_rounds_up(plain_palette: Palette) -> None:
    assert box("hi", style={"padding": 3}, palette=plain_palette) == box(
        "hi", style={"padding": 4}, palette=plain_palette
    )


def test_box_zero_padding(plain_palette: Palette) -> None:
    assert _rows(box("hi", style={"padding": 0}, palette=plain_palette)) == ["┌──┐", "│hi│", "└──┘"]


@pytest.mark.parametrize(
    "valign, expected_row",
    [
        # height = 1 line + 2 padding = 3
        ("center", 1),
        ("top", 0),
        ("bottom", 2),
    ],
)
def test_box_vertical_alignment(plain_palette: Palette, valign: str, expected_row: int) -> None:
    rows = _rows(box("hi", style={"valign": valign}, palette=plain_palette))
    middle = rows[1:-1]

    assert len(middle) == 3
    assert [i for i, row in enumerate(middle) if "hi" in row] == [expected_row]


def test_valign_offset_formulas() -> None:
    assert valign_offset("center", 7, 3, 4) == 2
    assert valign_offset("top", 7, 3, 4) == 0
    assert valign_offset("bottom", 7, 3, 4) == 4
    # unknown values align like bottom
    assert valign_offset("middle", 7, 3, 4) == 4


def test_box_title_centering(plain_palette: Palette) -> None:
    """width = 2 + 2 = 4, so the left fill is floor((4 - 1) / 2) = 1."""
    rows = _rows(box("hi", title="T", palette=plain_palette))

    assert rows[0] == "┌─T────┐"
    assert rows[-1] == "└──────┘"


def test_box_title_wider_than_text_expands_box(plain_palette: Palette) -> None:
    rows = _rows(box("hi", title="A much longer title", palette=plain_palette))

    assert rows[0].startswith("┌A much longer title")
    assert len({visible_width(row) for row in rows}) == 1
    assert visible_width(rows[0]) == len("A much longer title") + 2 + 2


def test_box_empty_text_is_well_formed(plain_palette: Palette) -> None:
    assert _rows(box("", palette=plain_palette)) == [
        "┌────┐",
        "│    │",
        "│    │",
        "│    │",
        "└────┘",
    ]


def test_box_border_color_applied(color_palette: Palette) -> None:
    rows = _rows(box("hi", style={"border_color": "red"}, palette=color_palette))

    assert rows[0].startswith("\x1b[31m┌\x1b[39m")
    assert rows[1].startswith("\x1b[31m│\x1b[39m")
    assert strip_ansi(rows[0]) == "┌──────┐"


def test_box_unknown_border_color_is_uncolored(color_palette: Palette) -> None:
    result = box("hi", style={"border_color": "chartreuse"}, palette=color_palette)
    assert "\x1b[" not in result


def test_box_named_preset(plain_palette: Palette) -> None:
    rows = _rows(box("hi", style={"border_style": "double"}, palette=plain_palette))
    assert rows[0] == "╔══════╗"
    assert rows[1][0] == "║"
    assert rows[-1] == "╚══════╝"


def test_box_unknown_preset_falls_back_to_solid(plain_palette: Palette) -> None:
    assert box("hi", style={"border_style": "zigzag"}, palette=plain_palette) == box("hi", palette=plain_palette)


def test_box_explicit_glyphs(plain_palette: Palette) -> None:
    glyphs = {"tl": "+", "tr": "+", "bl": "+", "br": "+", "h": "-", "v": "|"}
    rows = _rows(box("hi", style={"border_style": glyphs}, palette=plain_palette))

    assert rows == ["+------+", "|      |", "|  hi  |", "|      |", "+------+"]


def test_presets_define_all_glyphs() -> None:
    assert set(BOX_STYLE_PRESETS) == {
        "solid",
        "double",
        "double-single",
        "double-single-rounded",
        "single-thick",
        "single-double",
        "single-double-rounded",
        "rounded",
    }
    for preset in BOX_STYLE_PRESETS.values():
        glyphs = preset.model_dump()
        assert set(glyphs) == {"tl", "tr", "bl", "br", "h", "v"}
        assert all(visible_width(g) == 1 for g in glyphs.values())


def test_resolve_style_merges_partial_mapping() -> None:
    style = resolve_style({"padding": 0})
    assert style.padding == 0
    assert style.border_style == "solid"
    assert style.valign == "center"
    assert resolve_style(None) == BoxStyle()


def test_resolve_border_colors_every_glyph(color_palette: Palette) -> None:
    border = resolve_border(BoxStyle(border_color="blue"), color_palette)
    assert isinstance(border, BoxBorderStyle)
    for glyph in border.model_dump().values():
        assert glyph.startswith("\x1b[34m")
        assert visible_width(glyph) == 1
