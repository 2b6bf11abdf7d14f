# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from unittest.mock import patch

from typer.testing import CliRunner

from coreason_console import __version__
from coreason_console.colors import strip_ansi
from coreason_console.main import app, main

runner = CliRunner()


def test_main_version() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"coreason-console v{__version__}" in result.output


def test_main_log_basic() -> None:
    result = runner.invoke(app, ["log", "info", "hello", "--reporter", "basic"])

    assert result.exit_code == 0
    assert "[info] hello" in result.output


def test_main_log_with_tag_and_placeholders() -> None:
    result = runner.invoke(app, ["log", "info", "%s world", "hello", "--tag", "app", "--reporter", "basic"])

    assert result.exit_code == 0
    assert "[info] [app] hello world" in result.output


def test_main_log_fancy_badge() -> None:
    result = runner.invoke(app, ["log", "error", "boom", "--reporter", "fancy", "--no-date"])

    assert result.exit_code == 0
    assert " ERROR  boom" in strip_ansi(result.output)


def test_main_log_level_override() -> None:
    with patch("coreason_console.main.dispatch", return_value=[]) as mock_dispatch:
        result = runner.invoke(app, ["log", "custom", "x", "--level", "0", "--reporter", "basic"])

    assert result.exit_code == 0
    record = mock_dispatch.call_args[0][0]
    assert record.type == "custom"
    assert record.level == 0
    assert record.args == ("x",)


def test_main_log_columns_option() -> None:
    with patch("coreason_console.main.dispatch", return_value=[]) as mock_dispatch:
        runner.invoke(app, ["log", "info", "x", "--columns", "120", "--no-date"])

    ctx = mock_dispatch.call_args[0][2]
    assert ctx.format_options == {"date": False, "columns": 120}


def test_main_log_unknown_reporter() -> None:
    result = runner.invoke(app, ["log", "info", "x", "--reporter", "json"])
    assert result.exit_code != 0


def test_main_log_reporter_failure_exits_non_zero() -> None:
    with patch("coreason_console.main.dispatch", return_value=[(object(), RuntimeError("boom"))]):
        result = runner.invoke(app, ["log", "info", "x"])

    assert result.exit_code == 1


def test_main_box() -> None:
    result = runner.invoke(app, ["box", "hello", "--title", "Hi", "--border-style", "double"])

    assert result.exit_code == 0
    rows = strip_ansi(result.output).strip("\n").split("\n")
    assert rows[0] == "╔══Hi═════╗"
    assert "│" not in result.output
    assert any("hello" in row for row in rows)


def test_main_box_basic_reporter() -> None:
    result = runner.invoke(app, ["box", "hello", "--title", "Hi", "--reporter", "basic"])

    assert result.exit_code == 0
    assert " > Hi\n > hello\n" in result.output


def test_main_box_invalid_padding() -> None:
    result = runner.invoke(app, ["box", "hello", "--padding", "x"])
    assert result.exit_code != 0


def test_main_entry_point() -> None:
    with patch("coreason_console.main.app") as mock_app:
        main()
        mock_app.assert_called_once()
