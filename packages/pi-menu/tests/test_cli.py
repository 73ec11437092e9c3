"""Tests for the pi-menu command line."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pi.menu.cli import main


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("PI_CONFIG_DIR", str(tmp_path))
    for name in ("PI_MENU_FONT", "PI_MENU_BORDER", "PI_MENU_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestMain:
    def test_no_subcommand_shows_help(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "banner" in result.output
        assert "demo" in result.output

    def test_bad_log_level(self, runner):
        result = runner.invoke(main, ["--log-level", "chatty", "fonts"])
        assert result.exit_code == 2


class TestFonts:
    def test_lists_fonts(self, runner):
        result = runner.invoke(main, ["fonts"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert [line.split()[0] for line in lines] == ["mono12", "bloody", "ansi_shadow", "alligator2"]
        assert " 51 glyphs" in lines[0]
        assert " 26 glyphs" in lines[1]


class TestBanner:
    def test_renders_frame(self, runner):
        result = runner.invoke(main, ["banner", "A", "--font", "mono12"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("\x1bc")
        assert "╔" in result.output
        assert "█" in result.output

    def test_without_border(self, runner):
        result = runner.invoke(main, ["banner", "HI", "--border", "none"])
        assert result.exit_code == 0
        assert "╔" not in result.output

    def test_fixed_size(self, runner):
        result = runner.invoke(main, ["banner", "HI", "--width", "12", "--height", "4", "--border", "single"])
        assert result.exit_code == 0
        rows = result.output[len("\x1bc"):].split("\n")
        assert rows[0] == "┌" + "─" * 10 + "┐"
        assert len(rows[3]) == 12

    @pytest.mark.parametrize(
        "args",
        [
            ["--font", "comic-sans"],
            ["--font", "plain"],
            ["--gradient", "plaid"],
            ["--border", "zigzag"],
        ],
    )
    def test_bad_parameters(self, runner, args):
        result = runner.invoke(main, ["banner", "HI", *args])
        assert result.exit_code == 2

    def test_empty_text(self, runner):
        result = runner.invoke(main, ["banner", "", "--border", "none"])
        assert result.exit_code == 0


class TestMessage:
    def test_plain_output_when_not_a_tty(self, runner):
        result = runner.invoke(main, ["message", "bob", "hello"])
        assert result.exit_code == 0
        assert result.output == "<bob> hello\n"


class TestAnimate:
    def test_needs_a_terminal(self, runner, monkeypatch):
        def no_size(*args):
            raise OSError("not a terminal")

        monkeypatch.setattr("os.get_terminal_size", no_size)
        result = runner.invoke(main, ["animate", "HI", "--frames", "1"])
        assert result.exit_code == 1
        assert "Error getting console size" in result.output


class TestConfigCommand:
    def test_show(self, runner, tmp_path):
        result = runner.invoke(main, ["config"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == f"# {tmp_path / 'menu.json'}"
        assert "font = mono12" in result.output

    def test_set_and_get(self, runner, tmp_path):
        result = runner.invoke(main, ["config", "font", "bloody"])
        assert result.exit_code == 0
        assert "Saved font = bloody" in result.output
        assert json.loads((tmp_path / "menu.json").read_text())["font"] == "bloody"

        result = runner.invoke(main, ["config", "font"])
        assert result.output == "bloody\n"

    def test_numeric_value(self, runner, tmp_path):
        result = runner.invoke(main, ["config", "top_padding", "3"])
        assert result.exit_code == 0
        assert json.loads((tmp_path / "menu.json").read_text())["top_padding"] == 3

    def test_unknown_key(self, runner):
        result = runner.invoke(main, ["config", "colour", "red"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("key, value", [("font", "comic-sans"), ("top_padding", "lots")])
    def test_invalid_value(self, runner, tmp_path, key, value):
        result = runner.invoke(main, ["config", key, value])
        assert result.exit_code == 1
        assert not (tmp_path / "menu.json").exists()
