"""Tests for pi.menu.keybindings — menu keybindings manager."""

from __future__ import annotations

import pytest

from pi.menu.keybindings import (
    DEFAULT_MENU_KEYBINDINGS,
    MenuKeybindingsManager,
    get_menu_keybindings,
    set_menu_keybindings,
)


# ---------------------------------------------------------------------------
# DEFAULT_MENU_KEYBINDINGS constant
# ---------------------------------------------------------------------------


class TestDefaultMenuKeybindings:
    def test_actions(self):
        assert set(DEFAULT_MENU_KEYBINDINGS) == {
            "selectUp",
            "selectDown",
            "selectConfirm",
            "selectCancel",
            "nextMenu",
            "previousMenu",
        }

    def test_vim_keys(self):
        assert "k" in DEFAULT_MENU_KEYBINDINGS["selectUp"]
        assert "j" in DEFAULT_MENU_KEYBINDINGS["selectDown"]


# ---------------------------------------------------------------------------
# MenuKeybindingsManager
# ---------------------------------------------------------------------------


class TestMenuKeybindingsManager:
    @pytest.mark.parametrize(
        "data, action",
        [
            ("\x1b[A", "selectUp"),
            ("k", "selectUp"),
            ("\x1b[B", "selectDown"),
            ("j", "selectDown"),
            ("\r", "selectConfirm"),
            ("\x1b", "selectCancel"),
            ("\x03", "selectCancel"),
            ("q", "selectCancel"),
            ("\x1b[C", "nextMenu"),
            ("\t", "nextMenu"),
            ("\x1b[D", "previousMenu"),
            ("\x1b[Z", "previousMenu"),
        ],
    )
    def test_action_for_defaults(self, data, action):
        assert MenuKeybindingsManager().action_for(data) == action

    def test_unbound_key(self):
        assert MenuKeybindingsManager().action_for("x") is None

    def test_get_keys_normalizes_to_list(self):
        manager = MenuKeybindingsManager()
        assert manager.get_keys("selectConfirm") == ["enter"]
        assert manager.get_keys("selectUp") == ["up", "k"]

    def test_config_overrides_action(self):
        manager = MenuKeybindingsManager({"selectConfirm": ["space", "enter"]})
        assert manager.matches(" ", "selectConfirm")
        assert manager.matches("\r", "selectConfirm")
        assert manager.matches("\x1b[A", "selectUp")

    def test_set_config_rebuilds_from_defaults(self):
        manager = MenuKeybindingsManager({"selectUp": "w"})
        manager.set_config({"selectDown": "s"})
        assert manager.get_keys("selectUp") == ["up", "k"]
        assert manager.action_for("s") == "selectDown"
        assert manager.action_for("j") is None

    def test_unbinding_with_empty_list(self):
        manager = MenuKeybindingsManager({"selectCancel": []})
        assert not manager.matches("q", "selectCancel")
        assert manager.action_for("q") is None


class TestGlobalKeybindings:
    def test_get_returns_same_instance(self):
        assert get_menu_keybindings() is get_menu_keybindings()

    def test_set_replaces_global(self):
        manager = MenuKeybindingsManager({"selectUp": "w"})
        set_menu_keybindings(manager)
        assert get_menu_keybindings() is manager
        assert get_menu_keybindings().action_for("w") == "selectUp"
