"""Menu keybindings manager."""

from __future__ import annotations

from typing import Literal

from pi.menu.keys import KeyId, matches_key

MenuAction = Literal[
    # Option selection
    "selectUp",
    "selectDown",
    "selectConfirm",
    "selectCancel",
    # Submenu switching
    "nextMenu",
    "previousMenu",
]

MenuKeybindingsConfig = dict[MenuAction, KeyId | list[KeyId]]

DEFAULT_MENU_KEYBINDINGS: dict[MenuAction, KeyId | list[KeyId]] = {
    "selectUp": ["up", "k"],
    "selectDown": ["down", "j"],
    "selectConfirm": "enter",
    "selectCancel": ["escape", "ctrl+c", "q"],
    "nextMenu": ["right", "tab"],
    "previousMenu": ["left", "shift+tab"],
}


class MenuKeybindingsManager:
    """Maps menu actions to the keys that trigger them."""

    def __init__(self, config: MenuKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[MenuAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: MenuKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_MENU_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: MenuAction) -> bool:
        """Check if input matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        return any(matches_key(data, key) for key in keys)

    def action_for(self, data: str) -> MenuAction | None:
        """First action bound to *data*, in declaration order."""
        for action in self._action_to_keys:
            if self.matches(data, action):
                return action
        return None

    def get_keys(self, action: MenuAction) -> list[KeyId]:
        return self._action_to_keys.get(action, [])

    def set_config(self, config: MenuKeybindingsConfig) -> None:
        self._build_maps(config)


_global_menu_keybindings: MenuKeybindingsManager | None = None


def get_menu_keybindings() -> MenuKeybindingsManager:
    global _global_menu_keybindings
    if _global_menu_keybindings is None:
        _global_menu_keybindings = MenuKeybindingsManager()
    return _global_menu_keybindings


def set_menu_keybindings(manager: MenuKeybindingsManager) -> None:
    global _global_menu_keybindings
    _global_menu_keybindings = manager
