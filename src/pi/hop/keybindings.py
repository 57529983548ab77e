"""Hop keybindings manager."""

from __future__ import annotations

from typing import Literal

from pi.hop.keys import KeyId, matches_key

HopAction = Literal[
    # Entry points, bound in the user key mode
    "hopWord",
    "hopLine",
    # While labels are shown
    "hopCancel",
]

HopKeybindingsConfig = dict[HopAction, KeyId | list[KeyId]]

DEFAULT_HOP_KEYBINDINGS: dict[HopAction, KeyId | list[KeyId]] = {
    "hopWord": "w",
    "hopLine": "l",
    "hopCancel": ["escape", "ctrl+c"],
}


class HopKeybindingsManager:
    """Maps hop actions to the keys that trigger them."""

    def __init__(self, config: HopKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[HopAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: HopKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for source in (DEFAULT_HOP_KEYBINDINGS, config):
            for action, keys in source.items():
                key_array = keys if isinstance(keys, list) else [keys]
                self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: HopAction) -> bool:
        """Check if input matches a specific action."""
        return any(matches_key(data, key) for key in self._action_to_keys.get(action, []))

    def get_keys(self, action: HopAction) -> list[KeyId]:
        return self._action_to_keys.get(action, [])

    def set_config(self, config: HopKeybindingsConfig) -> None:
        self._build_maps(config)
