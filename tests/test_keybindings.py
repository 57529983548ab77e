"""Tests for pi.hop.keybindings -- hop keybindings manager."""

from __future__ import annotations

from pi.hop.keybindings import DEFAULT_HOP_KEYBINDINGS, HopKeybindingsManager


class TestDefaultHopKeybindings:
    def test_entry_points(self) -> None:
        assert DEFAULT_HOP_KEYBINDINGS["hopWord"] == "w"
        assert DEFAULT_HOP_KEYBINDINGS["hopLine"] == "l"

    def test_cancel_keys(self) -> None:
        assert "escape" in DEFAULT_HOP_KEYBINDINGS["hopCancel"]


class TestHopKeybindingsManager:
    def test_defaults_match(self) -> None:
        kb = HopKeybindingsManager()
        assert kb.matches("w", "hopWord")
        assert kb.matches("l", "hopLine")
        assert kb.matches("\x1b", "hopCancel")
        assert kb.matches("\x03", "hopCancel")
        assert not kb.matches("w", "hopLine")

    def test_override(self) -> None:
        kb = HopKeybindingsManager({"hopWord": ["f", "ctrl+f"]})
        assert kb.matches("f", "hopWord")
        assert kb.matches("\x06", "hopWord")
        assert not kb.matches("w", "hopWord")
        assert kb.matches("l", "hopLine")

    def test_get_keys(self) -> None:
        assert HopKeybindingsManager().get_keys("hopLine") == ["l"]

    def test_set_config_resets_to_defaults_first(self) -> None:
        kb = HopKeybindingsManager({"hopWord": "f"})
        kb.set_config({})
        assert kb.get_keys("hopWord") == ["w"]
