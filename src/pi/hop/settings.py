"""Hop settings with JSON persistence.

Global settings live in ``~/.pi/hop.json``; a project's ``.pi/hop.json``
is merged over them. ``None`` values never override.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pi"
SETTINGS_FILE_NAME = "hop.json"


@dataclass
class HopSettings:
    """User-facing hop configuration.

    ``keybindings`` maps hop actions to key ids, ``forms`` maps form names to
    a referenced form name or a table of :class:`pi.hop.forms.Form` fields,
    and ``patterns`` maps a key id to a custom regular expression.
    """

    keybindings: dict[str, Any] = field(default_factory=dict)
    forms: dict[str, Any] = field(default_factory=dict)
    patterns: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HopSettings:
        return cls(
            keybindings=dict(data.get("keybindings") or {}),
            forms=dict(data.get("forms") or {}),
            patterns=dict(data.get("patterns") or {}),
        )


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into base settings.

    Nested dicts merge; any other override value wins completely.
    """
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge_settings(result[key], value)
        else:
            result[key] = value
    return result


def _load_from_file(path: str) -> tuple[dict[str, Any], Exception | None]:
    """Read a settings file. A missing file is empty; a broken one is reported."""
    if not os.path.exists(path):
        return {}, None
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("could not read hop settings from %s: %s", path, exc)
        return {}, exc
    if not isinstance(data, dict):
        exc = ValueError(f"{path}: top level must be an object")
        logger.warning("could not read hop settings: %s", exc)
        return {}, exc
    return data, None


SECTIONS = ("keybindings", "forms", "patterns")


def _drop_malformed_sections(
    data: dict[str, Any], path: str, errors: list[Exception]
) -> dict[str, Any]:
    """Remove sections that are not objects, recording an error for each."""
    result = dict(data)
    for key in SECTIONS:
        value = result.get(key)
        if value is not None and not isinstance(value, dict):
            exc = ValueError(f"{path}: '{key}' must be an object, got {type(value).__name__}")
            logger.warning("ignoring hop settings section: %s", exc)
            errors.append(exc)
            del result[key]
    return result


def _default_config_dir() -> str:
    return str(Path.home() / CONFIG_DIR_NAME)


def load_settings(
    cwd: str | None = None, config_dir: str | None = None
) -> tuple[HopSettings, list[Exception]]:
    """Load global then project settings and merge them.

    Returns the settings and any load errors; errors never stop loading.
    """
    errors: list[Exception] = []
    paths = [os.path.join(config_dir or _default_config_dir(), SETTINGS_FILE_NAME)]
    if cwd is not None:
        paths.append(os.path.join(cwd, CONFIG_DIR_NAME, SETTINGS_FILE_NAME))

    merged: dict[str, Any] = {}
    for path in paths:
        data, error = _load_from_file(path)
        if error is not None:
            errors.append(error)
        data = _drop_malformed_sections(data, path, errors)
        merged = deep_merge_settings(merged, data)

    return HopSettings.from_dict(merged), errors
