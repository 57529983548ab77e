from __future__ import annotations

from typing import Callable

import pytest

from pi.hop.document import Document
from pi.hop.modes import ModeManager
from pi.hop.viewport import Area


class ErrorSink:
    """Collects messages sent to the user-visible error channel."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def errors() -> ErrorSink:
    return ErrorSink()


@pytest.fixture
def make_host(errors: ErrorSink) -> Callable[..., ModeManager]:
    """Build a ModeManager over an in-memory document."""

    def _make(content: str, rows: int = 24, columns: int = 80) -> ModeManager:
        return ModeManager(Document(content), Area(rows=rows, columns=columns), on_error=errors)

    return _make
