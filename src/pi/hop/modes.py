"""Mode dispatch: one active mode at a time receives every keystroke."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from pi.hop.document import Document
from pi.hop.keys import is_key_release
from pi.hop.viewport import Area

logger = logging.getLogger(__name__)


class Mode(Protocol):
    """Lifecycle callbacks a mode provides to the :class:`ModeManager`."""

    def on_enter(self, host: ModeManager) -> None:
        """Called once when the mode becomes active."""
        ...

    def send_key(self, host: ModeManager, data: str) -> None:
        """Handle one raw keystroke."""
        ...

    def before_exit(self, host: ModeManager) -> None:
        """Release everything the mode installed. Must be idempotent."""
        ...


class ModeManager:
    """Owns the active mode and the capabilities modes act through."""

    def __init__(
        self,
        document: Document,
        area: Area,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self.document = document
        self.area = area
        self._on_error = on_error
        self._active: Mode | None = None

    @property
    def active(self) -> Mode | None:
        return self._active

    def enter_mode(self, mode: Mode) -> None:
        """Make *mode* active, exiting the current one first.

        If ``on_enter`` raises, no mode is left active and the error
        propagates.
        """
        self.exit_current_mode()
        self._active = mode
        try:
            mode.on_enter(self)
        except Exception:
            if self._active is mode:
                self._active = None
            raise

    def send_key(self, data: str) -> bool:
        """Forward *data* to the active mode. Returns ``False`` when none is active."""
        mode = self._active
        if mode is None:
            return False
        if is_key_release(data):
            return True
        mode.send_key(self, data)
        return True

    def exit_current_mode(self) -> None:
        """Exit the active mode, if any. Calling this again is a no-op."""
        mode = self._active
        if mode is None:
            return
        self._active = None
        mode.before_exit(self)

    def report_error(self, message: str) -> None:
        logger.info("mode error: %s", message)
        if self._on_error is not None:
            self._on_error(message)
