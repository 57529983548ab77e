"""A read-only document view with hop bindings installed."""

from __future__ import annotations

import logging
from typing import Callable

from pi.hop.document import Document
from pi.hop.forms import CHAR1_FORM, CHAR2_FORM, HOP_FORM, FormRegistry
from pi.hop.keybindings import HopKeybindingsManager
from pi.hop.keys import matches_key, normalize_key_id
from pi.hop.modes import ModeManager
from pi.hop.patterns import compile_pattern
from pi.hop.render import render_area
from pi.hop.session import Hopper
from pi.hop.settings import HopSettings
from pi.hop.text import Span
from pi.hop.viewport import Area, PrintOptions

logger = logging.getLogger(__name__)


class HopViewer:
    """Component that shows a document and lets the user hop around it.

    ``w`` labels every word and ``l`` every line on screen; typing a label
    selects its match. Keys from ``settings.patterns`` label matches of
    their own regular expressions.
    """

    def __init__(
        self,
        content: str = "",
        *,
        rows: int = 24,
        settings: HopSettings | None = None,
        forms: FormRegistry | None = None,
        print_options: PrintOptions | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self.document = Document(content, print_options)
        self.area = Area(rows=rows, columns=80)
        self.forms = forms if forms is not None else FormRegistry()
        self.keybindings = HopKeybindingsManager()
        self.errors: list[str] = []
        self.on_error = on_error
        self.modes = ModeManager(self.document, self.area, on_error=self._report_error)
        self._patterns: dict[str, str] = {}
        self.plug(settings or HopSettings())

    def plug(self, settings: HopSettings) -> None:
        """Install bindings, custom patterns and forms from *settings*."""
        # Raises ValueError for a key id with unknown modifiers.
        for keys in settings.keybindings.values():
            for key_id in [keys] if isinstance(keys, str) else keys:
                normalize_key_id(key_id)
        self.keybindings.set_config(settings.keybindings)  # type: ignore[arg-type]
        self.forms.apply_config(settings.forms)
        self.forms.set_weak(HOP_FORM, "accent.info")
        self.forms.set_weak(CHAR2_FORM, CHAR1_FORM)

        for key, pattern in settings.patterns.items():
            normalize_key_id(key)
            # Raises PatternError for a malformed pattern.
            compile_pattern(pattern)
            self._patterns[key] = pattern
            logger.debug("custom hop pattern %r bound to %r", pattern, key)

    # -- Component protocol --------------------------------------------------

    def invalidate(self) -> None:
        pass

    def render(self, width: int) -> list[str]:
        self.area.columns = width
        return render_area(self.document, self.area, self.forms)

    def handle_input(self, data: str) -> None:
        if self.modes.active is not None:
            if self.keybindings.matches(data, "hopCancel"):
                self.modes.exit_current_mode()
            else:
                self.modes.send_key(data)
            return

        hopper = self._hopper_for(data)
        if hopper is not None:
            self.modes.enter_mode(hopper)

    # -- Accessors ------------------------------------------------------------

    def get_text(self) -> str:
        return str(self.document.text)

    def set_text(self, text: str) -> None:
        self.modes.exit_current_mode()
        self.document = Document(text, self.document.print_options)
        self.modes.document = self.document

    def scroll_to(self, line: int) -> None:
        self.area.top_line = max(line, 0)

    @property
    def selection(self) -> Span:
        return self.document.selections.primary.range

    @property
    def is_hopping(self) -> bool:
        return isinstance(self.modes.active, Hopper)

    # -- Internals -------------------------------------------------------------

    def _hopper_for(self, data: str) -> Hopper | None:
        if self.keybindings.matches(data, "hopWord"):
            return Hopper.word()
        if self.keybindings.matches(data, "hopLine"):
            return Hopper.line()
        for key, pattern in self._patterns.items():
            if matches_key(data, key):
                return Hopper.with_regex(pattern)
        return None

    def _report_error(self, message: str) -> None:
        self.errors.append(message)
        if self.on_error is not None:
            self.on_error(message)
