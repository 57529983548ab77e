"""Named text styles ("forms") with inheritance.

A form is either a concrete :class:`Form` or a reference to another form's
name. Unset dotted names fall back to their parent, so ``hop.one_char``
looks like ``hop`` until it is set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from pi.hop.utils import RESET

HOP_FORM = "hop"
ONE_CHAR_FORM = "hop.one_char"
CHAR1_FORM = "hop.char1"
CHAR2_FORM = "hop.char2"
CLOAK_FORM = "cloak"

HOP_FORMS = (HOP_FORM, ONE_CHAR_FORM, CHAR1_FORM, CHAR2_FORM)

_COLORS: dict[str, int] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "grey": 90,
    "bright_red": 91,
    "bright_green": 92,
    "bright_yellow": 93,
    "bright_blue": 94,
    "bright_magenta": 95,
    "bright_cyan": 96,
    "bright_white": 97,
}


def _color_code(color: str, background: bool) -> str:
    if color.startswith("#") and len(color) == 7:
        r, g, b = (int(color[i : i + 2], 16) for i in (1, 3, 5))
        return f"{48 if background else 38};2;{r};{g};{b}"
    if color not in _COLORS:
        raise ValueError(f"unknown color: {color}")
    code = _COLORS[color]
    return str(code + 10 if background else code)


@dataclass(frozen=True)
class Form:
    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    reverse: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Form:
        return cls(
            fg=data.get("fg"),
            bg=data.get("bg"),
            bold=bool(data.get("bold", False)),
            dim=bool(data.get("dim", False)),
            italic=bool(data.get("italic", False)),
            underline=bool(data.get("underline", False)),
            reverse=bool(data.get("reverse", False)),
        )

    @property
    def sgr(self) -> str:
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.dim:
            codes.append("2")
        if self.italic:
            codes.append("3")
        if self.underline:
            codes.append("4")
        if self.reverse:
            codes.append("7")
        if self.fg:
            codes.append(_color_code(self.fg, background=False))
        if self.bg:
            codes.append(_color_code(self.bg, background=True))
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def apply(self, text: str) -> str:
        sgr = self.sgr
        if not sgr or not text:
            return text
        return f"{sgr}{text}{RESET}"


FormSpec = Union[Form, str]

DEFAULT_FORMS: dict[str, FormSpec] = {
    "default": Form(),
    "accent": Form(bold=True),
    "accent.info": Form(fg="cyan", bold=True),
    CLOAK_FORM: Form(fg="grey"),
}


class FormRegistry:
    """Resolves form names to styling functions."""

    def __init__(self, forms: dict[str, FormSpec] | None = None) -> None:
        self._forms: dict[str, FormSpec] = dict(DEFAULT_FORMS if forms is None else forms)
        self._weak: set[str] = set()

    def set(self, name: str, form: FormSpec) -> None:
        """Set *name*, replacing any previous value."""
        self._forms[name] = form
        self._weak.discard(name)

    def set_weak(self, name: str, form: FormSpec) -> None:
        """Set *name* only if nothing but another weak set has claimed it."""
        if name in self._forms and name not in self._weak:
            return
        self._forms[name] = form
        self._weak.add(name)

    def is_set(self, name: str) -> bool:
        return name in self._forms

    def resolve(self, name: str) -> Form:
        seen: set[str] = set()
        current = name
        while current not in seen:
            seen.add(current)
            spec = self._forms.get(current)
            if isinstance(spec, Form):
                return spec
            if isinstance(spec, str):
                current = spec
                continue
            if "." not in current:
                break
            current = current.rsplit(".", 1)[0]
        return Form()

    def style(self, name: str) -> Callable[[str], str]:
        return self.resolve(name).apply

    def apply_config(self, forms: dict[str, Any]) -> None:
        """Apply user form settings: a name, or a dict of :class:`Form` fields."""
        for name, value in forms.items():
            if isinstance(value, str):
                self.set(name, value)
            elif isinstance(value, dict):
                self.set(name, Form.from_dict(value))
            else:
                raise ValueError(f"form {name!r} must be a name or a table, got {value!r}")


def plain_forms() -> FormRegistry:
    """A registry where every form renders text unchanged."""
    return FormRegistry({})
