"""pi-hop: jump to any word or line on screen with one or two keystrokes."""

from pi.hop.document import Document, Selection, Selections
from pi.hop.errors import HopError, LabelCapacityError, PatternError
from pi.hop.forms import Form, FormRegistry, plain_forms
from pi.hop.keybindings import (
    DEFAULT_HOP_KEYBINDINGS,
    HopAction,
    HopKeybindingsManager,
)
from pi.hop.keys import matches_key, parse_key
from pi.hop.labels import LETTERS, generate_labels
from pi.hop.modes import Mode, ModeManager
from pi.hop.overlay import OverlayManager
from pi.hop.patterns import LINE_PATTERN, WORD_PATTERN, locate_matches
from pi.hop.session import Hopper, HopState
from pi.hop.settings import HopSettings, load_settings
from pi.hop.tags import Conceal, Ghost, Marker, Tagger, TagStore
from pi.hop.text import Point, Text
from pi.hop.viewer import HopViewer
from pi.hop.viewport import Area, PrintOptions, visible_range

__all__ = [
    # Document
    "Document",
    "Point",
    "Selection",
    "Selections",
    "Text",
    # Errors
    "HopError",
    "LabelCapacityError",
    "PatternError",
    # Forms
    "Form",
    "FormRegistry",
    "plain_forms",
    # Keys
    "DEFAULT_HOP_KEYBINDINGS",
    "HopAction",
    "HopKeybindingsManager",
    "matches_key",
    "parse_key",
    # Hop engine
    "LETTERS",
    "LINE_PATTERN",
    "WORD_PATTERN",
    "HopState",
    "Hopper",
    "OverlayManager",
    "generate_labels",
    "locate_matches",
    # Modes
    "Mode",
    "ModeManager",
    # Settings
    "HopSettings",
    "load_settings",
    # Tags
    "Conceal",
    "Ghost",
    "Marker",
    "TagStore",
    "Tagger",
    # Viewer
    "HopViewer",
    "Area",
    "PrintOptions",
    "visible_range",
]
