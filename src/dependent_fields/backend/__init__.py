"""Host-side resolution of declared fields."""

from .configurator import ResolvedField, configure, resolve_choices, resolve_label, resolve_widget
from .formatting import format_value, resolve_badge_type

__all__ = [
    "ResolvedField",
    "configure",
    "format_value",
    "resolve_badge_type",
    "resolve_choices",
    "resolve_label",
    "resolve_widget",
]
