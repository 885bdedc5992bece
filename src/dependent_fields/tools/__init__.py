"""Shared helper utilities."""

from .helpers import freeze, has_dotted, humanize_property_name, set_dotted, thaw

__all__ = ["freeze", "has_dotted", "humanize_property_name", "set_dotted", "thaw"]
