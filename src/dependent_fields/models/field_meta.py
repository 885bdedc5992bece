"""Field metadata handed to user callables during rendering."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .types import PageName


@dataclass(frozen=True, slots=True)
class FieldMeta:
    """What choice generators and badge selectors know about the field.

    ``entity`` is ``None`` when the field is rendered for a new entity.
    """

    property_name: str
    label: str | None
    value: object = None
    formatted_value: str | None = None
    entity: object | None = None
    page: PageName = PageName.EDIT

    def with_formatted_value(self, formatted: str | None) -> FieldMeta:
        """Return a copy carrying the formatted value."""
        return replace(self, formatted_value=formatted)


__all__ = ["FieldMeta"]
