"""Format choice values for index and detail pages."""

from __future__ import annotations

import html
import logging
from dataclasses import replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from dependent_fields.errors import InvalidArgumentError
from dependent_fields.models.defaults import DEFAULT_BADGE_TYPE, VALUE_SEPARATOR
from dependent_fields.models.options import ComputedBadges, PerValueBadges, UniformBadges
from dependent_fields.models.types import BadgeType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from dependent_fields.models.field_meta import FieldMeta
    from dependent_fields.models.options import BadgeSelector

logger = logging.getLogger(__name__)


def selected_values(value: object) -> list[object]:
    """Return the selected values of a single or multiple choice value."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def label_for(value: object, choices: Mapping[Any, Any]) -> str:
    """Return the label of ``value``, or its string form if it is not a choice."""
    for label, choice_value in choices.items():
        if choice_value == value:
            return str(label)
    if isinstance(value, Enum):
        for label, choice_value in choices.items():
            if choice_value == value.value:
                return str(label)
        return str(value.value)
    logger.warning("Value %r has no matching choice", value)
    return str(value)


def resolve_badge_type(selector: BadgeSelector | None, meta: FieldMeta) -> BadgeType | None:
    """Return the badge type for ``meta.value``, or ``None`` for plain text.

    Raises:
        InvalidArgumentError: If a computed selector returns an unknown type.

    """
    if selector is None:
        return None
    if isinstance(selector, UniformBadges):
        return DEFAULT_BADGE_TYPE if selector.enabled else None
    if isinstance(selector, PerValueBadges):
        key = meta.value
        if isinstance(key, Enum) and key not in selector.badges:
            key = key.value
        return BadgeType(selector.badges.get(key, DEFAULT_BADGE_TYPE))
    if isinstance(selector, ComputedBadges):
        result = selector.selector(meta)
        try:
            return BadgeType(result)
        except ValueError as e:
            raise InvalidArgumentError(
                f'The badge selector of field "{meta.property_name}" must return one of the following valid '
                f'badge types: "{", ".join(BadgeType.values())}" ("{result}" given).'
            ) from e
    raise TypeError(f"Unsupported badge selector: {selector!r}")


def format_value(
    meta: FieldMeta,
    choices: Mapping[Any, Any],
    *,
    selector: BadgeSelector | None,
    escape: bool,
) -> str | None:
    """Render the selected value(s) of a field as text or badge markup.

    Badge selectors are evaluated once per selected value, with ``meta.value``
    set to that value.
    """
    values = selected_values(meta.value)
    if not values:
        return None
    parts: list[str] = []
    for item in values:
        label = label_for(item, choices)
        if escape:
            label = html.escape(label)
        badge = resolve_badge_type(selector, replace(meta, value=item))
        parts.append(label if badge is None else f'<span class="{badge.css_class}">{label}</span>')
    return VALUE_SEPARATOR.join(parts)


__all__ = ["format_value", "label_for", "resolve_badge_type", "selected_values"]
