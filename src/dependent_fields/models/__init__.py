"""Expose models and type definitions."""

from .config import FieldConfig
from .field_meta import FieldMeta
from .options import (
    BadgeSelector,
    ChoiceSource,
    ComputedBadges,
    ComputedChoices,
    FieldOptions,
    FormTypeAttributes,
    PerValueBadges,
    StaticChoices,
    UniformBadges,
)
from .types import BadgeType, PageName, Widget

__all__ = [
    "BadgeSelector",
    "BadgeType",
    "ChoiceSource",
    "ComputedBadges",
    "ComputedChoices",
    "FieldConfig",
    "FieldMeta",
    "FieldOptions",
    "FormTypeAttributes",
    "PageName",
    "PerValueBadges",
    "StaticChoices",
    "UniformBadges",
    "Widget",
]
