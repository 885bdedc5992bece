"""Dependent choice fields for admin forms."""

from .backend import ResolvedField, configure
from .errors import DependencyEncodingError, DependentFieldError, InvalidArgumentError
from .fields import DependentChoiceField
from .models import BadgeType, FieldConfig, FieldMeta, PageName, Widget

__all__ = [
    "BadgeType",
    "DependencyEncodingError",
    "DependentChoiceField",
    "DependentFieldError",
    "FieldConfig",
    "FieldMeta",
    "InvalidArgumentError",
    "PageName",
    "ResolvedField",
    "Widget",
    "configure",
]
