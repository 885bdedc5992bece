"""Field builders."""

from .base import FieldBase
from .dependent_choice import VALID_BADGE_TYPES, DependentChoiceField

__all__ = ["VALID_BADGE_TYPES", "DependentChoiceField", "FieldBase"]
