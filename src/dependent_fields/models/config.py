"""Immutable configuration produced by field builders."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dependent_fields.tools.helpers import freeze

from .defaults import CHOICE_CONFIGURATOR, CHOICE_FORM_TYPE
from .options import FieldOptions, FormTypeAttributes


class FieldConfig(BaseModel):
    """Declared configuration of one form field.

    ``label`` is a string, ``False`` to hide the label, or ``None`` to derive it
    from ``property_name`` when the field is rendered. Nested form-type options
    are stored as read-only mappings and tuples.
    """

    property_name: str = Field(min_length=1)
    label: str | Literal[False] | None = None
    help: str | None = None
    form_type: str = CHOICE_FORM_TYPE
    configurator: str = CHOICE_CONFIGURATOR
    css_classes: tuple[str, ...] = ()
    options: FieldOptions = Field(default_factory=FieldOptions)
    attributes: FormTypeAttributes = Field(default_factory=FormTypeAttributes)
    form_type_options: Mapping[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("form_type_options")
    @classmethod
    def freeze_form_type_options(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze(v)

    @property
    def option_bag(self) -> dict[str, object]:
        """String-keyed custom options, as read by renderers."""
        return self.options.as_option_bag()


__all__ = ["FieldConfig"]
