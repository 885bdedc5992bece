"""Generic builder state shared by admin form fields."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, Literal, Self

from pydantic import ValidationError

from dependent_fields.errors import InvalidArgumentError, describe_type
from dependent_fields.models.config import FieldConfig
from dependent_fields.models.defaults import CHOICE_CONFIGURATOR, CHOICE_FORM_TYPE
from dependent_fields.models.options import FieldOptions, FormTypeAttributes, convert_custom_option
from dependent_fields.tools.helpers import has_dotted, set_dotted

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class FieldBase:
    """Accumulate the configuration of one form field.

    Setters mutate the builder and return it for chaining. Option snapshots are
    immutable models, so a setter that raises leaves the previous snapshot in
    place and ``build()`` never shares state with the builder.
    """

    def __init__(self) -> None:
        """Start with an unnamed field and default options."""
        self._property_name: str | None = None
        self._label: str | Literal[False] | None = None
        self._help: str | None = None
        self._form_type = CHOICE_FORM_TYPE
        self._configurator = CHOICE_CONFIGURATOR
        self._css_classes: list[str] = []
        self._form_type_options: dict[str, Any] = {}
        self._options = FieldOptions()
        self._attributes = FormTypeAttributes()

    @property
    def property_name(self) -> str | None:
        """Name of the entity property the field edits."""
        return self._property_name

    @property
    def options(self) -> FieldOptions:
        """Current custom options."""
        return self._options

    @property
    def attributes(self) -> FormTypeAttributes:
        """Current client-side data attributes."""
        return self._attributes

    @property
    def css_classes(self) -> tuple[str, ...]:
        """CSS classes added so far, in insertion order."""
        return tuple(self._css_classes)

    @property
    def form_type_options(self) -> dict[str, Any]:
        """Copy of the form-type options set so far."""
        return copy.deepcopy(self._form_type_options)

    def set_property(self, property_name: str) -> Self:
        """Set the entity property edited by the field."""
        if not isinstance(property_name, str) or not property_name.strip():
            raise InvalidArgumentError(
                f'The property name passed to "{type(self).__name__}.set_property" must be a non-empty string '
                f'("{property_name}" given).'
            )
        self._property_name = property_name
        return self

    def set_label(self, label: str | Literal[False] | None) -> Self:
        """Set the label; ``False`` hides it and ``None`` derives it."""
        self._label = label
        return self

    def set_help(self, help_text: str | None) -> Self:
        """Set the help text rendered below the input."""
        self._help = help_text
        return self

    def set_form_type(self, form_type: str) -> Self:
        """Set the form type that renders the input."""
        self._form_type = form_type
        return self

    def set_configurator(self, configurator: str) -> Self:
        """Select the configurator that resolves the field."""
        self._configurator = configurator
        return self

    def add_css_class(self, css_class: str) -> Self:
        """Add a CSS class to the field wrapper, ignoring duplicates."""
        for name in css_class.split():
            if name not in self._css_classes:
                self._css_classes.append(name)
        return self

    def set_form_type_option(self, path: str, value: object) -> Self:
        """Set a form-type option; dotted paths write into nested mappings."""
        set_dotted(self._form_type_options, path, value)
        return self

    def set_form_type_option_if_not_set(self, path: str, value: object) -> Self:
        """Set a form-type option unless it already has a value."""
        if not has_dotted(self._form_type_options, path):
            set_dotted(self._form_type_options, path, value)
        return self

    def set_form_type_options(self, options: Mapping[str, object]) -> Self:
        """Set several form-type options at once."""
        for path, value in options.items():
            self.set_form_type_option(path, value)
        return self

    def set_custom_option(self, name: str, value: object) -> Self:
        """Set one custom option by attribute name or option-bag key.

        Values read from an option bag are accepted as they are, so
        ``choices`` and ``renderAsBadges`` take the same shapes as their
        dedicated setters.

        Raises:
            InvalidArgumentError: If the option is unknown or the value does
                not fit the option's type.

        """
        field_name = FieldOptions.field_name_for(name)
        if field_name is None:
            raise InvalidArgumentError(
                f'Unknown custom option "{name}" passed to "{type(self).__name__}.set_custom_option".'
            )
        converted = convert_custom_option(field_name, value, method=f"{type(self).__name__}.set_custom_option")
        try:
            self._replace_options(**{field_name: converted})
        except ValidationError as e:
            raise InvalidArgumentError(
                f'Invalid value for custom option "{name}" ("{describe_type(value)}" given).'
            ) from e
        return self

    def _replace_options(self, **updates: object) -> None:
        self._options = self._options.replace(**updates)
        logger.debug("Field %s options updated: %s", self._property_name, ", ".join(updates))

    def _replace_attributes(self, **updates: object) -> None:
        self._attributes = self._attributes.model_copy(update=updates)
        logger.debug("Field %s attributes updated: %s", self._property_name, ", ".join(updates))

    def build(self) -> FieldConfig:
        """Return the immutable configuration declared so far."""
        if self._property_name is None:
            raise InvalidArgumentError(f'"{type(self).__name__}.build" requires a property name.')
        return FieldConfig(
            property_name=self._property_name,
            label=self._label,
            help=self._help,
            form_type=self._form_type,
            configurator=self._configurator,
            css_classes=tuple(self._css_classes),
            options=self._options,
            attributes=self._attributes,
            form_type_options=copy.deepcopy(self._form_type_options),
        )


__all__ = ["FieldBase"]
