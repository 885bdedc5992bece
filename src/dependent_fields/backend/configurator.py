"""Resolve a declared field into renderable form options."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from dependent_fields.errors import InvalidArgumentError, describe_type
from dependent_fields.models.defaults import ATTR_WIDGET, AUTOCOMPLETE_WIDGET_ATTR_VALUE
from dependent_fields.models.field_meta import FieldMeta
from dependent_fields.models.options import ComputedChoices, FieldOptions, StaticChoices
from dependent_fields.models.types import PageName, Widget
from dependent_fields.tools.helpers import humanize_property_name, set_dotted, thaw

from .formatting import format_value

if TYPE_CHECKING:
    from dependent_fields.models.config import FieldConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResolvedField:
    """A field configuration evaluated for one page and entity."""

    config: FieldConfig
    meta: FieldMeta
    label: str | None
    widget: Widget
    choices: dict[Any, Any]
    form_type_options: dict[str, Any]
    formatted_value: str | None = None

    @property
    def css_classes(self) -> tuple[str, ...]:
        """CSS classes of the field wrapper."""
        return self.config.css_classes

    @property
    def is_autocomplete(self) -> bool:
        """Whether the autocomplete widget is used."""
        return self.widget is Widget.AUTOCOMPLETE


def resolve_label(config: FieldConfig) -> str | None:
    """Return the display label, or ``None`` when the label is hidden."""
    if config.label is False:
        return None
    if config.label is None:
        return humanize_property_name(config.property_name)
    return config.label


def resolve_choices(options: FieldOptions, meta: FieldMeta) -> dict[Any, Any]:
    """Evaluate the choice source of a field.

    Without a choice source, an ``Enum`` value yields the members of its enum.

    Raises:
        InvalidArgumentError: If a choice generator does not return a mapping.

    """
    source = options.choices
    if isinstance(source, StaticChoices):
        return dict(source.choices)
    if isinstance(source, ComputedChoices):
        choices = source.generator(meta.entity, meta)
        if not isinstance(choices, Mapping):
            raise InvalidArgumentError(
                f'The choice generator of field "{meta.property_name}" must return a mapping '
                f'("{describe_type(choices)}" given).'
            )
        return dict(choices)
    sample = meta.value[0] if isinstance(meta.value, (list, tuple)) and meta.value else meta.value
    if isinstance(sample, Enum):
        return {member.name: member.value for member in type(sample)}
    return {}


def resolve_widget(options: FieldOptions) -> Widget:
    """Return the widget, defaulting on the autocomplete and expanded flags."""
    if options.widget is not None:
        return options.widget
    if options.autocomplete:
        return Widget.AUTOCOMPLETE
    return Widget.NATIVE if options.render_expanded else Widget.AUTOCOMPLETE


def _form_type_options(config: FieldConfig, choices: dict[Any, Any], widget: Widget) -> dict[str, Any]:
    opts = config.options
    result = thaw(config.form_type_options)
    result.setdefault("choices", choices)
    result.setdefault("multiple", bool(opts.allow_multiple_choices))
    result.setdefault("expanded", opts.render_expanded)
    for name, value in config.attributes.as_attrs().items():
        set_dotted(result, f"attr.{name}", value)
    if widget is Widget.AUTOCOMPLETE:
        set_dotted(result, f"attr.{ATTR_WIDGET}", AUTOCOMPLETE_WIDGET_ATTR_VALUE)
    return result


def configure(
    config: FieldConfig,
    page: PageName | str = PageName.EDIT,
    *,
    entity: object | None = None,
    value: object = None,
) -> ResolvedField:
    """Resolve ``config`` for ``page``.

    ``entity`` is passed to choice generators as their first argument and may
    be ``None``. On index and detail pages ``value`` is also formatted as text
    or badges.
    """
    page = PageName(page)
    label = resolve_label(config)
    meta = FieldMeta(
        property_name=config.property_name,
        label=label,
        value=value,
        entity=entity,
        page=page,
    )
    choices = resolve_choices(config.options, meta)
    widget = resolve_widget(config.options)
    logger.debug(
        "Resolved field %s on %s page: %d choices, %s widget",
        config.property_name,
        page.value,
        len(choices),
        widget.value,
    )
    formatted = None
    if page.is_read_only:
        formatted = format_value(
            meta,
            choices,
            selector=config.options.render_as_badges,
            escape=config.options.escape_html,
        )
        meta = meta.with_formatted_value(formatted)
    return ResolvedField(
        config=config,
        meta=meta,
        label=label,
        widget=widget,
        choices=choices,
        form_type_options=_form_type_options(config, choices, widget),
        formatted_value=formatted,
    )


__all__ = ["ResolvedField", "configure", "resolve_choices", "resolve_label", "resolve_widget"]
