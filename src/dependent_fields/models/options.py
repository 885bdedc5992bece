"""Typed option models for dependent choice fields."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dependent_fields.errors import InvalidArgumentError, describe_type

from .defaults import (
    ATTR_CALLBACK_URL,
    ATTR_DEPENDENCIES,
    OPTION_ALLOW_MULTIPLE_CHOICES,
    OPTION_AUTOCOMPLETE,
    OPTION_CHOICES,
    OPTION_ESCAPE_HTML_CONTENTS,
    OPTION_MAP,
    OPTION_RENDER_AS_BADGES,
    OPTION_RENDER_EXPANDED,
    OPTION_WIDGET,
)
from .types import BadgeType, Widget


class StaticChoices(BaseModel):
    """Fixed ``{label: value}`` choices, kept in declaration order."""

    kind: Literal["static"] = "static"
    choices: Mapping[Any, Any]

    model_config = ConfigDict(frozen=True)

    @field_validator("choices")
    @classmethod
    def freeze_choices(cls, v: Mapping[Any, Any]) -> Mapping[Any, Any]:
        """Store a read-only copy so configurations cannot be edited in place."""
        return MappingProxyType(dict(v))


class ComputedChoices(BaseModel):
    """Choices computed per entity.

    The generator is called by the configurator as
    ``generator(entity_or_none, field_meta)`` and returns a ``{label: value}``
    mapping.
    """

    kind: Literal["computed"] = "computed"
    generator: Callable[..., Mapping[Any, Any]]

    model_config = ConfigDict(frozen=True)


ChoiceSource = Annotated[StaticChoices | ComputedChoices, Field(discriminator="kind")]


class UniformBadges(BaseModel):
    """Render every value as a ``secondary`` badge, or none at all."""

    kind: Literal["uniform"] = "uniform"
    enabled: bool

    model_config = ConfigDict(frozen=True)


class PerValueBadges(BaseModel):
    """Pick the badge type from a ``{field_value: badge_type}`` mapping."""

    kind: Literal["per_value"] = "per_value"
    badges: Mapping[Any, BadgeType]

    model_config = ConfigDict(frozen=True)

    @field_validator("badges")
    @classmethod
    def freeze_badges(cls, v: Mapping[Any, BadgeType]) -> Mapping[Any, BadgeType]:
        """Store a read-only copy so configurations cannot be edited in place."""
        return MappingProxyType(dict(v))


class ComputedBadges(BaseModel):
    """Pick the badge type with ``selector(field_meta)``."""

    kind: Literal["computed"] = "computed"
    selector: Callable[..., BadgeType | str]

    model_config = ConfigDict(frozen=True)


BadgeSelector = Annotated[UniformBadges | PerValueBadges | ComputedBadges, Field(discriminator="kind")]

VALID_BADGE_TYPES: tuple[str, ...] = BadgeType.values()


def to_choice_source(value: object, *, method: str) -> StaticChoices | ComputedChoices:
    """Wrap a ``{label: value}`` mapping or a choice generator.

    Raises:
        InvalidArgumentError: If ``value`` is neither a mapping nor a callable.

    """
    if isinstance(value, (StaticChoices, ComputedChoices)):
        return value
    if isinstance(value, Mapping):
        return StaticChoices(choices=value)
    if callable(value):
        return ComputedChoices(generator=value)
    raise InvalidArgumentError(
        f'The argument of the "{method}" method must be a mapping or a callable ("{describe_type(value)}" given).'
    )


def to_badge_selector(value: object, *, method: str) -> UniformBadges | PerValueBadges | ComputedBadges:
    """Wrap a boolean, a ``{field_value: badge_type}`` mapping or a selector.

    Raises:
        InvalidArgumentError: If ``value`` has another shape, or a mapping
            value is not a valid badge type.

    """
    if isinstance(value, (UniformBadges, PerValueBadges, ComputedBadges)):
        return value
    if isinstance(value, bool):
        return UniformBadges(enabled=value)
    if isinstance(value, Mapping):
        for badge_type in value.values():
            if badge_type not in VALID_BADGE_TYPES:
                raise InvalidArgumentError(
                    f'The values of the mapping passed to the "{method}" method must be one of the following '
                    f'valid badge types: "{", ".join(VALID_BADGE_TYPES)}" ("{badge_type}" given).'
                )
        return PerValueBadges(badges=value)
    if callable(value):
        return ComputedBadges(selector=value)
    raise InvalidArgumentError(
        f'The argument of the "{method}" method must be a boolean, a mapping or a callable '
        f'("{describe_type(value)}" given).'
    )


_OPTION_KEYS: dict[str, str] = {
    "allow_multiple_choices": OPTION_ALLOW_MULTIPLE_CHOICES,
    "autocomplete": OPTION_AUTOCOMPLETE,
    "choices": OPTION_CHOICES,
    "render_as_badges": OPTION_RENDER_AS_BADGES,
    "render_expanded": OPTION_RENDER_EXPANDED,
    "widget": OPTION_WIDGET,
    "escape_html": OPTION_ESCAPE_HTML_CONTENTS,
    "map": OPTION_MAP,
}

# Options that only appear in the option bag once something sets them.
_PRESENCE_ONLY = {"allow_multiple_choices", "autocomplete"}

_OPTION_CONVERTERS: dict[str, Callable[..., object]] = {
    "choices": to_choice_source,
    "render_as_badges": to_badge_selector,
}


def convert_custom_option(name: str, value: object, *, method: str) -> object:
    """Wrap raw option-bag values of variant options in their typed model."""
    converter = _OPTION_CONVERTERS.get(name)
    if converter is None or value is None:
        return value
    return converter(value, method=method)


class FieldOptions(BaseModel):
    """Custom options of a dependent choice field."""

    allow_multiple_choices: bool | None = None
    autocomplete: bool | None = None
    choices: ChoiceSource | None = None
    render_as_badges: BadgeSelector | None = None
    render_expanded: bool = False
    widget: Widget | None = None
    escape_html: bool = True
    map: None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def field_name_for(cls, key: str) -> str | None:
        """Return the attribute name for an attribute or option-bag key."""
        if key in cls.model_fields:
            return key
        for name, bag_key in _OPTION_KEYS.items():
            if bag_key == key:
                return name
        return None

    def replace(self, **updates: object) -> FieldOptions:
        """Return a validated copy with ``updates`` applied."""
        return type(self).model_validate({**dict(self), **updates})

    def as_option_bag(self) -> dict[str, object]:
        """Return the string-keyed option bag with variants unwrapped."""
        bag: dict[str, object] = {}
        for name, key in _OPTION_KEYS.items():
            value = getattr(self, name)
            if value is None and name in _PRESENCE_ONLY:
                continue
            bag[key] = _unwrap(value)
        return bag


def _unwrap(value: object) -> object:
    """Return the raw value a host renderer expects for an option."""
    if isinstance(value, StaticChoices):
        return value.choices
    if isinstance(value, ComputedChoices):
        return value.generator
    if isinstance(value, UniformBadges):
        return value.enabled
    if isinstance(value, PerValueBadges):
        return {field_value: badge.value for field_value, badge in value.badges.items()}
    if isinstance(value, ComputedBadges):
        return value.selector
    if isinstance(value, Widget):
        return value.value
    return value


class FormTypeAttributes(BaseModel):
    """Data attributes read by the client-side dependency script."""

    callback_url: str | None = None
    dependencies: str | None = Field(
        default=None,
        description="JSON array of the property names this field depends on.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def as_attrs(self) -> dict[str, str]:
        """Return the attributes that are set, keyed by HTML attribute name."""
        attrs: dict[str, str] = {}
        if self.callback_url is not None:
            attrs[ATTR_CALLBACK_URL] = self.callback_url
        if self.dependencies is not None:
            attrs[ATTR_DEPENDENCIES] = self.dependencies
        return attrs


__all__ = [
    "BadgeSelector",
    "ChoiceSource",
    "ComputedBadges",
    "ComputedChoices",
    "FieldOptions",
    "FormTypeAttributes",
    "PerValueBadges",
    "StaticChoices",
    "UniformBadges",
    "VALID_BADGE_TYPES",
    "convert_custom_option",
    "to_badge_selector",
    "to_choice_source",
]
