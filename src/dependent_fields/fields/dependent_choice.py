"""Choice field whose options depend on other fields of the same form."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Literal, Self

from dependent_fields.errors import DependencyEncodingError
from dependent_fields.models.defaults import (
    CHOICE_CONFIGURATOR,
    CHOICE_FORM_TYPE,
    CSS_CLASS_DEPENDENT,
    CSS_CLASS_SELECT,
)
from dependent_fields.models.options import VALID_BADGE_TYPES, to_badge_selector, to_choice_source
from dependent_fields.models.types import Widget

from .base import FieldBase


class DependentChoiceField(FieldBase):
    """Select input whose choices are refreshed when other fields change.

    The client-side script watches the properties passed to
    :meth:`set_dependencies` and asks :meth:`set_callback_url` for new choices
    whenever one of them changes.
    """

    @classmethod
    def new(cls, property_name: str, label: str | Literal[False] | None = None) -> Self:
        """Declare a dependent choice field for ``property_name``."""
        return (
            cls()
            .set_property(property_name)
            .set_label(label)
            .set_form_type(CHOICE_FORM_TYPE)
            .add_css_class(CSS_CLASS_SELECT)
            .add_css_class(CSS_CLASS_DEPENDENT)
            .set_configurator(CHOICE_CONFIGURATOR)
        )

    def allow_multiple_choices(self, allow: bool = True) -> Self:  # noqa: FBT001, FBT002
        """Let users select several values."""
        self._replace_options(allow_multiple_choices=allow)
        return self

    def autocomplete(self, enabled: bool = True) -> Self:  # noqa: FBT001, FBT002
        """Mark the widget as autocomplete-capable; ``False`` clears the flag."""
        self._replace_options(autocomplete=enabled)
        return self

    def set_choices(self, choice_generator: Mapping[Any, Any] | Callable[..., Mapping[Any, Any]]) -> Self:
        """Set the selectable choices.

        Choices use the ``{"Label visible to users": "submitted_value"}`` format.
        A callable is called at render time with the current entity (``None``
        on creation pages) and the :class:`~dependent_fields.models.FieldMeta`::

            field.set_choices(lambda entity, meta: {"Foo": 1, "Bar": 2})
            field.set_choices(lambda entity, meta: entity.category.choices() if entity else {})

        Raises:
            InvalidArgumentError: If the argument is neither a mapping nor a
                callable.

        """
        source = to_choice_source(choice_generator, method=f"{type(self).__name__}.set_choices")
        self._replace_options(choices=source)
        return self

    def render_as_badges(
        self,
        badge_selector: bool | Mapping[Any, str] | Callable[..., str] = True,  # noqa: FBT002
    ) -> Self:
        """Render values as badges on index and detail pages.

        Possible values of ``badge_selector``:

        - ``True``: every value is displayed as a ``secondary`` badge;
        - ``False``: values are displayed as regular text;
        - a mapping ``{field_value: badge_type}``, e.g.
          ``{"foo": "primary", 7: "warning", "cancelled": "danger"}``;
        - a callable ``selector(field_meta) -> badge_type``, e.g.
          ``lambda meta: "warning" if meta.value < 10 else "primary"``.

        Badge types: success, warning, danger, info, primary, secondary, light,
        dark.

        Raises:
            InvalidArgumentError: If the argument has another shape, or a
                mapping value is not a valid badge type.

        """
        selector = to_badge_selector(badge_selector, method=f"{type(self).__name__}.render_as_badges")
        self._replace_options(render_as_badges=selector)
        return self

    def render_as_native_widget(self, as_native: bool = True) -> Self:  # noqa: FBT001, FBT002
        """Use a plain ``<select>`` instead of the autocomplete widget."""
        self._replace_options(widget=Widget.NATIVE if as_native else Widget.AUTOCOMPLETE)
        return self

    def render_expanded(self, expanded: bool = True) -> Self:  # noqa: FBT001, FBT002
        """Render checkboxes or radio buttons instead of a dropdown."""
        self._replace_options(render_expanded=expanded)
        return self

    def escape_html(self, escape: bool = True) -> Self:  # noqa: FBT001, FBT002
        self._replace_options(escape_html=escape)
        return self

    def set_callback_url(self, url: str) -> Self:
        """Set the URL the client calls to fetch updated choices."""
        self._replace_attributes(callback_url=url)
        return self

    def set_dependence(self, property_name: str) -> Self:
        """Refresh the choices when ``property_name`` changes."""
        return self.set_dependencies([property_name])

    def set_dependencies(self, property_names: Sequence[str]) -> Self:
        """Refresh the choices when any of ``property_names`` changes.

        Raises:
            DependencyEncodingError: If the names cannot be encoded as JSON.

        """
        names = [property_names] if isinstance(property_names, str) else list(property_names)
        try:
            encoded = json.dumps(names, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise DependencyEncodingError(f"Cannot encode field dependencies as JSON: {e}") from e
        self._replace_attributes(dependencies=encoded)
        return self


__all__ = ["VALID_BADGE_TYPES", "DependentChoiceField"]
