"""Tests for the dependent choice field builder."""

from __future__ import annotations

import pytest
from conftest import STATUS_CHOICES

from dependent_fields import DependencyEncodingError, DependentChoiceField, InvalidArgumentError
from dependent_fields.fields import VALID_BADGE_TYPES
from dependent_fields.models import BadgeType, ComputedBadges, ComputedChoices, PerValueBadges, Widget


def test_new_sets_defaults(status_field: DependentChoiceField) -> None:
    """A new field carries the default option bag and style markers."""
    config = status_field.build()
    assert config.property_name == "status"
    assert config.label is None
    assert config.form_type == "choice"
    assert config.configurator == "choice"
    assert config.css_classes == ("field-select", "field-dependent")
    assert config.option_bag == {
        "choices": None,
        "renderAsBadges": None,
        "renderExpanded": False,
        "widget": None,
        "escapeHtml": True,
        "map": None,
    }
    assert config.attributes.as_attrs() == {}


@pytest.mark.parametrize("label", ["Order status", False, None])
def test_new_keeps_label(label: str | bool | None) -> None:
    """Labels are stored as given; ``False`` hides the label."""
    assert DependentChoiceField.new("status", label).build().label == label


@pytest.mark.parametrize("name", ["", "   "])
def test_new_rejects_empty_property_name(name: str) -> None:
    """The property name is required."""
    with pytest.raises(InvalidArgumentError):
        DependentChoiceField.new(name)


def test_setters_return_same_builder(status_field: DependentChoiceField) -> None:
    """Every setter returns the builder for chaining."""
    chained = (
        status_field.allow_multiple_choices()
        .autocomplete()
        .set_choices(STATUS_CHOICES)
        .render_as_badges()
        .render_as_native_widget()
        .render_expanded()
        .escape_html()
        .set_callback_url("/admin/orders/status-choices")
        .set_dependence("category")
    )
    assert chained is status_field


def test_set_choices_stores_mapping_unchanged(status_field: DependentChoiceField) -> None:
    """Literal choices round-trip unchanged, order included."""
    status_field.set_choices(STATUS_CHOICES)
    stored = status_field.options.as_option_bag()["choices"]
    assert stored == STATUS_CHOICES
    assert list(stored) == list(STATUS_CHOICES)


def test_set_choices_copies_the_mapping(status_field: DependentChoiceField) -> None:
    """Editing the source mapping later does not change the field."""
    choices = dict(STATUS_CHOICES)
    status_field.set_choices(choices)
    choices["Refunded"] = "refunded"
    assert status_field.options.as_option_bag()["choices"] == STATUS_CHOICES


def test_set_choices_accepts_callable(status_field: DependentChoiceField) -> None:
    """Callables are stored as computed choices and not called."""
    calls: list[object] = []

    def generator(entity: object, meta: object) -> dict[str, str]:
        calls.append(entity)
        return {}

    status_field.set_choices(generator)
    assert isinstance(status_field.options.choices, ComputedChoices)
    assert status_field.options.as_option_bag()["choices"] is generator
    assert calls == []


@pytest.mark.parametrize(("value", "type_name"), [(42, "int"), ("pending", "str"), (object(), "object"), (None, "None")])
def test_set_choices_rejects_other_shapes(status_field: DependentChoiceField, value: object, type_name: str) -> None:
    """Anything but a mapping or a callable is rejected without changing options."""
    before = status_field.options
    with pytest.raises(InvalidArgumentError, match=f'"{type_name}" given'):
        status_field.set_choices(value)  # type: ignore[arg-type]
    assert status_field.options is before


def test_set_choices_error_names_method(status_field: DependentChoiceField) -> None:
    """The error message names the method and the accepted shapes."""
    with pytest.raises(InvalidArgumentError, match="DependentChoiceField.set_choices") as excinfo:
        status_field.set_choices(3.5)  # type: ignore[arg-type]
    assert "mapping or a callable" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("enabled", [True, False])
def test_render_as_badges_accepts_bool(status_field: DependentChoiceField, enabled: bool) -> None:  # noqa: FBT001
    """Booleans are stored unchanged."""
    status_field.render_as_badges(enabled)
    assert status_field.options.as_option_bag()["renderAsBadges"] is enabled


def test_render_as_badges_defaults_to_true(status_field: DependentChoiceField) -> None:
    """Calling without arguments enables uniform badges."""
    status_field.render_as_badges()
    assert status_field.options.as_option_bag()["renderAsBadges"] is True


def test_render_as_badges_accepts_callable(status_field: DependentChoiceField) -> None:
    """Callables are stored as computed selectors."""

    def selector(meta: object) -> str:
        return "info"

    status_field.render_as_badges(selector)
    assert isinstance(status_field.options.render_as_badges, ComputedBadges)
    assert status_field.options.as_option_bag()["renderAsBadges"] is selector


def test_render_as_badges_accepts_valid_mapping(status_field: DependentChoiceField) -> None:
    """Mappings with valid badge types are stored per value."""
    badges = {"paid": "success", 7: "warning", "cancelled": BadgeType.DANGER}
    status_field.render_as_badges(badges)
    assert isinstance(status_field.options.render_as_badges, PerValueBadges)
    assert status_field.options.as_option_bag()["renderAsBadges"] == {
        "paid": "success",
        7: "warning",
        "cancelled": "danger",
    }


@pytest.mark.parametrize("badge", ["Success", "red", "", 1])
def test_render_as_badges_rejects_unknown_badge_type(status_field: DependentChoiceField, badge: object) -> None:
    """Unknown badge types are rejected eagerly and leave options unchanged."""
    status_field.render_as_badges(True)  # noqa: FBT003
    before = status_field.options
    with pytest.raises(InvalidArgumentError) as excinfo:
        status_field.render_as_badges({"paid": "success", "cancelled": badge})
    message = str(excinfo.value)
    assert ", ".join(VALID_BADGE_TYPES) in message
    assert f'("{badge}" given)' in message
    assert status_field.options is before


@pytest.mark.parametrize("value", ["yes", 3, None, ["success"]])
def test_render_as_badges_rejects_other_shapes(status_field: DependentChoiceField, value: object) -> None:
    """Anything but a bool, a mapping or a callable is rejected."""
    with pytest.raises(InvalidArgumentError, match="a boolean, a mapping or a callable"):
        status_field.render_as_badges(value)  # type: ignore[arg-type]
    assert status_field.options.render_as_badges is None


def test_valid_badge_types() -> None:
    """The badge palette is fixed."""
    assert VALID_BADGE_TYPES == ("success", "warning", "danger", "info", "primary", "secondary", "light", "dark")


@pytest.mark.parametrize(("as_native", "widget"), [(True, Widget.NATIVE), (False, Widget.AUTOCOMPLETE)])
def test_render_as_native_widget(status_field: DependentChoiceField, as_native: bool, widget: Widget) -> None:  # noqa: FBT001
    """The native flag picks one of the two widgets."""
    status_field.render_as_native_widget(as_native)
    assert status_field.options.widget is widget
    assert status_field.options.as_option_bag()["widget"] == widget.value


def test_widget_left_unset_by_default(status_field: DependentChoiceField) -> None:
    """Without a widget call the widget stays unset."""
    status_field.set_choices(STATUS_CHOICES).render_expanded()
    assert status_field.options.widget is None


def test_boolean_setters_default_to_true(status_field: DependentChoiceField) -> None:
    """Boolean setters called without arguments enable their option."""
    status_field.escape_html(False)  # noqa: FBT003
    status_field.allow_multiple_choices().autocomplete().render_expanded().escape_html().render_as_native_widget()
    options = status_field.options
    assert options.allow_multiple_choices is True
    assert options.autocomplete is True
    assert options.render_expanded is True
    assert options.escape_html is True
    assert options.widget is Widget.NATIVE


def test_autocomplete_can_be_cleared(status_field: DependentChoiceField) -> None:
    """Passing ``False`` clears the autocomplete flag."""
    status_field.autocomplete().autocomplete(False)  # noqa: FBT003
    assert status_field.options.as_option_bag()["autocomplete"] is False


def test_presence_only_options_absent_until_set(status_field: DependentChoiceField) -> None:
    """Multiple-choice and autocomplete options only appear once set."""
    bag = status_field.options.as_option_bag()
    assert "allowMultipleChoices" not in bag
    assert "autocomplete" not in bag
    status_field.allow_multiple_choices(False)  # noqa: FBT003
    assert status_field.options.as_option_bag()["allowMultipleChoices"] is False


def test_last_write_wins(status_field: DependentChoiceField) -> None:
    """Repeated calls overwrite the same option."""
    status_field.render_as_badges(True).render_as_badges(False)  # noqa: FBT003
    assert status_field.options.as_option_bag()["renderAsBadges"] is False
    status_field.set_choices({"A": 1}).set_choices({"B": 2})
    assert status_field.options.as_option_bag()["choices"] == {"B": 2}


def test_set_callback_url_stores_literal(status_field: DependentChoiceField) -> None:
    """The callback URL is stored as given, without validation."""
    status_field.set_callback_url("not a url?")
    assert status_field.attributes.as_attrs() == {"data-eaf-callback-url": "not a url?"}


def test_set_dependence_matches_single_dependency(status_field: DependentChoiceField) -> None:
    """A single dependence is encoded as a one-element JSON array."""
    other = DependentChoiceField.new("status").set_dependencies(["status"])
    status_field.set_dependence("status")
    assert status_field.attributes.dependencies == '["status"]'
    assert other.attributes.dependencies == status_field.attributes.dependencies


def test_set_dependencies_preserves_order(status_field: DependentChoiceField) -> None:
    """Dependencies are encoded as a compact JSON array in order."""
    status_field.set_dependencies(["a", "b"])
    assert status_field.attributes.as_attrs() == {"data-eaf-dependencies": '["a","b"]'}
    status_field.set_dependencies(("category", "country"))
    assert status_field.attributes.dependencies == '["category","country"]'


def test_set_dependencies_wraps_single_string(status_field: DependentChoiceField) -> None:
    """A bare string is a single property name, not a sequence of letters."""
    status_field.set_dependencies("category")
    assert status_field.attributes.dependencies == '["category"]'


def test_set_dependencies_reports_encoding_errors(status_field: DependentChoiceField) -> None:
    """Values that cannot be encoded raise a JSON-specific error."""
    with pytest.raises(DependencyEncodingError) as excinfo:
        status_field.set_dependencies([object()])  # type: ignore[list-item]
    assert isinstance(excinfo.value, TypeError)
    assert isinstance(excinfo.value.__cause__, TypeError)
    assert status_field.attributes.dependencies is None


def test_build_is_not_affected_by_later_calls(status_field: DependentChoiceField) -> None:
    """A built configuration is a snapshot."""
    status_field.set_choices(STATUS_CHOICES).set_form_type_option("attr.class", "wide")
    config = status_field.build()
    status_field.render_expanded().set_dependence("category").add_css_class("extra")
    status_field.set_form_type_option("attr.class", "narrow")
    assert config.options.render_expanded is False
    assert config.attributes.dependencies is None
    assert "extra" not in config.css_classes
    assert config.form_type_options == {"attr": {"class": "wide"}}


@pytest.mark.parametrize(
    "badges",
    [True, False, {"paid": "success", "cancelled": "danger"}, lambda meta: "info"],
)
def test_option_bag_can_be_set_back(status_field: DependentChoiceField, badges: object) -> None:
    """Every option-bag entry is accepted by ``set_custom_option``."""
    status_field.set_choices(STATUS_CHOICES).render_as_badges(badges).allow_multiple_choices().autocomplete()
    status_field.render_as_native_widget().render_expanded().escape_html(False)  # noqa: FBT003
    bag = status_field.options.as_option_bag()

    clone = DependentChoiceField.new("status")
    for key, value in bag.items():
        clone.set_custom_option(key, value)
    assert clone.options.as_option_bag() == bag
    assert clone.options == status_field.options


def test_option_bag_with_computed_choices_can_be_set_back(status_field: DependentChoiceField) -> None:
    """Choice generators read from the option bag are kept as generators."""
    status_field.set_choices(lambda entity, meta: STATUS_CHOICES)
    bag = status_field.options.as_option_bag()
    clone = DependentChoiceField.new("status").set_custom_option("choices", bag["choices"])
    assert isinstance(clone.options.choices, ComputedChoices)
    assert clone.options.choices.generator is bag["choices"]
