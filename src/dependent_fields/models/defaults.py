"""Default constants for field options and rendered attributes."""

from __future__ import annotations

from dependent_fields.models.types import BadgeType

# Keys of the string-keyed option bag read by renderers.
OPTION_ALLOW_MULTIPLE_CHOICES = "allowMultipleChoices"
OPTION_AUTOCOMPLETE = "autocomplete"
OPTION_CHOICES = "choices"
OPTION_RENDER_AS_BADGES = "renderAsBadges"
OPTION_RENDER_EXPANDED = "renderExpanded"
OPTION_WIDGET = "widget"
OPTION_ESCAPE_HTML_CONTENTS = "escapeHtml"
OPTION_MAP = "map"

# Data attributes consumed by the client-side dependency script.
ATTR_CALLBACK_URL = "data-eaf-callback-url"
ATTR_DEPENDENCIES = "data-eaf-dependencies"
ATTR_WIDGET = "data-ea-widget"
AUTOCOMPLETE_WIDGET_ATTR_VALUE = "ea-autocomplete"

CSS_CLASS_SELECT = "field-select"
CSS_CLASS_DEPENDENT = "field-dependent"

CHOICE_FORM_TYPE = "choice"
CHOICE_CONFIGURATOR = "choice"

DEFAULT_BADGE_TYPE = BadgeType.SECONDARY
VALUE_SEPARATOR = ", "

LOG_LEVEL_ENV = "DEPENDENT_FIELDS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

__all__ = [
    "ATTR_CALLBACK_URL",
    "ATTR_DEPENDENCIES",
    "ATTR_WIDGET",
    "AUTOCOMPLETE_WIDGET_ATTR_VALUE",
    "CHOICE_CONFIGURATOR",
    "CHOICE_FORM_TYPE",
    "CSS_CLASS_DEPENDENT",
    "CSS_CLASS_SELECT",
    "DEFAULT_BADGE_TYPE",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_LEVEL_ENV",
    "OPTION_ALLOW_MULTIPLE_CHOICES",
    "OPTION_AUTOCOMPLETE",
    "OPTION_CHOICES",
    "OPTION_ESCAPE_HTML_CONTENTS",
    "OPTION_MAP",
    "OPTION_RENDER_AS_BADGES",
    "OPTION_RENDER_EXPANDED",
    "OPTION_WIDGET",
    "VALUE_SEPARATOR",
]
