"""Badge, widget and page type definitions."""

from enum import Enum


class BadgeType(str, Enum):
    """Badge styles understood by the admin theme."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    LIGHT = "light"
    DARK = "dark"

    @property
    def css_class(self) -> str:
        """CSS class applied to a badge of this type."""
        return f"badge badge-{self.value}"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Return the raw badge type names in declaration order."""
        return tuple(member.value for member in cls)


class Widget(str, Enum):
    """Rendering strategies for a choice field."""

    NATIVE = "native"
    AUTOCOMPLETE = "autocomplete"


class PageName(str, Enum):
    """Admin pages a field can be rendered on."""

    INDEX = "index"
    DETAIL = "detail"
    EDIT = "edit"
    NEW = "new"

    @property
    def is_read_only(self) -> bool:
        """Whether the page displays values instead of form inputs."""
        return self in READ_ONLY_PAGES


READ_ONLY_PAGES: set[PageName] = {PageName.INDEX, PageName.DETAIL}


__all__ = ["READ_ONLY_PAGES", "BadgeType", "PageName", "Widget"]
