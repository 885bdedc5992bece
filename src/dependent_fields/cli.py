"""Command-line interface entry point."""

from __future__ import annotations

import importlib
import json
import logging
import os
import sys
from collections.abc import Mapping
from enum import Enum

from cyclopts import App

from .backend import ResolvedField, configure
from .errors import InvalidArgumentError
from .fields import FieldBase
from .models import BadgeType, FieldConfig, PageName
from .models.defaults import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV

CALLABLE_PLACEHOLDER = "<callable>"

logger = logging.getLogger(__name__)

app = App(name="dependent-fields", help="Inspect dependent choice field declarations.")


def resolve_log_level(*, verbose: bool) -> int:
    """Return the log level from the verbose flag or the environment.

    Unknown level names fall back to ``WARNING``.
    """
    if verbose:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        logger.warning("Unknown log level %r in %s, using WARNING", name, LOG_LEVEL_ENV)
        return logging.WARNING
    return level


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(level=resolve_log_level(verbose=verbose), format=LOG_FORMAT)


def load_field(target: str) -> FieldConfig:
    """Import ``module:attribute`` and return its built field configuration.

    The attribute may be a field builder or an already built configuration.

    Raises:
        ImportError: If the module or attribute cannot be imported.
        InvalidArgumentError: If the target is malformed or not a field.

    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise InvalidArgumentError(f"Target must look like 'package.module:attribute' ('{target}' given).")
    obj: object = importlib.import_module(module_name)
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ImportError(f"Cannot import '{attr_path}' from '{module_name}'") from e
    if isinstance(obj, FieldBase):
        return obj.build()
    if isinstance(obj, FieldConfig):
        return obj
    raise InvalidArgumentError(f"'{target}' is not a field declaration ({type(obj).__name__} given).")


def _jsonable(value: object) -> object:
    """Convert option values into JSON-compatible data."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(_jsonable(k)): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(v) for v in value]
    if callable(value):
        return CALLABLE_PLACEHOLDER
    return value


def describe_resolved(resolved: ResolvedField) -> dict[str, object]:
    """Return a JSON-ready summary of a resolved field."""
    config = resolved.config
    return {
        "property": config.property_name,
        "label": resolved.label,
        "help": config.help,
        "form_type": config.form_type,
        "widget": resolved.widget.value,
        "css_classes": list(config.css_classes),
        "options": _jsonable(config.option_bag),
        "form_type_options": _jsonable(resolved.form_type_options),
    }


@app.command
def describe(target: str, *, page: PageName = PageName.EDIT, verbose: bool = False) -> int:
    """Print the resolved form options of a field as JSON.

    Args:
        target: Field declaration to load, as ``package.module:attribute``.
        page: Admin page to resolve the field for.
        verbose: Log resolution details.

    """
    _configure_logging(verbose=verbose)
    try:
        config = load_field(target)
    except (ImportError, InvalidArgumentError) as e:
        logger.error("Cannot load field %s: %s", target, e)  # noqa: TRY400
        return 1
    try:
        resolved = configure(config, page)
    except InvalidArgumentError as e:
        logger.error("Cannot resolve field %s: %s", target, e)  # noqa: TRY400
        return 1
    print(json.dumps(describe_resolved(resolved), indent=2, ensure_ascii=False, default=str))  # noqa: T201
    return 0


@app.command(name="badge-types")
def badge_types() -> int:
    """List the valid badge types."""
    for badge in BadgeType:
        print(badge.value)  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the dependent-fields CLI."""
    argv = sys.argv[1:] if argv is None else argv
    return app(argv)


if __name__ == "__main__":
    raise SystemExit(main())
