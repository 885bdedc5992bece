"""Utility functions for labels and dotted option paths."""

from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"([A-Z])")
_SEPARATORS = re.compile(r"[_\s]+")


def humanize_property_name(name: str) -> str:
    """Turn a property name into a label.

    ``"firstName"`` and ``"first_name"`` both become ``"First name"``; a dotted
    path keeps only its last segment.
    """
    last = name.rsplit(".", 1)[-1]
    spaced = _SEPARATORS.sub(" ", _CAMEL_BOUNDARY.sub(r"_\1", last))
    text = spaced.strip().lower()
    return text[:1].upper() + text[1:]


def set_dotted(target: MutableMapping[str, Any], path: str, value: object) -> None:
    """Set ``value`` at ``path`` (``"attr.data-x"``), creating nested mappings.

    Raises:
        ValueError: If an intermediate segment already holds a non-mapping.

    """
    *parents, leaf = path.split(".")
    node = target
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, MutableMapping):
            raise ValueError(f"Cannot set '{path}': '{part}' is not a mapping")
        node = child
    node[leaf] = value


def has_dotted(source: Mapping[str, Any], path: str) -> bool:
    """Return whether ``path`` resolves to a value in ``source``."""
    node: object = source
    for part in path.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return False
        node = node[part]
    return True


def freeze(value: object) -> object:
    """Return a read-only copy of nested mappings and lists.

    Mappings become ``MappingProxyType`` views over fresh dicts and lists become
    tuples; other values are returned as is.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: object) -> object:
    """Return a mutable copy of a value frozen by :func:`freeze`.

    Mappings come back as dicts and tuples as lists.
    """
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


__all__ = ["freeze", "has_dotted", "humanize_property_name", "set_dotted", "thaw"]
