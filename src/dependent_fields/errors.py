"""Exceptions raised while declaring or resolving dependent fields."""

from __future__ import annotations


class DependentFieldError(Exception):
    """Base exception for all dependent field errors."""


class InvalidArgumentError(DependentFieldError, ValueError):
    """Raised when a configuration method receives a value of the wrong shape."""


class DependencyEncodingError(DependentFieldError, TypeError):
    """Raised when dependency property names cannot be encoded as JSON."""


def describe_type(value: object) -> str:
    """Return the runtime type name used in error messages."""
    if value is None:
        return "None"
    return type(value).__name__


__all__ = ["DependencyEncodingError", "DependentFieldError", "InvalidArgumentError", "describe_type"]
