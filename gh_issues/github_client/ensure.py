"""Argument checks run before any request is sent."""

from typing import Any


def argument_not_none(value: Any, name: str) -> None:
    """Raise ValueError if a required argument is None."""
    if value is None:
        raise ValueError(f"'{name}' is required")


def argument_not_empty(value: str | None, name: str) -> None:
    """Raise ValueError if a required string argument is None or empty."""
    argument_not_none(value, name)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{name}' must be a non-empty string")
