"""Argument validation helpers shared by every entity and adapter."""

from typing import Any, Optional

from syndication.errors import InvalidArgumentError, OutOfRangeError


def argument_not_none(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")


def argument_not_empty(value: Optional[str], name: str) -> None:
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{name} must not be None or empty")


def argument_in_range(value: Any, name: str, minimum: Any = None, maximum: Any = None) -> None:
    """Raise OutOfRangeError unless minimum <= value <= maximum (bounds optional)."""
    argument_not_none(value, name)
    if minimum is not None and value < minimum:
        raise OutOfRangeError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise OutOfRangeError(f"{name} must be <= {maximum}, got {value}")


def normalize_text(value: Optional[str]) -> str:
    """Collapse None/empty to "" and trim everything else."""
    if not value:
        return ""
    return str(value).strip()
