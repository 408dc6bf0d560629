"""
Guard clauses shared by every bounded context.

Each helper returns the checked value so it can be used inline in
constructors:

    self._name = require_not_blank(name, "Name cannot be null or blank")
"""

from typing import Any, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


def require_present(value: T | None, message: str) -> T:
    """Reject ``None``."""
    if value is None:
        raise InvalidArgumentError(message)
    return value


def require_not_blank(value: Any, message: str) -> str:
    """
    Reject ``None``, non-string values, and strings that are empty or
    contain only whitespace.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(message)
    return value


def require_positive(value: Any, message: str) -> Any:
    """Reject values that are not strictly greater than zero."""
    if value is None or value <= 0:
        raise InvalidArgumentError(message)
    return value


def require_instance(value: Any, expected: type[T], message: str) -> T:
    """Reject values that are not instances of ``expected``."""
    if not isinstance(value, expected):
        raise InvalidArgumentError(message)
    return value
