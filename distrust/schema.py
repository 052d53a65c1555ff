"""
Top-level entry points for running a validator against a value.

Provides is_valid(), validate_as() and assert_valid().
"""

from __future__ import annotations

from typing import Any, TypeVar

from .core import Validator
from .diagnostics import error_debug_string
from .types import Configuration, Err, Validation, ValidationError

T = TypeVar("T")


class ValidationFailed(Exception):
    """Raised by assert_valid() when a value does not validate."""

    def __init__(self, errors: list[ValidationError]):
        self.errors = errors
        super().__init__(error_debug_string(errors))


def is_valid(value: Any, validator: Validator[T], config: Configuration | None = None) -> bool:
    """
    Check whether a value validates, discarding error detail.

    Usage:
        if is_valid(payload, user):
            ...
    """
    return validator.validate(value, config).is_ok()


def validate_as(
    validator: Validator[T], value: Any, config: Configuration | None = None
) -> Validation[T]:
    """
    Validate `value`, for call sites that spell out the expected type.

    Usage:
        result: Validation[User] = validate_as(user, payload)
    """
    return validator.validate(value, config)


def assert_valid(value: Any, validator: Validator[T], config: Configuration | None = None) -> T:
    """
    Return the validated value, or raise.

    Raises:
        ValidationFailed: With every error found, rendered one per line
    """
    result = validator.validate(value, config)
    if isinstance(result, Err):
        raise ValidationFailed(result.errors)
    return result.value
