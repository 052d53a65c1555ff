"""
Context manager for the ambient validation configuration.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable

from .types import Configuration

# Context variable for the configuration used when validate() gets none
_configuration: ContextVar[Configuration] = ContextVar(
    "configuration", default=Configuration()
)


def current_configuration() -> Configuration:
    """Return the configuration validate() falls back to."""
    return _configuration.get()


@contextmanager
def validation_context(
    *, transform_object_keys: Callable[[str], str] | None = None
):
    """
    Context manager setting the default configuration for validate().

    Args:
        transform_object_keys: Remaps declared object keys before lookup.
            An explicit config passed to validate() still wins.

    Example:
        from distrust import object_, string, snake_case_transformation
        from distrust import validation_context

        user = object_({"firstName": string})

        with validation_context(transform_object_keys=snake_case_transformation):
            user.validate({"first_name": "Ada"})  # Ok({"firstName": "Ada"})
    """
    token = _configuration.set(
        Configuration(transform_object_keys=transform_object_keys)
    )
    try:
        yield
    finally:
        _configuration.reset(token)
