"""
Support for self-referential schemas.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from .core import Validator
from .types import Configuration, Path, Validation

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SelfReference(Validator[T]):
    """
    Stand-in handed to a recursive definition before the real validator exists.

    Delegates to the validator bound by recursion(). Bound exactly once.
    """

    __slots__ = ("_target",)

    def __init__(self) -> None:
        self._target: Validator[T] | None = None

    def bind(self, target: Validator[T]) -> None:
        if self._target is not None:
            raise RuntimeError("Recursive validator is already bound")
        self._target = target

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[T]:
        if self._target is None:
            raise RuntimeError(
                "Recursive validator used before its definition returned"
            )
        return self._target.validate(value, config, path)

    def __repr__(self) -> str:
        state = "bound" if self._target is not None else "unbound"
        return f"SelfReference({state})"


def recursion(definition: Callable[[Validator[T]], Validator[Any]]) -> Validator[T]:
    """
    Build a validator that refers to itself.

    `definition` receives a placeholder standing for the validator being
    built and returns the real one, which is what recursion() returns.

    Usage:
        category = recursion(lambda self: object_({
            "name": string,
            "children": array(self),
        }))

    Raises:
        TypeError: If `definition` does not return a validator
    """
    reference: SelfReference[T] = SelfReference()
    validator = definition(reference)

    if not isinstance(validator, Validator):
        raise TypeError(
            f"recursion() definition must return a validator, got {type(validator).__name__}"
        )

    reference.bind(validator)
    logger.debug("Bound recursive validator %s", type(validator).__name__)
    return validator
