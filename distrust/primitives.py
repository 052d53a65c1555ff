"""
Leaf validators: primitive kinds, unknown and literal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from .core import Validator
from .diagnostics import pretty, type_failure, value_type
from .types import Configuration, Path, Validation, _Undefined, failure, success

T = TypeVar("T")

LiteralValue = str | int | float | bool | None | _Undefined


@dataclass(frozen=True, slots=True)
class Primitive(Validator[T]):
    """Accepts exactly one value kind, as named by value_type()."""

    expected_type: str

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[T]:
        if value_type(value) == self.expected_type:
            return success(value)
        return type_failure(value, path, self.expected_type)


@dataclass(frozen=True, slots=True)
class Unknown(Validator[Any]):
    """Accepts anything, unchanged."""

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[Any]:
        return success(value)


@dataclass(frozen=True, slots=True)
class LiteralValidator(Validator[T]):
    """Accepts a single value. `value` is read by discriminated_union()."""

    value: Any

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[T]:
        if strictly_equal(value, self.value):
            return success(value)
        return failure(path, f"Expected {pretty(self.value)}, got {pretty(value)}")


def strictly_equal(a: Any, b: Any) -> bool:
    """Equality that never crosses kinds: True is not 1, "1" is not 1."""
    return value_type(a) == value_type(b) and a == b


null: Validator[None] = Primitive("null")
undefined: Validator[Any] = Primitive("undefined")
string: Validator[str] = Primitive("string")
number: Validator[int | float] = Primitive("number")
boolean: Validator[bool] = Primitive("boolean")
unknown: Validator[Any] = Unknown()


def literal(value: LiteralValue) -> LiteralValidator[Any]:
    """
    Validate strict equality with `value`.

    Usage:
        literal("circle")
        literal(42)
        literal(None)
        literal(UNDEFINED)
    """
    return LiteralValidator(value)

