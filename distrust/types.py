"""
Type definitions for distrust.

Provides the Result type (Ok/Err), the error record, the per-call
configuration and the UNDEFINED sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing the errors."""

    errors: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Result[E, T]: the error type comes first
Result = Err[E] | Ok[T]

# Dot-joined location of a sub-value, "" at the root
Path = str

ROOT_PATH: Path = ""


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single failure, tagged with where in the input it happened."""

    path: Path
    message: str


Validation = Ok[T] | Err[list[ValidationError]]


@dataclass(frozen=True, slots=True)
class Configuration:
    """
    Per-call validation policy.

    Args:
        transform_object_keys: Remaps a declared object key to the key
            looked up in the input, e.g. snake_case_transformation.
    """

    transform_object_keys: Callable[[str], str] | None = None


class _Undefined(Enum):
    """
    Sentinel for "no value at all", as opposed to an explicit None.

    Missing object keys read as UNDEFINED, and a field that validates to
    UNDEFINED is left out of the object output.
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined.UNDEFINED


def success(value: T) -> Ok[T]:
    return Ok(value)


def failure(path: Path, message: str) -> Err[list[ValidationError]]:
    return Err([ValidationError(path, message)])
