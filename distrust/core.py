"""
Core validator contract for distrust.

Every validator derives from Validator, which holds the whole method suite
(map, flat_map, filter, then, ...). Concrete validators only implement
_check; the suite is written purely in terms of validate().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .context import current_configuration
from .diagnostics import pretty
from .types import (
    ROOT_PATH,
    UNDEFINED,
    Configuration,
    Err,
    Ok,
    Path,
    Result,
    Validation,
    ValidationError,
    failure,
)

T = TypeVar("T")
B = TypeVar("B")
D = TypeVar("D")

TransformFn = Callable[
    [Validation[Any], Any, Path], Result[str | list[ValidationError], Any]
]


class Validator(Generic[T]):
    """
    Immutable, reusable validator.

    `T` only exists for type checkers. Validators hold no per-call state and
    can be shared freely between unrelated validations.
    """

    __slots__ = ()

    def validate(
        self, value: Any, config: Configuration | None = None, path: Path = ROOT_PATH
    ) -> Validation[T]:
        """
        Validate a value.

        Returns:
            Ok(value) with the validated (possibly transformed) value
            Err([ValidationError, ...]) with every error found
        """
        if config is None:
            config = current_configuration()
        return self._check(value, config, path)

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[T]:
        raise NotImplementedError

    def map(self, fn: Callable[[T], B]) -> Validator[B]:
        """Transform the validated value. Cannot introduce errors."""
        return self.flat_map(lambda v: Ok(fn(v)))

    def filter(self, predicate: Callable[[T], bool]) -> Validator[T]:
        """Fail unless the validated value satisfies `predicate`."""
        return self.flat_map(
            lambda v: Ok(v) if predicate(v) else Err(f"filter error: {pretty(v)}")
        )

    def flat_map(self, fn: Callable[[T], Result[str, B]]) -> Validator[B]:
        """
        Transform the validated value with a function that may fail.

        Usage:
            positive = number.flat_map(
                lambda n: Ok(n) if n > 0 else Err(f"{n} is not positive")
            )
        """
        return transform(self, lambda r, _v, _p: fn(r.value) if isinstance(r, Ok) else r)

    def then(self, validator: Validator[B]) -> Validator[B]:
        """Feed the validated value into `validator`, only if this one passes."""
        return Then(self, validator)

    def with_error(self, message: str) -> Validator[T]:
        """Replace any failure by a single error carrying `message`."""
        return transform(self, lambda r, _v, _p: r if isinstance(r, Ok) else Err(message))

    def tagged(self) -> Validator[T]:
        """Narrow the static type (e.g. to a NewType). No runtime effect."""
        return self

    def optional(self) -> Validator[T]:
        """Also accept UNDEFINED (an absent value)."""
        from .algebra import union
        from .primitives import undefined

        return union(self, undefined)

    def nullable(self) -> Validator[T]:
        """Also accept None and UNDEFINED."""
        from .algebra import union
        from .primitives import null, undefined

        return union(self, null, undefined)

    def default(self, value: D) -> Validator[T | D]:
        """Fall back to `value` when the validated value is None or UNDEFINED."""
        return self.map(lambda v: value if v is None or v is UNDEFINED else v)

    def __or__(self, other: Validator[B]) -> Validator[T | B]:
        """`a | b` is union(a, b)."""
        from .algebra import union

        return union(self, other)

    def __and__(self, other: Validator[B]) -> Validator[Any]:
        """`a & b` is intersection(a, b)."""
        from .algebra import intersection

        return intersection(self, other)


@dataclass(frozen=True, slots=True)
class Transformed(Validator[B]):
    """Runs `inner`, then hands its raw result to `fn`."""

    inner: Validator[Any]
    fn: TransformFn

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[B]:
        validated = self.inner.validate(value, config, path)
        transformed = self.fn(validated, value, path)

        if isinstance(transformed, Ok):
            return transformed

        error = transformed.errors
        if isinstance(error, str):
            return failure(path, error)
        return Err(error)


@dataclass(frozen=True, slots=True)
class Then(Validator[B]):
    """Sequential composition, short-circuiting on the first failure."""

    first: Validator[Any]
    second: Validator[B]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[B]:
        validated = self.first.validate(value, config, path)
        if isinstance(validated, Err):
            return validated
        return self.second.validate(validated.value, config, path)


def transform(validator: Validator[Any], fn: TransformFn) -> Validator[Any]:
    """
    Lift a result-rewriting function into a new validator.

    `fn(result, value, path)` gets the wrapped validator's raw result, the
    original input and the current path. It returns:
        Ok(b)                       -> success with b
        Err("message")              -> one error at the current path
        Err([ValidationError, ...]) -> those errors, untouched
    """
    return Transformed(validator, fn)
