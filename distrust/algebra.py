"""
Algebraic combinators: union, discriminated_union and intersection.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .core import Validator
from .diagnostics import error_debug_string, pretty, value_type
from .primitives import LiteralValidator, literal
from .structures import ObjectValidator
from .types import (
    UNDEFINED,
    Configuration,
    Err,
    Ok,
    Path,
    Validation,
    ValidationError,
    failure,
)

logger = logging.getLogger(__name__)

_DISCRIMINANT_KINDS = frozenset({"string", "number", "boolean", "null"})


@dataclass(frozen=True, slots=True)
class UnionValidator(Validator[Any]):
    """Tries each member in order; the first success wins."""

    members: tuple[Validator[Any], ...]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[Any]:
        branch_errors: list[list[ValidationError]] = []

        for validator in self.members:
            result = validator.validate(value, config, path)
            if isinstance(result, Ok):
                return result
            branch_errors.append(result.errors)

        detail = "\n".join(
            f"Union type #{i} => \n  " + error_debug_string(errors).replace("\n", "\n  ")
            for i, errors in enumerate(branch_errors)
        )
        return failure(
            path, f"The value {pretty(value)} \nis not part of the union: \n\n{detail}"
        )


@dataclass(frozen=True, slots=True)
class LiteralUnionValidator(Validator[Any]):
    """Union of plain values. Fails with one generic message, no branch detail."""

    members: tuple[LiteralValidator[Any], ...]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[Any]:
        for validator in self.members:
            result = validator.validate(value, config, path)
            if isinstance(result, Ok):
                return result
        return failure(path, f"The value {pretty(value)} is not part of the union")


@dataclass(frozen=True, slots=True)
class DiscriminatedUnionValidator(Validator[Any]):
    """Routes the input to one member by the literal value found at `key`."""

    key: str
    members_by_tag: Mapping[tuple[str, Any], ObjectValidator]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[Any]:
        if value is None or value is UNDEFINED:
            return failure(path, f"union member is nullish: {value_type(value)}")

        tag = value.get(self.key, UNDEFINED) if isinstance(value, Mapping) else UNDEFINED
        validator = None
        if value_type(tag) in _DISCRIMINANT_KINDS:
            validator = self.members_by_tag.get(_tag_key(tag))

        if validator is None:
            return failure(
                path,
                f"union member {self.key}={_display_tag(tag)} is unknown. {pretty(value)}",
            )

        return validator.validate(value, config, path)


@dataclass(frozen=True, slots=True)
class IntersectionValidator(Validator[Any]):
    """
    Validates the input against every member, in order.

    Mapping results are merged, later members overwriting earlier fields.
    Stops at the first failing member and returns its errors as they are:
    unlike the container validators, errors are not aggregated across members.
    """

    members: tuple[Validator[Any], ...]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[Any]:
        merged: Any = {}

        for validator in self.members:
            result = validator.validate(value, config, path)
            if isinstance(result, Err):
                return result
            if isinstance(merged, dict) and isinstance(result.value, Mapping):
                merged = {**merged, **result.value}
            else:
                merged = result.value

        return Ok(merged)


def _tag_key(tag: Any) -> tuple[str, Any]:
    # Keyed by kind too, so True and 1 stay distinct tags
    return (value_type(tag), tag)


def _display_tag(tag: Any) -> str:
    if tag is UNDEFINED or tag is None or isinstance(tag, bool):
        return pretty(tag)
    return str(tag)


def union(*members: Any) -> Validator[Any]:
    """
    Accept a value matching any member.

    Members are either all validators or all plain values:
        union(string, number)            # first matching validator wins
        union("red", "green", "blue")    # same as literal("red") | ...

    Raises:
        ValueError: If called with no members
    """
    if not members:
        raise ValueError("union() requires at least one member")

    if isinstance(members[0], Validator):
        for member in members:
            if not isinstance(member, Validator):
                raise TypeError(
                    f"Cannot mix validators and plain values in union(), got {member!r}"
                )
        return UnionValidator(members)

    return LiteralUnionValidator(tuple(literal(v) for v in members))


def discriminated_union(key: str, *members: ObjectValidator) -> Validator[Any]:
    """
    Union of object validators told apart by a literal field.

    The dispatch table is built once here, so validation picks the member
    directly instead of trying each one.

    Usage:
        shape = discriminated_union(
            "type",
            object_({"type": literal("circle"), "radius": number}),
            object_({"type": literal("square"), "side": number}),
        )

    Raises:
        TypeError: If a member is not an object_() validator with a literal()
            validator at `key`
        ValueError: If two members share a discriminant value
    """
    members_by_tag: dict[tuple[str, Any], ObjectValidator] = {}

    for member in members:
        if not isinstance(member, ObjectValidator):
            raise TypeError(
                f"discriminated_union() members must be object_() validators, "
                f"got {type(member).__name__}"
            )
        discriminant = member.props.get(key)
        if not isinstance(discriminant, LiteralValidator):
            raise TypeError(
                f"discriminated_union() member has no literal() validator at {key!r}"
            )
        tag = _tag_key(discriminant.value)
        if tag in members_by_tag:
            raise ValueError(
                f"Duplicate discriminant {key}={pretty(discriminant.value)}"
            )
        members_by_tag[tag] = member

    logger.debug(
        "Built discriminated union on %r with %d members", key, len(members_by_tag)
    )
    return DiscriminatedUnionValidator(key, members_by_tag)


def intersection(*members: Validator[Any]) -> Validator[Any]:
    """
    Accept a value matching every member, merging object results.

    Usage:
        named = object_({"name": string})
        aged = object_({"age": number})
        person = intersection(named, aged)   # or: named & aged
    """
    return IntersectionValidator(members)
