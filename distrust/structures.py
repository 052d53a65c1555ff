"""
Container validators: array, tuple_, object_ and dictionary.

All of them aggregate errors over every element or field instead of
stopping at the first failure. The only short-circuit is tuple_'s length
check.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from .core import Validator
from .diagnostics import get_path, type_failure, value_type
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

A = TypeVar("A")
K = TypeVar("K")
V = TypeVar("V")


def _is_sequence(value: Any) -> bool:
    return value_type(value) == "array"


def _validate_items(
    items: list[tuple[Validator[Any], Any]], config: Configuration, path: Path
) -> Ok[list[Any]] | Err[list[ValidationError]]:
    validated: list[Any] = []
    errors: list[ValidationError] = []

    for i, (validator, item) in enumerate(items):
        result = validator.validate(item, config, get_path(str(i), path))
        if isinstance(result, Ok):
            validated.append(result.value)
        else:
            errors.extend(result.errors)

    return Err(errors) if errors else Ok(validated)


@dataclass(frozen=True, slots=True)
class ArrayValidator(Validator[list[A]]):
    """Validator for lists whose items all share one validator."""

    items: Validator[A]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[list[A]]:
        if not _is_sequence(value):
            return type_failure(value, path, "array")

        return _validate_items([(self.items, item) for item in value], config, path)


@dataclass(frozen=True, slots=True)
class TupleValidator(Validator[tuple]):
    """Validator for fixed-length sequences, one validator per position."""

    positions: tuple[Validator[Any], ...]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[tuple]:
        if not _is_sequence(value):
            return type_failure(value, path, "Tuple")

        if len(value) != len(self.positions):
            return failure(
                path, f"Expected Tuple{len(self.positions)}, got Tuple{len(value)}"
            )

        result = _validate_items(list(zip(self.positions, value)), config, path)
        if isinstance(result, Err):
            return result
        return Ok(tuple(result.value))


@dataclass(frozen=True, slots=True)
class ObjectValidator(Validator[dict[str, Any]]):
    """
    Validator for mappings with a fixed set of declared fields.

    Only declared fields are read and copied to the output. A field whose
    validator yields UNDEFINED (e.g. an absent optional field) is left out.
    `props` is read by discriminated_union().
    """

    props: Mapping[str, Validator[Any]]

    def _check(
        self, value: Any, config: Configuration, path: Path
    ) -> Validation[dict[str, Any]]:
        if not isinstance(value, Mapping):
            return type_failure(value, path, "object")

        transform_key = config.transform_object_keys
        validated: dict[str, Any] = {}
        errors: list[ValidationError] = []

        for key, validator in self.props.items():
            lookup_key = transform_key(key) if transform_key is not None else key
            field_value = value.get(lookup_key, UNDEFINED)
            result = validator.validate(field_value, config, get_path(lookup_key, path))

            if isinstance(result, Ok):
                if result.value is not UNDEFINED:
                    validated[key] = result.value
            else:
                errors.extend(result.errors)

        return Err(errors) if errors else Ok(validated)


@dataclass(frozen=True, slots=True)
class DictionaryValidator(Validator[dict[K, V]]):
    """Validator for mappings with arbitrary keys, checking every entry."""

    domain: Validator[K]
    codomain: Validator[V]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[dict[K, V]]:
        if not isinstance(value, Mapping):
            return type_failure(value, path, "object")

        validated: dict[Any, Any] = {}
        errors: list[ValidationError] = []

        for key, item in value.items():
            entry_path = get_path(str(key), path)
            domain_result = self.domain.validate(key, config, entry_path)
            codomain_result = self.codomain.validate(item, config, entry_path)

            if isinstance(domain_result, Ok):
                key = domain_result.value
            else:
                errors.extend(
                    ValidationError(entry_path, f"key error: {e.message}")
                    for e in domain_result.errors
                )

            if isinstance(codomain_result, Ok):
                validated[key] = codomain_result.value
            else:
                errors.extend(
                    ValidationError(entry_path, f"value error: {e.message}")
                    for e in codomain_result.errors
                )

        return Err(errors) if errors else Ok(validated)


def array(items: Validator[A]) -> ArrayValidator[A]:
    """
    Validate a list (or tuple) whose items all pass `items`.

    Usage:
        array(string)
        array(object_({"id": number}))
    """
    return ArrayValidator(items)


def tuple_(*positions: Validator[Any]) -> TupleValidator:
    """
    Validate a fixed-length sequence, position by position.

    Usage:
        tuple_(string, number)   # ["a", 1] -> Ok(("a", 1))
    """
    return TupleValidator(positions)


def object_(props: Mapping[str, Validator[Any]]) -> ObjectValidator:
    """
    Validate a mapping against declared fields.

    Usage:
        user = object_({
            "name": string,
            "email": string.optional(),
        })
    """
    return ObjectValidator(dict(props))


def dictionary(domain: Validator[K], codomain: Validator[V]) -> DictionaryValidator[K, V]:
    """
    Validate every key with `domain` and every value with `codomain`.

    Usage:
        dictionary(string, number)   # {"a": 1, "b": 2}
    """
    return DictionaryValidator(domain, codomain)
