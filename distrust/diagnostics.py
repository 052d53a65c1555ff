"""
Path construction, value rendering and human-readable error output.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from datetime import date, time
from typing import Any

from .types import UNDEFINED, Err, Path, ValidationError


def get_path(name: str, parent: Path = "") -> Path:
    """Derive the path of a field or index below `parent`."""
    return f"{parent}.{name}" if parent else name


def value_type(value: Any) -> str:
    """
    Classify a value the way error messages name it.

    Lists and tuples are "array", mappings are "object", None is "null"
    and bool is never a "number".
    """
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def type_failure_message(expected_type: str, value: Any) -> str:
    return f"Expected {expected_type}, got {value_type(value)}"


def type_failure(value: Any, path: Path, expected_type: str) -> Err[list[ValidationError]]:
    message = type_failure_message(expected_type, value)
    return Err([ValidationError(path, message)])


def _json_default(value: Any) -> Any:
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if isinstance(value, Mapping):
        return dict(value)
    return repr(value)


def pretty(value: Any) -> str:
    """Render a value as two-space indented JSON for error messages."""
    if value is UNDEFINED:
        return "undefined"
    try:
        return json.dumps(value, indent=2, default=_json_default, ensure_ascii=False)
    except (TypeError, ValueError):
        # Non-string keys or circular structures
        return repr(value)


def error_debug_string(errors: list[ValidationError]) -> str:
    """
    Render errors one per line, for logs and test assertions.

    Example:
        At [root.users.0.name] Expected string, got number
    """
    return "\n".join(
        f"At [root{'.' + e.path if e.path else ''}] {e.message}" for e in errors
    )


_UPPER_THEN_LOWER = re.compile(r"([A-Z]+)([A-Z][a-z])")
_LOWER_THEN_UPPER = re.compile(r"([a-z\d])([A-Z])")


def snake_case_transformation(key: str) -> str:
    """
    Convert a camelCase key to snake_case.

    Examples:
        snake_case_transformation("firstName")    # "first_name"
        snake_case_transformation("HTTPServer")   # "http_server"
        snake_case_transformation("version2Name") # "version2_name"
    """
    key = _UPPER_THEN_LOWER.sub(r"\1_\2", key)
    key = _LOWER_THEN_UPPER.sub(r"\1_\2", key)
    return key.lower()
