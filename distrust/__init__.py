"""
distrust - validate untrusted data into typed values, with exact error paths.

Usage:
    from distrust import array, error_debug_string, literal, number, object_
    from distrust import string, union

    user = object_({
        "name": string,
        "age": number.optional(),
        "role": union("admin", "member"),
        "tags": array(string),
    })

    result = user.validate(payload)
    if result.is_err():
        print(error_debug_string(result.errors))
"""

from .algebra import discriminated_union, intersection, union
from .context import current_configuration, validation_context
from .core import Validator, transform
from .derived import iso_date, model
from .diagnostics import (
    error_debug_string,
    get_path,
    pretty,
    snake_case_transformation,
    value_type,
)
from .primitives import (
    LiteralValidator,
    boolean,
    literal,
    null,
    number,
    string,
    undefined,
    unknown,
)
from .recursion import recursion
from .schema import ValidationFailed, assert_valid, is_valid, validate_as
from .structures import ObjectValidator, array, dictionary, object_, tuple_
from .types import (
    UNDEFINED,
    Configuration,
    Err,
    Ok,
    Path,
    Result,
    Validation,
    ValidationError,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "Validation",
    "ValidationError",
    "Path",
    "UNDEFINED",
    # Core
    "Validator",
    "LiteralValidator",
    "ObjectValidator",
    "transform",
    # Primitives
    "null",
    "undefined",
    "string",
    "number",
    "boolean",
    "unknown",
    "literal",
    # Structures
    "array",
    "tuple_",
    "object_",
    "dictionary",
    # Algebra
    "union",
    "discriminated_union",
    "intersection",
    # Recursion and derived
    "recursion",
    "iso_date",
    "model",
    # Configuration
    "Configuration",
    "validation_context",
    "current_configuration",
    "snake_case_transformation",
    # Entry points and diagnostics
    "is_valid",
    "validate_as",
    "assert_valid",
    "ValidationFailed",
    "error_debug_string",
    "get_path",
    "pretty",
    "value_type",
]
