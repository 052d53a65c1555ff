"""
Validators built from the primitives: ISO dates and Pydantic models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from functools import reduce
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .core import Validator
from .diagnostics import get_path, pretty
from .primitives import string
from .types import Configuration, Err, Ok, Path, Result, Validation, ValidationError

_Model = TypeVar("_Model", bound=BaseModel)


def _parse_iso_date(text: str) -> Result[str, datetime]:
    try:
        return Ok(datetime.fromisoformat(text))
    except ValueError:
        return Err(f"Expected ISO date, got: {pretty(text)}")


iso_date: Validator[datetime] = string.flat_map(_parse_iso_date)


@dataclass(frozen=True, slots=True)
class ModelValidator(Validator[_Model]):
    """
    Adapts a Pydantic model into a validator.

    Validation runs in Pydantic's strict mode so nothing gets coerced, and
    each Pydantic error is reported at the current path extended by its loc.
    """

    model_class: type[_Model]

    def _check(self, value: Any, config: Configuration, path: Path) -> Validation[_Model]:
        try:
            return Ok(self.model_class.model_validate(value, strict=True))
        except PydanticValidationError as e:
            return Err(
                [
                    ValidationError(
                        reduce(lambda p, seg: get_path(str(seg), p), error["loc"], path),
                        error["msg"],
                    )
                    for error in e.errors()
                ]
            )


def model(model_class: type[_Model]) -> ModelValidator[_Model]:
    """
    Validate a value into an instance of a Pydantic model.

    Usage:
        class Address(BaseModel):
            city: str
            zip_code: str

        user = object_({"name": string, "address": model(Address)})

    Raises:
        TypeError: If `model_class` is not a Pydantic BaseModel subclass
    """
    if not (isinstance(model_class, type) and issubclass(model_class, BaseModel)):
        raise TypeError(f"model() requires a Pydantic model class, got {model_class!r}")
    return ModelValidator(model_class)
