"""
Tests for the entry points and the ambient configuration.
"""

import pytest

from distrust import (
    Configuration,
    Err,
    Ok,
    ValidationError,
    ValidationFailed,
    assert_valid,
    current_configuration,
    is_valid,
    number,
    object_,
    snake_case_transformation,
    string,
    validate_as,
    validation_context,
)

user = object_({"firstName": string, "age": number.optional()})


class TestIsValid:
    def test_true_and_false(self):
        assert is_valid({"firstName": "Ada"}, user) is True
        assert is_valid({"firstName": 1}, user) is False


class TestValidateAs:
    def test_same_as_validate(self):
        payload = {"firstName": "Ada", "age": 36}
        assert validate_as(user, payload) == user.validate(payload)


class TestAssertValid:
    def test_returns_value(self):
        assert assert_valid({"firstName": "Ada", "extra": 1}, user) == {"firstName": "Ada"}

    def test_raises_with_errors(self):
        with pytest.raises(ValidationFailed) as exc_info:
            assert_valid({"firstName": 1, "age": "x"}, user)

        assert exc_info.value.errors == [
            ValidationError("firstName", "Expected string, got number"),
            ValidationError("age", exc_info.value.errors[1].message),
        ]
        assert str(exc_info.value).startswith(
            "At [root.firstName] Expected string, got number\nAt [root.age] "
        )


class TestValidationContext:
    def test_default_configuration(self):
        assert current_configuration() == Configuration()

    def test_ambient_key_transformation(self):
        with validation_context(transform_object_keys=snake_case_transformation):
            assert user.validate({"first_name": "Ada"}) == Ok({"firstName": "Ada"})
            assert is_valid({"first_name": "Ada"}, user)

    def test_restored_on_exit(self):
        with validation_context(transform_object_keys=snake_case_transformation):
            pass
        assert isinstance(user.validate({"first_name": "Ada"}), Err)

    def test_explicit_config_wins(self):
        with validation_context(transform_object_keys=snake_case_transformation):
            result = user.validate({"first_name": "Ada"}, Configuration())
        assert isinstance(result, Err)

    def test_key_transform_errors_propagate(self):
        def broken(key):
            raise KeyError(key)

        with pytest.raises(KeyError):
            user.validate({}, Configuration(transform_object_keys=broken))
