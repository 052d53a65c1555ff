"""
Tests for union, discriminated_union and intersection.
"""

import pytest

from distrust import (
    Err,
    Ok,
    ValidationError,
    discriminated_union,
    intersection,
    literal,
    number,
    object_,
    string,
    union,
)

circle = object_({"type": literal("circle"), "radius": number})
square = object_({"type": literal("square"), "side": number})
shape = discriminated_union("type", circle, square)


class TestUnion:
    def test_first_match_wins(self):
        v = union(literal("a"), literal("b"))
        assert v.validate("b") == Ok("b")

    def test_tries_members_in_order(self):
        v = union(number.map(lambda n: "first"), number.map(lambda n: "second"))
        assert v.validate(1) == Ok("first")

    def test_itemized_failure(self):
        result = union(string, number).validate(True)
        assert isinstance(result, Err)
        assert result.errors == [
            ValidationError(
                "",
                "The value true \nis not part of the union: \n\n"
                "Union type #0 => \n  At [root] Expected string, got boolean\n"
                "Union type #1 => \n  At [root] Expected number, got boolean",
            )
        ]

    def test_branch_detail_is_indented(self):
        point = object_({"x": number, "y": number})
        result = union(point, string).validate({"x": "1", "y": "2"}, None, "pos")
        message = result.errors[0].message
        assert result.errors[0].path == "pos"
        assert (
            "Union type #0 => \n"
            "  At [root.pos.x] Expected number, got string\n"
            "  At [root.pos.y] Expected number, got string"
        ) in message

    def test_literal_values(self):
        color = union("red", "green", "blue")
        assert color.validate("green") == Ok("green")
        assert color.validate("pink").errors == [
            ValidationError("", 'The value "pink" is not part of the union')
        ]

    def test_literal_values_are_strict(self):
        assert isinstance(union(1, 2).validate(True), Err)

    def test_operator(self):
        v = string | number
        assert v.validate("a") == Ok("a")
        assert v.validate(1) == Ok(1)
        assert isinstance(v.validate(None), Err)

    def test_empty_union_is_rejected(self):
        with pytest.raises(ValueError):
            union()

    def test_mixed_members_are_rejected(self):
        with pytest.raises(TypeError):
            union(string, "a")


class TestDiscriminatedUnion:
    def test_dispatch(self):
        assert shape.validate({"type": "square", "side": 2}) == Ok(
            {"type": "square", "side": 2}
        )
        assert shape.validate({"type": "circle", "radius": 1.5}) == Ok(
            {"type": "circle", "radius": 1.5}
        )

    def test_member_errors_propagate_unchanged(self):
        result = shape.validate({"type": "square", "side": "x"})
        assert result.errors == [ValidationError("side", "Expected number, got string")]

    def test_unknown_discriminant(self):
        result = shape.validate({"type": "triangle"})
        assert len(result.errors) == 1
        assert result.errors[0].message.startswith("union member type=triangle is unknown.")

    def test_missing_discriminant(self):
        result = shape.validate({"side": 1})
        assert result.errors[0].message.startswith("union member type=undefined is unknown.")

    def test_unknown_numeric_and_null_discriminants(self):
        assert shape.validate({"type": 3}).errors[0].message.startswith(
            "union member type=3 is unknown."
        )
        assert shape.validate({"type": None}).errors[0].message.startswith(
            "union member type=null is unknown."
        )

    def test_nullish_input(self):
        assert shape.validate(None).errors == [
            ValidationError("", "union member is nullish: null")
        ]

    def test_non_mapping_input(self):
        result = shape.validate("square")
        assert result.errors[0].message.startswith("union member type=undefined is unknown.")

    def test_unhashable_discriminant(self):
        result = shape.validate({"type": ["square"]})
        assert isinstance(result, Err)

    def test_bool_and_int_tags_are_distinct(self):
        v = discriminated_union(
            "v",
            object_({"v": literal(1), "n": number}),
            object_({"v": literal(True), "s": string}),
        )
        assert v.validate({"v": True, "s": "a"}) == Ok({"v": True, "s": "a"})
        assert v.validate({"v": 1, "n": 2}) == Ok({"v": 1, "n": 2})

    def test_members_must_be_objects(self):
        with pytest.raises(TypeError):
            discriminated_union("type", string)

    def test_members_need_literal_discriminant(self):
        with pytest.raises(TypeError):
            discriminated_union("type", object_({"type": string}))

    def test_duplicate_discriminants(self):
        with pytest.raises(ValueError):
            discriminated_union("type", circle, circle)


class TestIntersection:
    def test_merges_object_results(self):
        named = object_({"name": string})
        aged = object_({"age": number})
        result = intersection(named, aged).validate({"name": "a", "age": 1, "x": 0})
        assert result == Ok({"name": "a", "age": 1})

    def test_later_members_overwrite(self):
        v = intersection(
            object_({"a": number}),
            object_({"a": number.map(lambda n: n * 2)}),
        )
        assert v.validate({"a": 2}) == Ok({"a": 4})

    def test_fail_fast(self):
        v = intersection(object_({"a": number}), object_({"b": number}))
        result = v.validate({})
        assert result.errors == [ValidationError("a", "Expected number, got undefined")]

    def test_operator(self):
        v = object_({"a": number}) & object_({"b": number})
        assert v.validate({"a": 1, "b": 2}) == Ok({"a": 1, "b": 2})

    def test_non_mapping_results(self):
        v = intersection(string, string.filter(lambda s: len(s) > 1))
        assert v.validate("ab") == Ok("ab")
        assert isinstance(v.validate("a"), Err)

    def test_empty(self):
        assert intersection().validate(123) == Ok({})
