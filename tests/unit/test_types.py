"""
Unit Tests for Value Kinds and Canonical Strings
================================================

Tests cover:
- Boolean parsing (words, integers)
- Integer/float/double parsing and formatting
- Vector parsing with trailing delimiters
- Round-trip of canonical strings for every scalar kind
- Type table consistency (enumerations, string-backed kinds)
"""

import numpy as np
import pytest

from cmdparams.config.exceptions import ParamValueError
from cmdparams.core.types import (
    TYPE_SPECS,
    TypeTag,
    format_number,
    get_type_spec,
    parse_boolean,
    parse_double,
    parse_integer,
    split_vector,
)


class TestBooleanConversion:
    """Test the lenient boolean grammar."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("true", True),
            ("yes", True),
            ("false", False),
            ("no", False),
            ("1", True),
            ("0", False),
            ("7", True),
            ("-3", False),
        ],
    )
    def test_parse_boolean(self, text, expected):
        assert parse_boolean(text) is expected

    def test_format_boolean(self):
        spec = TYPE_SPECS[TypeTag.BOOLEAN]
        assert spec.format(True) == "true"
        assert spec.format(False) == "false"

    def test_words_are_case_sensitive(self):
        """'TRUE' is not a word the grammar knows and has no integer prefix."""
        with pytest.raises(ParamValueError):
            parse_boolean("TRUE")


class TestNumericConversion:
    """Test integer, float and double conversions."""

    def test_integer_prefix_is_accepted(self):
        assert parse_integer("42") == 42
        assert parse_integer(" -7") == -7
        assert parse_integer("1.5") == 1
        assert parse_integer("12abc") == 12

    def test_integer_without_digits_fails(self):
        with pytest.raises(ParamValueError) as exc_info:
            parse_integer("abc")

        assert exc_info.value.type_name == "integer"
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.parametrize("parse", [parse_integer, parse_boolean])
    def test_overlong_integer_fails_cleanly(self, parse):
        with pytest.raises(ParamValueError):
            parse("9" * 5000)

    def test_double_parsing(self):
        assert parse_double("0.333") == 0.333
        assert parse_double("1e-3") == 0.001
        assert parse_double("2.5mm") == 2.5

    def test_double_without_number_fails(self):
        with pytest.raises(ParamValueError):
            parse_double("abc")

    def test_float_is_single_precision(self):
        spec = TYPE_SPECS[TypeTag.FLOAT]
        value = spec.parse("0.1")

        assert isinstance(value, np.float32)
        assert spec.format(value) == "0.1"

    def test_format_number_drops_integral_fraction(self):
        assert format_number(0) == "0"
        assert format_number(1.0) == "1"
        assert format_number(0.01) == "0.01"


class TestRoundTrip:
    """parse(format(x)) == x for every scalar kind."""

    @pytest.mark.parametrize(
        "tag,value",
        [
            (TypeTag.BOOLEAN, True),
            (TypeTag.BOOLEAN, False),
            (TypeTag.INTEGER, -123456),
            (TypeTag.DOUBLE, 0.1 + 0.2),
            (TypeTag.DOUBLE, -1.5e300),
            (TypeTag.FLOAT, np.float32(3.14159)),
            (TypeTag.STRING, "hello world"),
            (TypeTag.INTEGER_VECTOR, [1, -2, 3]),
            (TypeTag.DOUBLE_VECTOR, [0.1, 2.0, 1e-9]),
            (TypeTag.STRING_VECTOR, ["a", "b c"]),
        ],
    )
    def test_round_trip(self, tag, value):
        spec = TYPE_SPECS[tag]
        assert spec.parse(spec.format(value)) == value

    def test_float_vector_round_trip(self):
        spec = TYPE_SPECS[TypeTag.FLOAT_VECTOR]
        values = [np.float32(0.1), np.float32(-2.75)]

        assert spec.parse(spec.format(values)) == values


class TestVectorConversion:
    """Test comma-separated vector parsing."""

    def test_integer_vector(self):
        assert TYPE_SPECS[TypeTag.INTEGER_VECTOR].parse("1,2,3,4") == [1, 2, 3, 4]

    def test_trailing_comma_is_dropped(self):
        assert TYPE_SPECS[TypeTag.INTEGER_VECTOR].parse("1,2,3,") == [1, 2, 3]

    def test_empty_string_is_empty_vector(self):
        assert TYPE_SPECS[TypeTag.DOUBLE_VECTOR].parse("") == []

    def test_embedded_empty_token_fails_for_numbers(self):
        with pytest.raises(ParamValueError):
            TYPE_SPECS[TypeTag.INTEGER_VECTOR].parse("1,,2")

    def test_embedded_empty_token_kept_for_strings(self):
        assert TYPE_SPECS[TypeTag.STRING_VECTOR].parse("a,,b") == ["a", "", "b"]

    def test_format_vector(self):
        assert TYPE_SPECS[TypeTag.INTEGER_VECTOR].format([1, 2, 3]) == "1,2,3"
        assert TYPE_SPECS[TypeTag.DOUBLE_VECTOR].format([1.5, 2.0]) == "1.5,2.0"

    def test_split_vector_drops_only_one_trailing_token(self):
        assert split_vector("a,b,,") == ["a", "b", ""]

    def test_vector_coerce_rejects_plain_string(self):
        with pytest.raises(TypeError):
            TYPE_SPECS[TypeTag.STRING_VECTOR].coerce("a,b")


class TestTypeTable:
    """Test the data-driven kind table."""

    def test_every_tag_has_a_spec(self):
        assert set(TYPE_SPECS) == set(TypeTag)

    def test_lookup_by_name(self):
        assert get_type_spec("double-vector").tag is TypeTag.DOUBLE_VECTOR

    def test_enumerations_share_scalar_storage(self):
        spec = TYPE_SPECS[TypeTag.INTEGER_ENUMERATION]
        assert spec.parse("3") == 3
        assert "enumeration" in spec.tags
        assert not spec.ranged

    def test_string_backed_kinds(self):
        for tag in (TypeTag.FILE, TypeTag.DIRECTORY, TypeTag.IMAGE, TypeTag.GEOMETRY):
            assert TYPE_SPECS[tag].parse("/tmp/a b.nrrd") == "/tmp/a b.nrrd"

    def test_point_and_region_are_string_vectors(self):
        spec = TYPE_SPECS[TypeTag.POINT]
        assert spec.parse("1,2,3") == ["1", "2", "3"]
        assert spec.attribs == frozenset({"multiple", "coordinateSystem"})

    def test_file_attribs(self):
        assert TYPE_SPECS[TypeTag.FILE].attribs == frozenset({"fileExtensions"})
        assert TYPE_SPECS[TypeTag.IMAGE].attribs == frozenset({"type", "fileExtensions"})

    def test_only_plain_numbers_are_ranged(self):
        ranged = {tag for tag, spec in TYPE_SPECS.items() if spec.ranged}
        assert ranged == {TypeTag.INTEGER, TypeTag.FLOAT, TypeTag.DOUBLE}

    def test_tag_string_value(self):
        assert str(TypeTag.INTEGER_ENUMERATION) == "integer-enumeration"
