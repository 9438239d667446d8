# ==============================================
# Tests for Parsing Module
# ==============================================

import math

import pytest

from describe.parsing import Value, ValueParser


class TestValueParser:

    @pytest.mark.parametrize("raw, expected", [
        ("1", 1.0),
        ("-2.5", -2.5),
        ("+3", 3.0),
        (".5", 0.5),
        ("4.", 4.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        ("  7  ", 7.0),
        ("\t8\n", 8.0),
    ])
    def test_numbers_are_present(self, raw, expected):
        value = ValueParser.parse(raw)
        assert value == Value.exist(expected)
        assert value.is_present

    def test_special_floats(self):
        assert ValueParser.parse("inf").number == math.inf
        assert ValueParser.parse("-Infinity").number == -math.inf
        assert math.isnan(ValueParser.parse("NaN").number)

    @pytest.mark.parametrize("raw", ["", "   ", "\t"])
    def test_blank_is_missing(self, raw):
        value = ValueParser.parse(raw)
        assert value == Value.empty()
        assert not value.is_present

    @pytest.mark.parametrize("raw", ["foo", "1_000", "1,5", "0x10", "1.2.3", "e5", "--1"])
    def test_text_is_not_a_value(self, raw):
        assert ValueParser.parse(raw) is None

    def test_parse_all_success(self):
        values = ValueParser.parse_all(["1", "", "2"])
        assert values == [Value.exist(1), Value.empty(), Value.exist(2)]

    def test_parse_all_fails_on_any_text(self):
        assert ValueParser.parse_all(["1", "2", "foo"]) is None

    def test_parse_all_empty_column(self):
        assert ValueParser.parse_all([]) == []
