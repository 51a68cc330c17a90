"""
值格式化单元测试
"""

import math

import pytest

from xmlconf.utils.value_format import (
    format_bool, format_float, format_int, parse_bool, parse_float, parse_int, round_digits
)


class TestParse:
    """解析"""

    def test_parse_float(self):
        assert parse_float(" 2.5 ") == 2.5
        assert parse_float("-1e3") == -1000.0
        assert parse_float("abc") is None
        assert parse_float("1_0") is None
        assert parse_float(None) is None

    def test_parse_float_nan_text(self):
        """NaN 文本可解析（与写入格式对应）"""
        assert math.isnan(parse_float("NaN"))
        assert parse_float("-Infinity") == -math.inf

    def test_parse_int(self):
        assert parse_int("+5") == 5
        assert parse_int("007") == 7
        assert parse_int("5.0") is None
        assert parse_int(None) is None

    @pytest.mark.parametrize("text,expected", [
        ("1", True), ("YES", True), (" True ", True),
        ("0", False), ("false", False), ("", False), (None, False),
    ])
    def test_parse_bool(self, text, expected):
        assert parse_bool(text) is expected


class TestFormat:
    """格式化"""

    @pytest.mark.parametrize("value,digits,expected", [
        (3.1230000, 4, "3.123"),
        (3.14159, 2, "3.14"),
        (2.0, 2, "2"),
        (2.6, 0, "3"),
        (-0.001, 2, "0"),
        (-0.0, -1, "0"),
        (-0.0, 2, "0"),
        (14.0, -1, "14"),
        (0.1, -1, "0.1"),
        (-2.75, -1, "-2.75"),
    ])
    def test_format_float(self, value, digits, expected):
        assert format_float(value, digits) == expected

    def test_format_special_floats(self):
        assert format_float(math.nan) == "NaN"
        assert format_float(math.inf, 2) == "Infinity"
        assert format_float(-math.inf) == "-Infinity"

    def test_format_int_and_bool(self):
        assert format_int(-3) == "-3"
        assert format_bool(True) == "1"
        assert format_bool(False) == "0"


class TestRound:
    """舍入"""

    def test_negative_digits_keeps_value(self):
        assert round_digits(1.23456, -1) == 1.23456

    def test_round_half_even(self):
        assert round_digits(0.5, 0) == 0.0
        assert round_digits(1.5, 0) == 2.0

    def test_nan_passes_through(self):
        assert math.isnan(round_digits(math.nan, 2))
