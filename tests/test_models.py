"""Tests for data value parsing and ChartSpec construction."""
from __future__ import annotations

import math

import pytest

from models import CHART_TYPES, ChartSpec, make_point_labels, parse_data_values


class TestParseDataValues:
    def test_simple_list(self):
        assert parse_data_values("1,2,3") == [1.0, 2.0, 3.0]

    def test_whitespace_is_trimmed(self):
        assert parse_data_values(" 4 , 5.5 ,6 ") == [4.0, 5.5, 6.0]

    def test_non_numeric_token_is_nan(self):
        values = parse_data_values("1,x,3")
        assert values[0] == 1.0
        assert math.isnan(values[1])
        assert values[2] == 3.0

    def test_empty_token_is_zero(self):
        assert parse_data_values("1,,3") == [1.0, 0.0, 3.0]

    def test_empty_input_is_single_zero(self):
        assert parse_data_values("") == [0.0]

    def test_none_input(self):
        assert parse_data_values(None) == [0.0]

    def test_scientific_and_negative(self):
        assert parse_data_values("-2,1e3") == [-2.0, 1000.0]

    def test_digit_separator_is_nan(self):
        assert math.isnan(parse_data_values("1_000")[0])

    @pytest.mark.parametrize("token", ["inf", "-inf", "nan", "NaN", "infinity", "INFINITY", "1e", "e5", ".", "1.2.3", "٣"])
    def test_non_literal_spellings_are_nan(self, token):
        assert math.isnan(parse_data_values(token)[0])

    def test_infinity_literal(self):
        assert parse_data_values("Infinity,-Infinity,+Infinity") == [math.inf, -math.inf, math.inf]

    def test_overflowing_exponent_is_infinite(self):
        assert parse_data_values("1e309,-1e309") == [math.inf, -math.inf]

    def test_radix_literals(self):
        assert parse_data_values("0x10,0o7,0b11") == [16.0, 7.0, 3.0]

    def test_signed_radix_literal_is_nan(self):
        assert math.isnan(parse_data_values("-0x10")[0])

    def test_leading_and_trailing_dot(self):
        assert parse_data_values(".5,5.") == [0.5, 5.0]


class TestChartSpec:
    def test_labels_are_one_indexed(self):
        spec = ChartSpec.from_form("Sales", "bar", "1,2,3")
        assert spec.labels == ["Point 1", "Point 2", "Point 3"]
        assert spec.values == (1.0, 2.0, 3.0)

    def test_malformed_value_does_not_raise(self):
        spec = ChartSpec.from_form("t", "line", "1,x,3")
        assert len(spec.values) == 3
        assert math.isnan(spec.values[1])

    def test_label_prefix(self):
        spec = ChartSpec.from_form("t", "pie", "5,6", label_prefix="Ponto")
        assert spec.labels == ["Ponto 1", "Ponto 2"]

    def test_unknown_chart_type_rejected(self):
        with pytest.raises(ValueError):
            ChartSpec("t", "sunburst", (1.0,))

    def test_title_none_becomes_empty(self):
        assert ChartSpec.from_form(None, "bar", "1").title == ""

    def test_values_stored_as_tuple(self):
        spec = ChartSpec("t", "bar", [1, 2])
        assert spec.values == (1.0, 2.0)

    @pytest.mark.parametrize("chart_type", CHART_TYPES)
    def test_all_supported_types_accepted(self, chart_type):
        assert ChartSpec("t", chart_type, (1.0,)).chart_type == chart_type


def test_make_point_labels_empty():
    assert make_point_labels(0) == []
