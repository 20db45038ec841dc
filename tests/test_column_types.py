# tests/test_column_types.py
import math
from datetime import date, datetime

import pandas as pd
import pytest

from profiling_utils import (
    classify,
    coerce_record,
    coerce_value,
    format_cell,
    is_date_like,
    is_missing,
    is_numeric_value,
    profile_columns,
)


class TestCoercion:

    @pytest.mark.parametrize("raw, expected", [
        ("42", 42.0),
        (" 3.5 ", 3.5),
        ("-0.25", -0.25),
        ("+7", 7.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("2.5E-2", 0.025),
    ])
    def test_decimal_text_becomes_float(self, raw, expected):
        assert coerce_value(raw) == pytest.approx(expected)
        assert isinstance(coerce_value(raw), float)

    @pytest.mark.parametrize("raw", ["abc", "", "1,000", "12abc", "inf", "NaN", "0x1A", "1e400"])
    def test_non_decimal_text_is_unchanged(self, raw):
        assert coerce_value(raw) == raw

    def test_non_text_values_pass_through(self):
        assert coerce_value(None) is None
        assert coerce_value(True) is True
        assert coerce_value(3) == 3

    def test_coercion_is_idempotent(self, sales_records):
        once = [coerce_record(r) for r in sales_records]
        twice = [coerce_record(r) for r in once]
        assert once == twice

    def test_coerce_record_returns_new_dict(self):
        row = {'x': '1'}
        out = coerce_record(row)
        assert out == {'x': 1.0}
        assert row == {'x': '1'}


class TestValuePredicates:

    def test_booleans_are_not_numbers(self):
        assert not is_numeric_value(True)
        assert not is_numeric_value(False)

    def test_non_finite_floats_are_not_numbers(self):
        assert not is_numeric_value(float('inf'))
        assert not is_numeric_value(float('nan'))

    def test_ints_and_floats_are_numbers(self):
        assert is_numeric_value(0)
        assert is_numeric_value(-2.5)

    def test_missing(self):
        assert is_missing(None)
        assert is_missing(math.nan)
        assert not is_missing("")
        assert not is_missing(0)


class TestClassify:

    def test_numeric_and_date_fields(self, sales_dataset):
        headers, numeric, dates = classify(sales_dataset)
        assert headers == ['region', 'units', 'price', 'date']
        assert numeric == ['units', 'price']
        assert dates == ['date']

    def test_accepts_plain_records(self):
        headers, numeric, _ = classify([{'a': 1.0, 'b': 'x'}])
        assert headers == ['a', 'b']
        assert numeric == ['a']

    def test_one_text_cell_makes_column_categorical(self):
        rows = [{'v': 1.0}, {'v': 2.0}, {'v': 'n/a'}]
        assert classify(rows)[1] == []

    def test_missing_key_excludes_field(self):
        rows = [{'a': 1.0, 'b': 2.0}, {'a': 3.0}]
        headers, numeric, _ = classify(rows)
        assert headers == ['a', 'b']
        assert numeric == ['a']

    def test_missing_value_excludes_field(self):
        rows = [{'a': 1.0}, {'a': None}]
        assert classify(rows)[1] == []

    def test_empty_dataset(self):
        assert classify([]) == ([], [], [])

    def test_profile_columns(self, sales_dataset):
        profiles = profile_columns(sales_dataset)
        assert profiles['units'].is_numeric
        assert profiles['region'].is_categorical
        assert profiles['date'].is_date_like
        assert profiles['date'].is_categorical


class TestDates:

    def test_iso_prefix_is_date_like(self):
        assert is_date_like('2024-03-15')
        assert is_date_like('2024-03-15T10:30:00')

    def test_other_text_is_not_date_like(self):
        assert not is_date_like('15/03/2024')
        assert not is_date_like('hello')
        assert not is_date_like(20240315)

    def test_impossible_date_is_not_date_like(self):
        assert not is_date_like('2024-13-45')

    def test_format_cell(self):
        assert format_cell('2024-03-15') == '15/03/2024'
        assert format_cell('2024-13-45') == '2024-13-45'
        assert format_cell(None) == ''
        assert format_cell(3.5) == '3.5'
        assert format_cell('North') == 'North'

    def test_format_cell_datetime_values(self):
        assert format_cell(pd.Timestamp('2024-01-05')) == '05/01/2024'
        assert format_cell(datetime(2024, 3, 15, 10, 30)) == '15/03/2024'
        assert format_cell(date(2024, 3, 15)) == '15/03/2024'
        assert format_cell(pd.NaT) == ''
