# tests/test_eda_calculations.py
import math

import numpy as np
import pytest

from eda_utils.eda_calculations import (
    find_modes,
    format_modes,
    quartiles,
    run_summary_for_all_columns,
    summaries_to_dataframe,
    summarize,
    summarize_column,
)


class TestSummarize:

    def test_one_to_ten(self):
        s = summarize(list(range(1, 11)))
        assert s.min == 1.0
        assert s.max == 10.0
        assert s.median == 6.0
        assert s.mean == pytest.approx(5.5)
        assert s.std_dev == pytest.approx(2.8723, abs=1e-4)
        assert s.count == 10

    def test_outlier_beyond_upper_fence(self):
        s = summarize([1, 2, 3, 4, 5, 6, 7, 8, 9, 100])
        assert s.q1 == 3.0
        assert s.q3 == 8.0
        assert s.iqr == 5.0
        assert s.lower_fence == pytest.approx(-4.5)
        assert s.upper_fence == pytest.approx(15.5)
        assert s.outliers == (100.0,)

    def test_fence_value_is_not_an_outlier(self):
        # q1=2, q3=4, upper fence 7
        s = summarize([1, 2, 3, 4, 7])
        assert s.upper_fence == 7.0
        assert s.outliers == ()

    def test_duplicate_outliers_kept(self):
        s = summarize([1, 2, 3, 4, 5, 6, 7, 8, 100, 100])
        assert s.outliers == (100.0, 100.0)

    def test_empty_returns_none(self):
        assert summarize([]) is None
        assert summarize([None, math.nan]) is None

    def test_missing_values_dropped(self):
        s = summarize([None, 1.0, math.nan, 3.0])
        assert s.count == 2
        assert s.mean == 2.0

    def test_constant_column(self):
        s = summarize([5, 5, 5, 5])
        assert s.std_dev == 0.0
        assert s.iqr == 0.0
        assert s.outliers == ()
        assert s.modes == frozenset({5.0})

    @pytest.mark.parametrize("value", [0.1, 0.7, 3.3])
    def test_constant_decimal_column(self, value):
        s = summarize([value] * 3)
        assert s.std_dev == 0.0
        assert s.outliers == ()

    def test_single_value(self):
        s = summarize([4.2])
        assert s.min == s.q1 == s.median == s.q3 == s.max == 4.2
        assert s.all_unique

    def test_ordering(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            s = summarize(rng.normal(size=rng.integers(1, 60)).tolist())
            assert s.min <= s.q1 <= s.median <= s.q3 <= s.max
            assert s.iqr >= 0
            assert s.std_dev >= 0

    def test_quartiles_are_floor_indexed(self):
        assert quartiles(np.array([1.0, 2.0, 3.0, 4.0])) == (2.0, 3.0, 4.0)

    def test_to_dict(self):
        d = summarize([1, 2, 2]).to_dict()
        assert d['modes'] == [2.0]
        assert d['count'] == 3


class TestModes:

    def test_multiple_modes(self):
        modes, all_unique = find_modes([1, 2, 2, 3, 3])
        assert modes == frozenset({2.0, 3.0})
        assert not all_unique

    def test_all_unique(self):
        modes, all_unique = find_modes([1, 2, 3])
        assert modes == frozenset()
        assert all_unique

    def test_format_modes_truncates(self):
        text, has_more = format_modes(frozenset({4.0, 1.0, 3.0, 2.0}))
        assert text == "1, 2, 3..."
        assert has_more

    def test_format_modes_short_list(self):
        assert format_modes(frozenset({2.5})) == ("2.5", False)

    def test_format_modes_none(self):
        assert format_modes(frozenset()) == ("N/A (all unique)", False)


class TestColumnSummaries:

    def test_summarize_column(self, sales_dataset):
        s = summarize_column(sales_dataset, 'units')
        assert s.count == 5
        assert s.median == 11.0

    def test_run_summary_for_all_columns(self, sales_dataset):
        summaries = run_summary_for_all_columns(sales_dataset, ['units', 'price'])
        assert list(summaries) == ['units', 'price']
        assert summaries['price'].max == 4.0

    def test_summaries_to_dataframe(self, sales_dataset):
        df = summaries_to_dataframe(run_summary_for_all_columns(sales_dataset, ['units']))
        assert df.loc[0, 'Variable'] == 'units'
        assert df.loc[0, 'N'] == 5
        assert df.loc[0, 'Maximum'] == 15.0
