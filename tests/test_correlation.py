# tests/test_correlation.py
import numpy as np
import pytest

from bivariate_utils import (
    CorrelationStatus,
    correlation_between,
    correlation_matrix,
    create_correlation_heatmap,
    get_correlation_summary,
    pearson_correlation,
)


class TestPearson:

    def test_perfect_positive_and_negative(self):
        assert pearson_correlation([1, 2, 3, 4], [2, 4, 6, 8]).value == pytest.approx(1.0)
        assert pearson_correlation([1, 2, 3, 4], [4, 3, 2, 1]).value == pytest.approx(-1.0)

    def test_constant_column_gives_zero(self):
        result = pearson_correlation([1, 2, 3], [7, 7, 7])
        assert result.value == 0.0
        assert result.status is CorrelationStatus.ZERO_VARIANCE

    def test_empty_input(self):
        assert pearson_correlation([], []).status is CorrelationStatus.ZERO_VARIANCE

    def test_matches_numpy(self):
        rng = np.random.default_rng(3)
        x, y = rng.normal(size=50), rng.normal(size=50)
        assert pearson_correlation(x, y).value == pytest.approx(np.corrcoef(x, y)[0, 1])


class TestCorrelationMatrix:

    def test_diagonal_is_one(self, linear_dataset):
        matrix = correlation_matrix(linear_dataset, ['a', 'b', 'c', 'k'])
        assert np.all(np.diag(matrix.values) == 1.0)

    def test_symmetric(self, linear_dataset):
        matrix = correlation_matrix(linear_dataset, ['a', 'b', 'c', 'k'])
        assert np.allclose(matrix.values, matrix.values.T)

    def test_known_pairs(self, linear_dataset):
        matrix = correlation_matrix(linear_dataset, ['a', 'b', 'c', 'k'])
        assert matrix.get('a', 'b') == pytest.approx(1.0)
        assert matrix.get('a', 'c') == pytest.approx(-1.0)
        assert matrix.get('a', 'k') == 0.0
        assert matrix.get('k', 'k') == 1.0

    def test_values_bounded(self, sales_dataset):
        matrix = correlation_matrix(sales_dataset, ['units', 'price'])
        assert np.all(np.abs(matrix.values) <= 1.0 + 1e-12)
        assert not np.any(np.isnan(matrix.values))

    def test_no_numeric_columns(self, sales_dataset):
        matrix = correlation_matrix(sales_dataset, [])
        assert matrix.is_empty
        assert matrix.values.shape == (0, 0)

    def test_correlation_between_self(self, linear_dataset):
        result = correlation_between(linear_dataset, 'a', 'a')
        assert result.value == 1.0
        assert result.status is CorrelationStatus.SELF

    def test_to_dataframe(self, linear_dataset):
        df = correlation_matrix(linear_dataset, ['a', 'b']).to_dataframe()
        assert list(df.columns) == ['a', 'b']
        assert list(df.index) == ['a', 'b']


class TestCorrelationSummary:

    def test_sorted_by_strength(self, linear_dataset):
        summary = get_correlation_summary(correlation_matrix(linear_dataset, ['a', 'b', 'c', 'k']))
        assert len(summary) == 6
        assert list(summary['|r|']) == sorted(summary['|r|'], reverse=True)
        assert summary.loc[len(summary) - 1, '|r|'] == 0.0

    def test_empty_summary_keeps_columns(self, linear_dataset):
        summary = get_correlation_summary(correlation_matrix(linear_dataset, ['a']))
        assert summary.empty
        assert list(summary.columns) == ['Variable 1', 'Variable 2', 'Pearson r', '|r|']


class TestHeatmap:

    def test_annotations_per_cell(self, linear_dataset):
        matrix = correlation_matrix(linear_dataset, ['a', 'b', 'c'])
        fig = create_correlation_heatmap(matrix)
        assert len(fig.layout.annotations) == 9
        assert fig.data[0].zmin == -1
        assert fig.data[0].zmax == 1

    def test_values_hidden(self, linear_dataset):
        matrix = correlation_matrix(linear_dataset, ['a', 'b'])
        fig = create_correlation_heatmap(matrix, show_values=False)
        assert len(fig.layout.annotations) == 0
