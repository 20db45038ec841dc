"""
Bivariate Statistical Analysis
Pearson correlation across the numeric columns of a dataset
"""

import enum
import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


class CorrelationStatus(enum.Enum):
    OK = 'ok'
    SELF = 'self'
    ZERO_VARIANCE = 'zero_variance'


class CorrelationResult(NamedTuple):
    value: float
    status: CorrelationStatus


@dataclass(frozen=True)
class CorrelationMatrix:
    """
    Square Pearson matrix indexed by the numeric column list.

    ``values[i][j]`` is r(columns[i], columns[j]).
    """
    columns: List[str]
    values: np.ndarray

    def __getitem__(self, index):
        return self.values[index]

    def __len__(self) -> int:
        return len(self.columns)

    @property
    def is_empty(self) -> bool:
        return len(self.columns) == 0

    def get(self, col_a: str, col_b: str) -> float:
        i, j = self.columns.index(col_a), self.columns.index(col_b)
        return float(self.values[i, j])

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.values, index=self.columns, columns=self.columns)


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> CorrelationResult:
    """
    Pearson's r via the sum-of-products formula.

    ``r = (n*Sxy - Sx*Sy) / sqrt((n*Sxx - Sx^2) * (n*Syy - Sy^2))``

    Parameters
    ----------
    x, y : sequence of float
        Aligned columns of equal length

    Returns
    -------
    CorrelationResult
        ``(0.0, ZERO_VARIANCE)`` when either column has no spread, so the
        matrix never holds NaN.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    n = len(x_arr)
    if n == 0 or np.ptp(x_arr) == 0 or np.ptp(y_arr) == 0:
        return CorrelationResult(0.0, CorrelationStatus.ZERO_VARIANCE)

    sum_x, sum_y = np.sum(x_arr), np.sum(y_arr)
    sum_xy = np.sum(x_arr * y_arr)
    sum_x2, sum_y2 = np.sum(x_arr * x_arr), np.sum(y_arr * y_arr)

    numerator = n * sum_xy - sum_x * sum_y
    denominator_sq = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if denominator_sq <= 0:
        return CorrelationResult(0.0, CorrelationStatus.ZERO_VARIANCE)

    return CorrelationResult(float(numerator / np.sqrt(denominator_sq)), CorrelationStatus.OK)


def correlation_matrix(dataset, numeric_fields: Sequence[str]) -> CorrelationMatrix:
    """
    Pairwise Pearson matrix of the numeric columns.

    Diagonal entries are 1 before any zero-variance rule applies; the lower
    triangle mirrors the upper one.

    Parameters
    ----------
    dataset : Dataset or sequence of dict
        Records (numeric fields hold a number in every row)
    numeric_fields : sequence of str
        Output of ``profiling_utils.classify``

    Returns
    -------
    CorrelationMatrix
    """
    records = getattr(dataset, 'records', dataset)
    columns = list(numeric_fields)
    k = len(columns)
    data = {c: np.asarray([row.get(c) for row in records], dtype=float) for c in columns}

    values = np.eye(k)
    degenerate = 0
    for i in range(k):
        for j in range(i + 1, k):
            result = pearson_correlation(data[columns[i]], data[columns[j]])
            if result.status is CorrelationStatus.ZERO_VARIANCE:
                degenerate += 1
            values[i, j] = values[j, i] = result.value

    if degenerate:
        logger.debug("correlation_matrix: %d pair(s) with zero variance set to 0", degenerate)
    return CorrelationMatrix(columns=columns, values=values)


def correlation_between(dataset, col_a: str, col_b: str) -> CorrelationResult:
    """Single pair, with the self-correlation case reported as 1."""
    if col_a == col_b:
        return CorrelationResult(1.0, CorrelationStatus.SELF)
    records = getattr(dataset, 'records', dataset)
    return pearson_correlation(
        [row.get(col_a) for row in records],
        [row.get(col_b) for row in records],
    )


def get_correlation_summary(matrix: CorrelationMatrix) -> pd.DataFrame:
    """
    Off-diagonal pairs sorted by |r|, strongest first.

    Returns
    -------
    pd.DataFrame
        Columns: ['Variable 1', 'Variable 2', 'Pearson r', '|r|']
    """
    results = []
    n_vars = len(matrix)
    for i in range(n_vars):
        for j in range(i + 1, n_vars):
            corr = float(matrix.values[i, j])
            results.append({
                'Variable 1': matrix.columns[i],
                'Variable 2': matrix.columns[j],
                'Pearson r': corr,
                '|r|': abs(corr),
            })

    summary_df = pd.DataFrame(results, columns=['Variable 1', 'Variable 2', 'Pearson r', '|r|'])
    if len(summary_df) > 0:
        summary_df = summary_df.sort_values('|r|', ascending=False).reset_index(drop=True)
    return summary_df
