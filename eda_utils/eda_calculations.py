"""
EDA Calculations Module
=======================

Descriptive statistics for the Column Analytics view.

Provides:
- Five-number summary with order-statistic quartiles
- Mean and population standard deviation
- Mode(s) with the "all values unique" rule
- IQR-fence outliers

Notes
-----
Quartiles are nearest-rank by floor (``sorted[n // 4]`` etc.) with no
interpolation, even for even n. ``median_order_statistic`` therefore differs
from ``skewness.median_interpolated``; both are kept on purpose.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from profiling_utils import is_missing, iter_column

logger = logging.getLogger(__name__)

FENCE_FACTOR = 1.5
MODE_DISPLAY_LIMIT = 3


@dataclass(frozen=True)
class SummaryStats:
    """Five-number summary, moments, modes and outliers of one column."""
    min: float
    q1: float
    median: float
    q3: float
    max: float
    iqr: float
    mean: float
    std_dev: float
    modes: FrozenSet[float] = field(default_factory=frozenset)
    outliers: Tuple[float, ...] = ()
    count: int = 0

    @property
    def lower_fence(self) -> float:
        return self.q1 - FENCE_FACTOR * self.iqr

    @property
    def upper_fence(self) -> float:
        return self.q3 + FENCE_FACTOR * self.iqr

    @property
    def all_unique(self) -> bool:
        return not self.modes

    def to_dict(self) -> Dict[str, Any]:
        return {
            'min': self.min,
            'q1': self.q1,
            'median': self.median,
            'q3': self.q3,
            'max': self.max,
            'iqr': self.iqr,
            'mean': self.mean,
            'std_dev': self.std_dev,
            'modes': sorted(self.modes),
            'outliers': list(self.outliers),
            'count': self.count,
        }


# ──────────────────────────────────────────────
#  BUILDING BLOCKS
# ──────────────────────────────────────────────

def median_order_statistic(sorted_values: np.ndarray) -> float:
    """Median as ``sorted[n // 2]`` (no averaging for even n)."""
    return float(sorted_values[len(sorted_values) // 2])


def quartiles(sorted_values: np.ndarray) -> Tuple[float, float, float]:
    """
    Floor-indexed quartiles of an ascending array.

    Returns
    -------
    (q1, median, q3) : tuple of float
    """
    n = len(sorted_values)
    q1 = float(sorted_values[n // 4])
    q3 = float(sorted_values[(3 * n) // 4])
    return q1, median_order_statistic(sorted_values), q3


def population_std(values: np.ndarray, mean: float) -> float:
    """
    ``sqrt(sum((x - mean)^2) / n)``, no Bessel correction.

    Exactly 0.0 when every value is equal; ``sum / n`` can leave the mean a
    rounding step away from the value (e.g. ``[0.1] * 3``).
    """
    if np.ptp(values) == 0:
        return 0.0
    return float(np.sqrt(np.sum((values - mean) ** 2) / len(values)))


def find_modes(values: Union[Sequence[float], np.ndarray]) -> Tuple[FrozenSet[float], bool]:
    """
    Most frequent values.

    Parameters
    ----------
    values : array-like
        Non-missing numbers

    Returns
    -------
    (modes, all_unique) : tuple
        ``modes`` holds every value reaching the highest frequency, but only
        when that frequency is above 1. Otherwise it is empty and
        ``all_unique`` is True.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return frozenset(), True

    uniques, counts = np.unique(arr, return_counts=True)
    max_freq = int(counts.max())
    if max_freq <= 1:
        return frozenset(), True

    modes = frozenset(float(v) for v in uniques[counts == max_freq])
    return modes, False


def find_outliers(sorted_values: np.ndarray, q1: float, q3: float) -> Tuple[float, ...]:
    """Values strictly outside the Tukey fence, ascending, duplicates kept."""
    iqr = q3 - q1
    lower = q1 - FENCE_FACTOR * iqr
    upper = q3 + FENCE_FACTOR * iqr
    mask = (sorted_values < lower) | (sorted_values > upper)
    return tuple(float(v) for v in sorted_values[mask])


# ──────────────────────────────────────────────
#  SUMMARY
# ──────────────────────────────────────────────

def summarize(values: Sequence[Any], non_null: bool = True) -> Optional[SummaryStats]:
    """
    Summary statistics of one numeric column.

    Parameters
    ----------
    values : sequence
        Column values
    non_null : bool, default True
        Drop Missing entries (``None``/NaN) before computing. Pass False when
        the caller has already filtered them.

    Returns
    -------
    SummaryStats or None
        None when no values remain.
    """
    if non_null:
        values = [v for v in values if not is_missing(v)]
    if len(values) == 0:
        logger.debug("summarize: empty column, no summary")
        return None

    data = np.sort(np.asarray(values, dtype=float))
    n = len(data)

    minimum = float(data[0])
    maximum = float(data[n - 1])
    q1, median, q3 = quartiles(data)

    mean = float(np.sum(data) / n)
    std_dev = population_std(data, mean)
    modes, _ = find_modes(data)

    return SummaryStats(
        min=minimum,
        q1=q1,
        median=median,
        q3=q3,
        max=maximum,
        iqr=q3 - q1,
        mean=mean,
        std_dev=std_dev,
        modes=modes,
        outliers=find_outliers(data, q1, q3),
        count=n,
    )


def column_values(dataset, column: str) -> List[Any]:
    """Values of ``column`` with Missing entries dropped."""
    records = getattr(dataset, 'records', dataset)
    return [v for v in iter_column(records, column) if not is_missing(v)]


def summarize_column(dataset, column: str) -> Optional[SummaryStats]:
    """``summarize`` applied to one field of a dataset."""
    return summarize(column_values(dataset, column), non_null=False)


def run_summary_for_all_columns(
    dataset,
    numeric_fields: Sequence[str]
) -> Dict[str, Optional[SummaryStats]]:
    """
    Summaries for every numeric field.

    Returns
    -------
    dict  {column_name: SummaryStats or None}
    """
    return {col: summarize_column(dataset, col) for col in numeric_fields}


# ──────────────────────────────────────────────
#  DISPLAY HELPERS
# ──────────────────────────────────────────────

def format_modes(
    modes: FrozenSet[float],
    limit: int = MODE_DISPLAY_LIMIT
) -> Tuple[str, bool]:
    """
    Short text for the mode card.

    Returns
    -------
    (text, has_more) : tuple
        ``text`` lists at most ``limit`` modes; ``has_more`` tells the caller
        to offer the full list.
    """
    if not modes:
        return "N/A (all unique)", False
    ordered = sorted(modes)
    text = ", ".join(_format_number(m) for m in ordered[:limit])
    has_more = len(ordered) > limit
    if has_more:
        text += "..."
    return text, has_more


def summaries_to_dataframe(summaries: Dict[str, Optional[SummaryStats]]) -> pd.DataFrame:
    """One row per column, used by the export and the overview table."""
    rows = []
    for col, s in summaries.items():
        if s is None:
            rows.append({'Variable': col, 'N': 0})
            continue
        rows.append({
            'Variable': col,
            'N':        s.count,
            'Minimum':  s.min,
            'Q1':       s.q1,
            'Median':   s.median,
            'Q3':       s.q3,
            'Maximum':  s.max,
            'IQR':      s.iqr,
            'Mean':     s.mean,
            'StDev':    s.std_dev,
            'Modes':    ", ".join(_format_number(m) for m in sorted(s.modes)),
            'Outliers': len(s.outliers),
        })
    return pd.DataFrame(rows)


def _format_number(value: float) -> str:
    return f"{value:g}"
