"""
Skewness Module
===============

Mean / median / mode comparison, Pearson's second skewness coefficient and
the normal-curve overlay drawn on top of the frequency histogram.
"""

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Optional, Sequence, Tuple

import numpy as np
from scipy import stats as sp_stats

from profiling_utils import is_missing
from .eda_calculations import find_modes, population_std

logger = logging.getLogger(__name__)

SKEW_THRESHOLD = 0.5
MIN_HISTOGRAM_BINS = 10
NORMAL_CURVE_POINTS = 100

# Marker heights relative to the peak of the scaled curve
MEAN_MARKER_FACTOR = 1.10
MEDIAN_MARKER_FACTOR = 1.05
MODE_MARKER_FACTOR = 1.15


class SkewStatus(enum.Enum):
    OK = 'ok'
    ZERO_VARIANCE = 'zero_variance'


@dataclass(frozen=True)
class SkewnessStats:
    mean: float
    median: float
    std: float
    skewness: float
    modes: FrozenSet[float] = field(default_factory=frozenset)
    all_unique: bool = True
    count: int = 0
    min: float = 0.0
    max: float = 0.0
    status: SkewStatus = SkewStatus.OK

    @property
    def is_degenerate(self) -> bool:
        return self.status is not SkewStatus.OK

    @property
    def label(self) -> str:
        return classify_skewness(self.skewness)


@dataclass(frozen=True)
class NormalCurve:
    """Fitted normal density sampled over the observed range, histogram-scaled."""
    x: np.ndarray
    y: np.ndarray
    bin_count: int

    @property
    def peak(self) -> float:
        return float(self.y.max()) if self.y.size else 0.0


def median_interpolated(sorted_values: np.ndarray) -> float:
    """
    True median of an ascending array.

    Average of ``sorted[n/2 - 1]`` and ``sorted[n/2]`` for even n, the central
    element for odd n.
    """
    n = len(sorted_values)
    if n % 2 == 0:
        return float((sorted_values[n // 2 - 1] + sorted_values[n // 2]) / 2)
    return float(sorted_values[n // 2])


def skewness_stats(values: Sequence[Any]) -> Optional[SkewnessStats]:
    """
    Skewness statistics of one numeric column.

    Parameters
    ----------
    values : sequence
        Column values; Missing entries are dropped.

    Returns
    -------
    SkewnessStats or None
        None for an empty column. A zero-variance column yields
        ``skewness == 0.0`` and ``status == SkewStatus.ZERO_VARIANCE``.
    """
    clean = [v for v in values if not is_missing(v)]
    if not clean:
        return None

    data = np.sort(np.asarray(clean, dtype=float))
    n = len(data)
    mean = float(np.sum(data) / n)
    median = median_interpolated(data)
    std = population_std(data, mean)
    modes, all_unique = find_modes(data)

    if std == 0:
        logger.debug("skewness_stats: zero variance over %d values, skewness set to 0", n)
        skew, status = 0.0, SkewStatus.ZERO_VARIANCE
    else:
        skew, status = 3 * (mean - median) / std, SkewStatus.OK

    return SkewnessStats(
        mean=mean,
        median=median,
        std=std,
        skewness=skew,
        modes=modes,
        all_unique=all_unique,
        count=n,
        min=float(data[0]),
        max=float(data[-1]),
        status=status,
    )


def classify_skewness(skewness: float) -> str:
    """Display band for a skewness coefficient."""
    if skewness > SKEW_THRESHOLD:
        return "Positively skewed (right)"
    if skewness < -SKEW_THRESHOLD:
        return "Negatively skewed (left)"
    return "Approximately symmetric"


def histogram_bin_count(n: int) -> int:
    """``max(10, floor(sqrt(n)))``, shared by the overlay and the histogram chart."""
    return max(MIN_HISTOGRAM_BINS, int(math.floor(math.sqrt(n))))


def normal_curve(
    stats: SkewnessStats,
    n_points: int = NORMAL_CURVE_POINTS
) -> NormalCurve:
    """
    Gaussian density over ``[min, max]`` scaled to histogram counts.

    The density is multiplied by ``n * (max - min) / bin_count`` so it sits on
    the same axis as a count histogram with ``histogram_bin_count(n)`` bins.
    A zero standard deviation is replaced by 1 for drawing only.
    """
    bins = histogram_bin_count(stats.count)
    std = stats.std or 1.0
    x = np.linspace(stats.min, stats.max, n_points)
    density = sp_stats.norm.pdf(x, loc=stats.mean, scale=std)
    scale = stats.count * (stats.max - stats.min) / bins
    return NormalCurve(x=x, y=density * scale, bin_count=bins)


def marker_heights(curve: NormalCurve) -> Tuple[float, float, float]:
    """
    Y positions of the Mean, Median and Mode markers.

    Returns
    -------
    (mean_y, median_y, mode_y) : tuple of float
    """
    peak = curve.peak
    return (
        peak * MEAN_MARKER_FACTOR,
        peak * MEDIAN_MARKER_FACTOR,
        peak * MODE_MARKER_FACTOR,
    )
