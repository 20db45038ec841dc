"""
Chart Projection
================

Maps a chart type and a column selection to a ``SeriesDescriptor``: named
value sequences that any plotting backend can draw.

No aggregation happens here. Bar, line, scatter and pie pass raw per-row
values through in row order; histogram binning is left to the renderer, which
receives the bin count from ``eda_utils.histogram_bin_count``.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from eda_utils.skewness import histogram_bin_count
from profiling_utils import is_missing, iter_column

logger = logging.getLogger(__name__)


class ChartType(str, enum.Enum):
    BAR = 'bar'
    LINE = 'line'
    SCATTER = 'scatter'
    PIE = 'pie'
    BOX = 'box'
    HISTOGRAM = 'histogram'

    @classmethod
    def parse(cls, tag: Any) -> "ChartType":
        """Chart type for ``tag``; unknown tags fall back to bar."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            logger.debug("Unknown chart type %r, falling back to bar", tag)
            return cls.BAR

    @property
    def label(self) -> str:
        return CHART_LABELS[self]

    @property
    def uses_y(self) -> bool:
        return self is not ChartType.HISTOGRAM


CHART_LABELS = {
    ChartType.BAR: "Bar Chart",
    ChartType.LINE: "Line Plot",
    ChartType.SCATTER: "Scatter Plot",
    ChartType.PIE: "Pie Chart",
    ChartType.BOX: "Box Plot",
    ChartType.HISTOGRAM: "Histogram",
}


@dataclass(frozen=True)
class Series:
    """One named trace: a mapping of role (``x``, ``y``, ``labels``...) to values."""
    name: str
    values: Dict[str, List[Any]]

    def __getitem__(self, role: str) -> List[Any]:
        return self.values[role]


@dataclass(frozen=True)
class SeriesDescriptor:
    chart_type: ChartType
    series: Tuple[Series, ...] = ()
    x_field: Optional[str] = None
    y_field: Optional[str] = None
    bin_count: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return len(self.series) == 0

    @property
    def title(self) -> str:
        return f"{self.chart_type.value.capitalize()} Plot"

    def __getitem__(self, role: str) -> List[Any]:
        """Values of ``role`` in the first series (convenience for single-trace charts)."""
        return self.series[0][role]


def required_fields(chart_type: ChartType) -> Tuple[str, ...]:
    """Selection slots a chart needs before it can produce data."""
    if ChartType.parse(chart_type) is ChartType.HISTOGRAM:
        return ('x',)
    return ('x', 'y')


def default_selection(
    headers: Sequence[str],
    numeric_fields: Sequence[str]
) -> Tuple[Optional[str], Optional[str]]:
    """
    Initial (x, y) for the plotting studio.

    x is the first header; y is the second numeric field, else the first.
    """
    x_field = headers[0] if headers else None
    if len(numeric_fields) > 1:
        y_field = numeric_fields[1]
    elif numeric_fields:
        y_field = numeric_fields[0]
    else:
        y_field = None
    return x_field, y_field


# ──────────────────────────────────────────────
#  PER-TYPE MAPPINGS
# ──────────────────────────────────────────────

def _xy(x_field, y_field, x_values, y_values) -> Tuple[Series, ...]:
    return (Series(name=y_field, values={'x': x_values, 'y': y_values}),)


def _pie(x_field, y_field, x_values, y_values) -> Tuple[Series, ...]:
    return (Series(name=y_field, values={'labels': x_values, 'values': y_values}),)


def _box(x_field, y_field, x_values, y_values) -> Tuple[Series, ...]:
    return (
        Series(name=y_field, values={'y': y_values}),
        Series(name=x_field, values={'y': x_values}),
    )


def _histogram(x_field, y_field, x_values, y_values) -> Tuple[Series, ...]:
    return (Series(name=x_field, values={'x': x_values}),)


_MAPPERS: Dict[ChartType, Callable[..., Tuple[Series, ...]]] = {
    ChartType.BAR: _xy,
    ChartType.LINE: _xy,
    ChartType.SCATTER: _xy,
    ChartType.PIE: _pie,
    ChartType.BOX: _box,
    ChartType.HISTOGRAM: _histogram,
}


def project(
    chart_type: Any,
    dataset,
    x_field: Optional[str],
    y_field: Optional[str] = None
) -> SeriesDescriptor:
    """
    Project a column selection onto a chart.

    Parameters
    ----------
    chart_type : ChartType or str
        Unknown values are drawn as a bar chart.
    dataset : Dataset or sequence of dict
    x_field : str
        X axis / labels column
    y_field : str, optional
        Y axis / values column, ignored by histogram

    Returns
    -------
    SeriesDescriptor
        Empty (no series) when a required field is missing or not a column.
    """
    kind = ChartType.parse(chart_type)
    records = getattr(dataset, 'records', dataset)
    headers = list(records[0].keys()) if records else []

    if not kind.uses_y:
        y_field = None

    selection = {'x': x_field, 'y': y_field}
    for slot in required_fields(kind):
        name = selection[slot]
        if not name or name not in headers:
            logger.debug("project(%s): %s field %r missing, empty series", kind.value, slot, name)
            return SeriesDescriptor(chart_type=kind, x_field=x_field, y_field=y_field)

    x_values = list(iter_column(records, x_field))
    y_values = list(iter_column(records, y_field)) if y_field else []

    bin_count = None
    if kind is ChartType.HISTOGRAM:
        bin_count = histogram_bin_count(sum(1 for v in x_values if not is_missing(v)))

    series = _MAPPERS[kind](x_field, y_field, x_values, y_values)
    return SeriesDescriptor(
        chart_type=kind,
        series=series,
        x_field=x_field,
        y_field=y_field,
        bin_count=bin_count,
    )
