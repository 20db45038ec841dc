"""
eda_utils: Column statistics for GetInsights
=============================================

Descriptive statistics and distribution shape for one numeric column.

Each column report contains:
  • Five-number summary (order-statistic quartiles), IQR
  • Mean, population standard deviation
  • Mode(s), or "all unique"
  • IQR-fence outliers
  • Pearson's second skewness coefficient with a fitted normal curve

Package Structure
-----------------
eda_calculations  :  Summary statistics (quartiles, moments, modes, outliers)
skewness          :  Skewness statistics, normal-curve overlay, histogram bins
eda_plots         :  Plotly figures (box plot, skewness report)
eda_workspace     :  Streamlit tab renderers

Quick Start, standalone (no Streamlit)
-----------------------------------------
>>> from eda_utils import summarize, skewness_stats
>>> summarize([1, 2, 3, 4, 5, 6, 7, 8, 9, 100]).outliers
(100.0,)
>>> skewness_stats([1, 2, 3, 4, 5]).all_unique
True
"""

# ── Calculations ──────────────────────────────────────────────
from .eda_calculations import (
    SummaryStats,
    column_values,
    find_modes,
    find_outliers,
    format_modes,
    median_order_statistic,
    run_summary_for_all_columns,
    summarize,
    summarize_column,
)

from .skewness import (
    NormalCurve,
    SkewnessStats,
    SkewStatus,
    classify_skewness,
    histogram_bin_count,
    marker_heights,
    median_interpolated,
    normal_curve,
    skewness_stats,
)

# ── Plots ─────────────────────────────────────────────────────
from .eda_plots import (
    empty_figure,
    plot_column_boxplot,
    plot_skewness_report,
)

# ── Workspace / Streamlit ─────────────────────────────────────
from .eda_workspace import (
    render_analytics_tab,
    render_skewness_tab,
)

# ── Public API ────────────────────────────────────────────────
__all__ = [
    # calculations
    "SummaryStats",
    "column_values",
    "find_modes",
    "find_outliers",
    "format_modes",
    "median_order_statistic",
    "run_summary_for_all_columns",
    "summarize",
    "summarize_column",
    # skewness
    "NormalCurve",
    "SkewnessStats",
    "SkewStatus",
    "classify_skewness",
    "histogram_bin_count",
    "marker_heights",
    "median_interpolated",
    "normal_curve",
    "skewness_stats",
    # plots
    "empty_figure",
    "plot_column_boxplot",
    "plot_skewness_report",
    # workspace
    "render_analytics_tab",
    "render_skewness_tab",
]

__version__     = "1.0.0"
__description__ = "Column statistics and skewness checks for GetInsights"
