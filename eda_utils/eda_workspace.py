"""
EDA Workspace Module
====================

Streamlit tab renderers for the Column Analytics and Skewness Check views.

Key public functions
--------------------
render_analytics_tab(dataset, numeric_fields, cache)   -> five-number summary,
                                                          box plot, metrics, outliers
render_skewness_tab(dataset, numeric_fields, cache)    -> histogram + normal curve,
                                                          mean / median / mode / skewness
"""

from typing import Optional, Sequence

import streamlit as st

from app_config import get_config
from .eda_calculations import column_values, format_modes, summarize_column
from .eda_plots import plot_column_boxplot, plot_skewness_report
from .skewness import skewness_stats


# ─────────────────────────────────────────────────────────────
#  COLUMN ANALYTICS
# ─────────────────────────────────────────────────────────────

def render_analytics_tab(
    dataset,
    numeric_fields: Sequence[str],
    cache=None,
    key_prefix: str = "analytics",
) -> None:
    """
    Render the Column Analytics tab.

    Layout
    ------
    - Column selector (numeric columns only)
    - 2 x 2 grid: Five-Number Summary | Box Plot
                  Statistical Metrics | Outlier Analysis

    Parameters
    ----------
    dataset : Dataset
    numeric_fields : sequence of str
        Output of ``profiling_utils.classify``
    cache : AnalysisCache, optional
        Memo table; results are recomputed when omitted.
    key_prefix : str
        Prefix for Streamlit widget keys
    """
    st.subheader("Column Analytics")

    if not numeric_fields:
        st.info("No numeric columns available for analysis.")
        return

    config = get_config()
    selected_col = st.selectbox(
        "Select a Column",
        options=list(numeric_fields),
        key=f"{key_prefix}_col_select",
    )

    summary = _cached(cache, dataset, 'summary', selected_col,
                      lambda: summarize_column(dataset, selected_col))
    if summary is None:
        st.warning(f"Column **{selected_col}** has no values.")
        return

    d = config.statistics.DECIMALS

    col_left, col_right = st.columns(2)
    with col_left:
        with st.container(border=True):
            st.markdown("#### Five-Number Summary")
            st.markdown(
                f"Min: `{summary.min:,.{d}f}`  \n"
                f"Q1: `{summary.q1:,.{d}f}`  \n"
                f"Median: `{summary.median:,.{d}f}`  \n"
                f"Q3: `{summary.q3:,.{d}f}`  \n"
                f"Max: `{summary.max:,.{d}f}`"
            )

    with col_right:
        with st.container(border=True):
            st.markdown("#### Box Plot")
            fig = plot_column_boxplot(
                dataset.column(selected_col),
                column_name=selected_col,
                height=config.plots.BOX_HEIGHT,
            )
            st.plotly_chart(fig, use_container_width=True)

    col_left, col_right = st.columns(2)
    with col_left:
        with st.container(border=True):
            st.markdown("#### Statistical Metrics")
            st.markdown(
                f"Mean: `{summary.mean:,.{d}f}`  \n"
                f"Median: `{summary.median:,.{d}f}`  \n"
                f"Std.Dev: `{summary.std_dev:,.{d}f}`"
            )
            modes_text, has_more = format_modes(
                summary.modes, limit=config.statistics.MODE_DISPLAY_LIMIT
            )
            st.markdown(f"Mode(s): `{modes_text}`")
            if has_more:
                with st.expander(f"All mode values for {selected_col}"):
                    for mode in sorted(summary.modes):
                        st.markdown(f"- {mode:g}")

    with col_right:
        with st.container(border=True):
            st.markdown("#### Outlier Analysis")
            st.metric("Outliers detected", len(summary.outliers))
            st.caption(
                "Values outside `Q1 - 1.5 * IQR` or `Q3 + 1.5 * IQR` "
                f"(fence [{summary.lower_fence:,.{d}f}, {summary.upper_fence:,.{d}f}])"
            )


# ─────────────────────────────────────────────────────────────
#  SKEWNESS CHECK
# ─────────────────────────────────────────────────────────────

def render_skewness_tab(
    dataset,
    numeric_fields: Sequence[str],
    cache=None,
    key_prefix: str = "skewness",
) -> None:
    """Render the Skewness Check tab (histogram, normal curve, metric cards)."""
    st.subheader("Skewness Check")

    if not numeric_fields:
        st.info("No numeric columns available for analysis.")
        return

    config = get_config()
    selected_col = st.selectbox(
        "Select a Column",
        options=list(numeric_fields),
        key=f"{key_prefix}_col_select",
    )

    values = column_values(dataset, selected_col)
    stats = _cached(cache, dataset, 'skewness', selected_col,
                    lambda: skewness_stats(values))

    fig = plot_skewness_report(
        values,
        column_name=selected_col,
        stats=stats,
        height=config.plots.SKEWNESS_HEIGHT,
    )
    st.plotly_chart(fig, use_container_width=True)

    if stats is None:
        return

    d = config.statistics.DECIMALS
    c_mean, c_median, c_mode, c_skew = st.columns(4)
    c_mean.metric("Mean", f"{stats.mean:.{d}f}")
    c_median.metric("Median", f"{stats.median:.{d}f}")
    with c_mode:
        st.markdown("**Mode**")
        if stats.modes and not stats.all_unique:
            st.markdown(f"`{', '.join(f'{m:g}' for m in sorted(stats.modes))}`")
        else:
            st.caption("N/A (all unique)")
    with c_skew:
        st.metric("Skewness", f"{stats.skewness:.{d}f}")
        st.caption(stats.label)
        if stats.is_degenerate:
            st.caption("All values are identical; skewness reported as 0.")


# ─────────────────────────────────────────────────────────────
#  INTERNAL HELPERS
# ─────────────────────────────────────────────────────────────

def _cached(cache, dataset, operation: str, selection, compute):
    """Go through the analysis cache when one is provided."""
    if cache is None:
        return compute()
    return cache.get_or_compute(dataset, operation, selection, compute)
