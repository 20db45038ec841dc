"""
Correlation Heatmap tab
Streamlit renderer for the Pearson matrix of all numeric columns
"""

from typing import Sequence

import streamlit as st

from app_config import get_config
from .plotting import create_correlation_heatmap
from .statistics import correlation_matrix, get_correlation_summary


def render_heatmap_tab(
    dataset,
    numeric_fields: Sequence[str],
    cache=None,
    key_prefix: str = "heatmap"
) -> None:
    """
    Render the Correlation Heatmap tab

    Parameters
    ----------
    dataset : Dataset
    numeric_fields : sequence of str
        Output of ``profiling_utils.classify``
    cache : AnalysisCache, optional
        Memo table keyed on the numeric column list
    key_prefix : str
        Prefix for Streamlit widget keys
    """
    st.subheader("Correlation Heatmap")

    if not numeric_fields:
        st.info("No numeric columns available for correlation.")
        return

    selection = tuple(numeric_fields)
    if cache is None:
        matrix = correlation_matrix(dataset, selection)
    else:
        matrix = cache.get_or_compute(
            dataset, 'correlation', selection,
            lambda: correlation_matrix(dataset, selection)
        )

    show_values = st.checkbox(
        "Show coefficients",
        value=len(selection) <= 15,
        key=f"{key_prefix}_show_values"
    )

    fig = create_correlation_heatmap(
        matrix,
        height=get_config().plots.HEATMAP_HEIGHT,
        show_values=show_values
    )
    st.plotly_chart(fig, use_container_width=True)

    if len(selection) > 1:
        with st.expander("📋 Strongest correlations", expanded=False):
            st.dataframe(
                get_correlation_summary(matrix),
                use_container_width=True,
                hide_index=True
            )
