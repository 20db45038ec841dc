"""
Plotting Studio tab
Chart type and column selectors feeding the projection layer
"""

from typing import Sequence

import streamlit as st

from app_config import get_config
from .chart_plots import create_chart
from .chart_projection import ChartType, default_selection, project


def render_plotting_tab(
    dataset,
    headers: Sequence[str],
    numeric_fields: Sequence[str],
    cache=None,
    key_prefix: str = "plotting"
) -> None:
    """
    Render the Plotting Studio tab

    Parameters
    ----------
    dataset : Dataset
    headers : sequence of str
        Every column (x axis / labels choices)
    numeric_fields : sequence of str
        Numeric columns (y axis / values choices)
    cache : AnalysisCache, optional
        Memo table keyed on (chart type, x, y)
    key_prefix : str
        Prefix for Streamlit widget keys
    """
    st.subheader("Plotting Studio")

    if not headers:
        st.info("The dataset has no columns to plot.")
        return

    default_x, default_y = default_selection(headers, numeric_fields)

    col1, col2, col3 = st.columns(3)
    with col1:
        chart_type = st.selectbox(
            "Plot Type",
            options=list(ChartType),
            format_func=lambda c: c.label,
            key=f"{key_prefix}_type"
        )

    with col2:
        x_field = st.selectbox(
            "X-Axis / Labels",
            options=list(headers),
            index=list(headers).index(default_x),
            key=f"{key_prefix}_x"
        )

    y_field = None
    with col3:
        if chart_type.uses_y:
            if numeric_fields:
                y_field = st.selectbox(
                    "Y-Axis / Values",
                    options=list(numeric_fields),
                    index=list(numeric_fields).index(default_y),
                    key=f"{key_prefix}_y"
                )
            else:
                st.caption("No numeric columns available for the Y axis.")

    selection = (chart_type.value, x_field, y_field)
    if cache is None:
        descriptor = project(chart_type, dataset, x_field, y_field)
    else:
        descriptor = cache.get_or_compute(
            dataset, 'projection', selection,
            lambda: project(chart_type, dataset, x_field, y_field)
        )

    fig = create_chart(descriptor, height=get_config().plots.CHART_HEIGHT)
    st.plotly_chart(fig, use_container_width=True)
