"""
Data Studio Page
Column Analytics, Correlation Heatmap, Plotting Studio and Skewness Check tabs
"""

import logging
from datetime import datetime

import streamlit as st

from bivariate_utils import correlation_matrix, render_heatmap_tab
from eda_utils import render_analytics_tab, render_skewness_tab, run_summary_for_all_columns
from plotting_utils import render_plotting_tab
from session_state_keys import SESSION_EXPORT_BUFFER, SESSION_VIEW, VIEW_DATA, get_analysis_cache
from utils.data_exporters import export_summaries_to_excel
from workspace_utils import require_dataset

logger = logging.getLogger(__name__)


def show():
    """
    Main function to display the Data Studio page
    """
    dataset = require_dataset()
    if dataset is None:
        return

    if st.button("← Back to Data Preview", key="studio_back"):
        st.session_state[SESSION_VIEW] = VIEW_DATA
        st.rerun()

    cache = get_analysis_cache(st.session_state)
    headers, numeric_fields, _ = cache.get_or_compute(
        dataset, 'classify', None, dataset.classify
    )

    tab_analytics, tab_heatmap, tab_plotting, tab_skewness = st.tabs([
        "Data Analytics", "Correlation Heatmap", "Plotting Studio", "Skewness Check"
    ])

    with tab_analytics:
        render_analytics_tab(dataset, numeric_fields, cache=cache)
        _render_export(dataset, numeric_fields, cache)

    with tab_heatmap:
        render_heatmap_tab(dataset, numeric_fields, cache=cache)

    with tab_plotting:
        render_plotting_tab(dataset, headers, numeric_fields, cache=cache)

    with tab_skewness:
        render_skewness_tab(dataset, numeric_fields, cache=cache)


def _render_export(dataset, numeric_fields, cache):
    """Excel download of every column summary plus the correlation matrix."""
    if not numeric_fields:
        return

    st.markdown("---")
    st.markdown("#### 💾 Export")
    if st.button("Generate Excel report", key="studio_gen_excel"):
        selection = tuple(numeric_fields)
        summaries = cache.get_or_compute(
            dataset, 'summary_all', selection,
            lambda: run_summary_for_all_columns(dataset, selection)
        )
        matrix = cache.get_or_compute(
            dataset, 'correlation', selection,
            lambda: correlation_matrix(dataset, selection)
        )
        st.session_state[SESSION_EXPORT_BUFFER] = export_summaries_to_excel(
            summaries, matrix.to_dataframe(), dataset_name=dataset.name
        )
        logger.info("Excel report generated for %s (%d columns)", dataset.name, len(selection))

    if SESSION_EXPORT_BUFFER in st.session_state:
        st.download_button(
            label="⬇️  Download Excel report",
            data=st.session_state[SESSION_EXPORT_BUFFER],
            file_name=f"Summary_Report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key="studio_dl_excel",
        )
