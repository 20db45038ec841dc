"""
GetInsights
Homepage - file upload and view routing
"""

import logging

import streamlit as st

import data_preview_page
import studio_page
from app_config import get_config
from session_state_keys import (
    VIEW_DATA,
    VIEW_STUDIO,
    get_dataset,
    get_view,
    set_current_dataset,
)
from utils.data_loaders import DataLoadError, load_uploaded_file

logger = logging.getLogger(__name__)


def show_upload():
    """Show the upload view"""
    st.markdown("""
    <h1 style='text-align: center; font-size: 3.2rem; margin: 1rem 0 0.5rem 0;
               background: linear-gradient(90deg, #1e3a8a, #3b82f6, #22c55e);
               -webkit-background-clip: text; -webkit-text-fill-color: transparent; font-weight: 700;'>
        GetInsights
    </h1>
    <p style='text-align: center; font-size: 1.2rem; color: #444; max-width: 800px; margin: 0 auto;'>
        Upload a table and explore column statistics, correlations, charts and skewness
    </p>
    """, unsafe_allow_html=True)

    st.markdown("---")

    formats = [ext.lstrip('.') for ext in get_config().preview.SUPPORTED_FILE_FORMATS]

    col1, col2, col3 = st.columns([1, 2, 1])
    with col2:
        uploaded_file = st.file_uploader(
            "📂 Upload a CSV or Excel file",
            type=formats,
            key="upload_file"
        )

        if uploaded_file is not None:
            with st.spinner(f"Reading {uploaded_file.name}..."):
                try:
                    dataset = load_uploaded_file(uploaded_file)
                except DataLoadError as e:
                    logger.exception("Upload failed for %s", uploaded_file.name)
                    st.error(f"❌ Could not read **{uploaded_file.name}**: {e}")
                    return

            if len(dataset) == 0 or not dataset.headers:
                st.warning("⚠️ The file has no data rows")
                return

            set_current_dataset(st.session_state, dataset, file_name=uploaded_file.name)
            st.rerun()

    st.info("""
    ### What you can do

    ✅ Preview the uploaded rows, 50 per page
    ✅ Five-number summary, mean, standard deviation, modes and outliers per column
    ✅ Pearson correlation heatmap across numeric columns
    ✅ Bar, line, scatter, pie, box and histogram charts
    ✅ Skewness check against a fitted normal curve
    """)


def main_content():
    view = get_view(st.session_state)

    with st.sidebar:
        st.markdown("### 📂 Current Dataset")
        dataset = get_dataset(st.session_state)
        if dataset is not None:
            st.markdown(f"**Name:** `{dataset.name}`")
            st.markdown(f"**Rows:** {len(dataset)}")
            st.markdown(f"**Columns:** {len(dataset.headers)}")
        else:
            st.info("📊 Upload a file to begin")
        st.markdown("---")
        st.caption("© 2026 GetInsights")

    # Routing
    if view == VIEW_DATA:
        data_preview_page.show()
    elif view == VIEW_STUDIO:
        studio_page.show()
    else:
        show_upload()
