"""
Data Preview Page
Paginated table of the uploaded rows, dates formatted per cell
"""

import pandas as pd
import streamlit as st

from app_config import get_config
from profiling_utils import format_cell
from session_state_keys import (
    SESSION_FILE_NAME,
    SESSION_PREVIEW_PAGE,
    SESSION_VIEW,
    VIEW_STUDIO,
    reset_workspace,
)
from utils.data_workspace import paginate
from workspace_utils import display_dataset_info, require_dataset


def build_page_frame(dataset, start: int, stop: int) -> pd.DataFrame:
    """Rows ``start:stop`` rendered as display strings, header order kept."""
    rows = [
        [format_cell(row.get(h)) for h in dataset.headers]
        for row in dataset.records[start:stop]
    ]
    return pd.DataFrame(rows, columns=list(dataset.headers), index=range(start + 1, stop + 1))


def show():
    """
    Main function to display the Data Preview page
    """
    dataset = require_dataset()
    if dataset is None:
        return

    page_size = get_config().preview.PAGE_SIZE

    col_title, col_new, col_go = st.columns([4, 1, 1])
    with col_title:
        st.title("Data Preview")
        st.caption(st.session_state.get(SESSION_FILE_NAME, dataset.name))
    with col_new:
        if st.button("New File", key="preview_new_file"):
            reset_workspace(st.session_state)
            st.rerun()
    with col_go:
        if st.button("Analyze Data →", type="primary", key="preview_analyze"):
            st.session_state[SESSION_VIEW] = VIEW_STUDIO
            st.rerun()

    display_dataset_info(dataset)

    page = paginate(len(dataset), st.session_state.get(SESSION_PREVIEW_PAGE, 1), page_size)
    st.dataframe(
        build_page_frame(dataset, page.start, page.stop),
        use_container_width=True
    )

    col_info, col_prev, col_page, col_next = st.columns([3, 1, 1, 1])
    with col_info:
        first = 0 if len(dataset) == 0 else page.start + 1
        st.markdown(f"Showing rows **{first}** to **{page.stop}** of **{len(dataset)}**")
    with col_prev:
        if st.button("← Previous", disabled=page.number == 1, key="preview_prev"):
            st.session_state[SESSION_PREVIEW_PAGE] = page.number - 1
            st.rerun()
    with col_page:
        st.markdown(f"Page {page.number} of {page.page_count}")
    with col_next:
        if st.button("Next →", disabled=page.number == page.page_count, key="preview_next"):
            st.session_state[SESSION_PREVIEW_PAGE] = page.number + 1
            st.rerun()
