"""
Workspace Utilities Module

Reusable Streamlit widgets around the active dataset.
Provides consistent dataset access across the preview and studio pages.
"""

import streamlit as st
from typing import List, Optional, Tuple

from session_state_keys import VIEW_UPLOAD, SESSION_VIEW, get_dataset


def require_dataset():
    """
    Return the active dataset, or show a notice and send the user to upload.

    Returns
    -------
    Dataset or None
    """
    dataset = get_dataset(st.session_state)
    if dataset is None or len(dataset) == 0 or not dataset.headers:
        st.warning("⚠️ **No data loaded.**")
        st.info("💡 Upload a CSV or Excel file first")
        st.session_state[SESSION_VIEW] = VIEW_UPLOAD
        return None
    return dataset


def display_dataset_info(dataset, numeric_fields: Optional[List[str]] = None) -> Tuple[int, int]:
    """
    Show row / column / numeric-column counts as metrics.

    Parameters
    ----------
    dataset : Dataset
    numeric_fields : list of str, optional
        Computed here when omitted

    Returns
    -------
    tuple
        (n_rows, n_columns)
    """
    if numeric_fields is None:
        numeric_fields = dataset.classify()[1]

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Rows", len(dataset))
    with col2:
        st.metric("Columns", len(dataset.headers))
    with col3:
        st.metric("Numeric", len(numeric_fields))

    return len(dataset), len(dataset.headers)
