"""
Streamlit Session State Keys - Canonical Definitions
===================================================

This module defines the canonical session state keys used across all pages
of the GetInsights application, plus small helpers for the dataset lifecycle.

Usage:
    from session_state_keys import get_dataset, set_current_dataset

    dataset = get_dataset(st.session_state)
    set_current_dataset(st.session_state, new_dataset)

Replacing the dataset always goes through ``set_current_dataset`` so the
analysis cache is invalidated together with it.
"""

from utils.data_workspace import AnalysisCache

# ============================================================================
# DATA MANAGEMENT
# ============================================================================

SESSION_CURRENT_DATASET = 'current_dataset'
"""
Active dataset (utils.data_workspace.Dataset)
Produced once by the upload page; read by the preview and studio pages.
"""

SESSION_FILE_NAME = 'file_name'
"""
Name of the uploaded file (str)
"""

SESSION_ANALYSIS_CACHE = 'analysis_cache'
"""
Memo table for derived statistics (utils.data_workspace.AnalysisCache)
Invalidated whenever the dataset is replaced or cleared.
"""

# ============================================================================
# NAVIGATION
# ============================================================================

SESSION_VIEW = 'view'
"""
Active view (str): one of VIEW_UPLOAD, VIEW_DATA, VIEW_STUDIO
"""

VIEW_UPLOAD = 'upload'
VIEW_DATA = 'data'
VIEW_STUDIO = 'studio'

SESSION_PREVIEW_PAGE = 'preview_page'
"""
Current 1-based page of the data preview table (int)
"""

SESSION_EXPORT_BUFFER = 'export_buffer'
"""
Generated Excel report of the active dataset (io.BytesIO)
Cleared together with the analysis cache.
"""


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_dataset(session_state):
    """Return the active dataset or None."""
    return session_state.get(SESSION_CURRENT_DATASET)


def get_analysis_cache(session_state) -> AnalysisCache:
    """Return the session's analysis cache, creating it on first use."""
    if SESSION_ANALYSIS_CACHE not in session_state:
        session_state[SESSION_ANALYSIS_CACHE] = AnalysisCache()
    return session_state[SESSION_ANALYSIS_CACHE]


def set_current_dataset(session_state, dataset, file_name=None):
    """
    Replace the active dataset and invalidate every derived result.

    Parameters
    ----------
    session_state : st.session_state
    dataset : Dataset
    file_name : str, optional
        Defaults to ``dataset.name``
    """
    get_analysis_cache(session_state).invalidate()
    session_state[SESSION_CURRENT_DATASET] = dataset
    session_state[SESSION_FILE_NAME] = file_name or dataset.name
    session_state[SESSION_PREVIEW_PAGE] = 1
    session_state.pop(SESSION_EXPORT_BUFFER, None)
    session_state[SESSION_VIEW] = VIEW_DATA


def reset_workspace(session_state):
    """Forget the dataset and go back to the upload view."""
    get_analysis_cache(session_state).invalidate()
    for key in (SESSION_CURRENT_DATASET, SESSION_FILE_NAME, SESSION_PREVIEW_PAGE,
                SESSION_EXPORT_BUFFER):
        if key in session_state:
            del session_state[key]
    session_state[SESSION_VIEW] = VIEW_UPLOAD


def get_view(session_state) -> str:
    """Active view; falls back to upload when no dataset is loaded."""
    if get_dataset(session_state) is None:
        return VIEW_UPLOAD
    return session_state.get(SESSION_VIEW, VIEW_DATA)
