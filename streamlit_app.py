"""
GetInsights
Main entry point for Streamlit deployment
"""

import streamlit as st

# Set page config FIRST - before any other Streamlit command
st.set_page_config(
    page_title="GetInsights - Data Studio",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded"
)

from app_config import get_config
from utils.logging_config import setup_logging

if __name__ == "__main__":
    setup_logging(get_config().logging_level)

    from homepage import main_content
    main_content()
