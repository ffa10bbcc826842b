"""Main Application Entry Point.

Run with ``streamlit run app.py``.
"""

import streamlit as st

from zexasim import __version__
from zexasim.application.services.planner import DecisionPlanner
from zexasim.core.logging import get_logger
from zexasim.core.settings import get_settings
from zexasim.ui.pages.main import render_main_page
from zexasim.ui.state import SessionManager


def main() -> None:
    """Main application entry point."""
    # Streamlit configuration (must be first Streamlit call)
    st.set_page_config(
        page_title=f"ZEXABOX Simulator v{__version__}",
        page_icon="📦",
        layout="wide",
    )
    log = get_logger(__name__)

    planner = DecisionPlanner(get_settings())
    SessionManager.initialize(planner)
    log.debug("page_rendered", decisions=len(SessionManager.get_plan().decisions))

    render_main_page(planner)


if __name__ == "__main__":
    main()
