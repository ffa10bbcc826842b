"""Streamlit UI: session state, components and pages."""
