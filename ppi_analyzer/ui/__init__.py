"""User interfaces: interactive menu and Streamlit dashboard."""
