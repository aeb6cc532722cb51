"""
Utility modules for the Streamlit frontend.

This package contains:
- session: per-session controller and view state in st.session_state
"""
