"""
Standardized feedback utilities for error, empty, and loading states.
"""

from contextlib import contextmanager
from typing import Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional detail.

    Args:
        message: Main error message (localized title)
        hint: Optional detail text, e.g. the provider's error message
    """
    st.error(f"⚠️ **{message}**")
    if hint:
        st.caption(hint)


def show_empty_state(message: str) -> None:
    """Display a standardized empty state."""
    st.info(f"🍽️ {message}")


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Cooking up recipes…"):
            controller.start()
    """
    with st.spinner(label):
        yield
