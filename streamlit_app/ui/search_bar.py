"""
Search bar: free-text search submitted as a form.
"""

import streamlit as st

from recipe_ai.controller import RecipeController
from recipe_ai.translations import get_translations

from ui.feedback import working_spinner


def render_search_bar(controller: RecipeController) -> None:
    """Submit the trimmed term; blank submissions are ignored."""
    t = get_translations(controller.state.language)

    with st.form("search_form", border=False):
        input_col, button_col = st.columns([5, 1])
        with input_col:
            term = st.text_input(
                t.search_button,
                placeholder=t.search_placeholder,
                label_visibility="collapsed",
                key="search_term",
            )
        with button_col:
            submitted = st.form_submit_button(t.search_button, type="primary", width="stretch")

    if submitted and term.strip():
        with working_spinner(t.loading):
            controller.search(term)
        st.rerun()
