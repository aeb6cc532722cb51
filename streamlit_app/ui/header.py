"""
Header: app title (click to go home) and the language selector.
"""

import streamlit as st

from recipe_ai.controller import RecipeController
from recipe_ai.translations import LANGUAGE_LABELS, get_translations

from ui.feedback import working_spinner


def render_header(controller: RecipeController) -> None:
    """
    Render the header row.

    The title button resets the filter and selection and re-fetches the
    default set. Changing the language re-fetches in the new language.
    """
    state = controller.state
    t = get_translations(state.language)

    title_col, lang_col = st.columns([4, 1])

    with title_col:
        if st.button(f"🍳 {t.app_title}", key="header_home", type="tertiary"):
            with working_spinner(t.loading):
                controller.go_home()
            st.rerun()

    with lang_col:
        languages = list(LANGUAGE_LABELS.keys())
        selected = st.selectbox(
            "Language",
            options=languages,
            index=languages.index(state.language),
            format_func=lambda code: LANGUAGE_LABELS[code],
            label_visibility="collapsed",
            key="header_language",
        )
        if selected != state.language:
            with working_spinner(get_translations(selected).loading):
                controller.change_language(selected)
            st.rerun()

    st.divider()
