"""
Footer with provider attribution and contact link.
"""

import streamlit as st

from recipe_ai.translations import get_translations

CONTACT_EMAIL = "help.recipeai@gmail.com"


def render_footer(language: str) -> None:
    t = get_translations(language)
    st.markdown(
        f"""
        <div class="rai-footer">
          <p>{t.powered_by}</p>
          <a href="mailto:{CONTACT_EMAIL}">{t.contact_us}</a>
        </div>
        """,
        unsafe_allow_html=True,
    )
