"""
Global CSS Styling for Recipe AI.

This module provides load_global_styles() to inject consistent styling
and the text direction for right-to-left languages.
"""

import streamlit as st

from recipe_ai.models import text_direction


def load_global_styles(language: str) -> None:
    """
    Inject global CSS styles for the Recipe AI app.

    This function:
    - Imports Google Fonts (Nunito, and Cairo for Arabic)
    - Applies a warm orange palette to headings, buttons and cards
    - Sets the page direction to rtl for right-to-left languages
    """
    direction = text_direction(language)
    font_family = "'Cairo', 'Nunito', sans-serif" if direction == "rtl" else "'Nunito', sans-serif"

    css = f"""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&family=Cairo:wght@400;600;700&display=swap');

        html, body, [class*="css"] {{
            font-family: {font_family} !important;
        }}

        .main .block-container, [data-testid="stMainBlockContainer"] {{
            direction: {direction};
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
        }}

        h1, h2, h3, h4 {{
            font-weight: 700 !important;
            letter-spacing: 0.02em !important;
        }}

        .rai-title {{
            color: #f97316;
            font-size: 2rem;
            font-weight: 700;
            letter-spacing: 0.08em;
        }}

        .stButton > button {{
            border-radius: 50px !important;
            font-weight: 600 !important;
        }}

        .rai-card-meta {{
            color: #6b7280;
            font-size: 0.85rem;
        }}

        .rai-stars {{
            color: #eab308;
            font-size: 1.2rem;
        }}

        .rai-stars .off {{
            color: #d1d5db;
        }}

        .rai-footer {{
            margin-top: 2rem;
            padding: 1.5rem 0;
            border-top: 1px solid #fed7aa;
            text-align: center;
            color: #6b7280;
        }}

        .rai-footer a {{
            color: #ea580c;
        }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
