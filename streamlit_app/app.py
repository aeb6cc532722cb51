"""
Recipe AI - Streamlit Frontend Main Entry Point.

Single-page app: header with language selector, search bar, all/favorites
toggle and recipe grid, or the detail view for the selected recipe.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows the ui/ and utils/ imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_ai without installing it
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env before anything reads environment variables
import recipe_ai.config  # noqa: F401

import logging

import streamlit as st

from recipe_ai.config import AppConfig, validate_required_config
from recipe_ai.state import Phase
from recipe_ai.translations import get_translations
from ui.feedback import show_error, working_spinner
from ui.footer import render_footer
from ui.header import render_header
from ui.recipe_detail import render_recipe_detail
from ui.recipe_list import render_recipe_list
from ui.search_bar import render_search_bar
from ui.styles import load_global_styles
from utils.session import get_controller

logging.basicConfig(
    level=AppConfig.get_log_level(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe AI",
    page_icon="🍳",
    layout="wide",
)

# Without an API key nothing can be generated; show setup instructions instead
try:
    validate_required_config()
except RuntimeError as e:
    show_error("Recipe AI is not configured.", hint=str(e))
    st.stop()

controller = get_controller()
language = controller.state.language
t = get_translations(language)

load_global_styles(language)
render_header(controller)

if controller.state.selected is not None:
    render_recipe_detail(controller, controller.state.selected)
else:
    render_search_bar(controller)

    # App start triggers the default fetch
    if controller.phase() == Phase.INITIAL:
        with working_spinner(t.loading):
            controller.start()

    render_recipe_list(controller)

render_footer(language)
