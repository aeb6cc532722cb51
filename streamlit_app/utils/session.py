"""
Session management utilities for the Streamlit app.

One RecipeController is kept per browser session in st.session_state.
Ephemeral view state (portions, cook mode, image load failures, the
"copied" notice) also lives in st.session_state, under keys scoped per
recipe name, and is never persisted.
"""

from typing import Any

import streamlit as st

from recipe_ai.controller import RecipeController
from recipe_ai.sharing import CopiedNotice

CONTROLLER_KEY = "recipe_controller"
COPIED_NOTICE_KEY = "copied_notice"


def get_controller() -> RecipeController:
    """
    Get or create the controller for this browser session.

    Favorites are loaded from disk once, when the controller is created.
    """
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = RecipeController()
    return st.session_state[CONTROLLER_KEY]


def view_key(prefix: str, recipe_name: str) -> str:
    """Session state key for a per-recipe view setting."""
    return f"{prefix}::{recipe_name}"


def get_view_value(prefix: str, recipe_name: str, default: Any) -> Any:
    key = view_key(prefix, recipe_name)
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_view_value(prefix: str, recipe_name: str, value: Any) -> None:
    st.session_state[view_key(prefix, recipe_name)] = value


def get_copied_notice(recipe_name: str) -> CopiedNotice:
    """The "copied" confirmation for one recipe, so it never shows on another."""
    return get_view_value(COPIED_NOTICE_KEY, recipe_name, CopiedNotice())
