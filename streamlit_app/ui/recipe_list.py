"""
Recipe list: all/favorites filter toggle, loading/error/empty states and the card grid.
"""

import streamlit as st

from recipe_ai.controller import RecipeController
from recipe_ai.models import FILTER_ALL, FILTER_FAVORITES, RECIPE_FILTERS
from recipe_ai.state import Phase
from recipe_ai.translations import Translations, get_translations

from ui.feedback import show_empty_state, show_error
from ui.recipe_card import render_recipe_card

GRID_COLUMNS = 4


def empty_message(t: Translations, recipe_filter: str) -> str:
    return t.no_favorites if recipe_filter == FILTER_FAVORITES else t.no_recipes


def render_filter_toggle(controller: RecipeController) -> None:
    t = get_translations(controller.state.language)
    labels = {FILTER_ALL: t.all_recipes, FILTER_FAVORITES: t.favorites}

    selected = st.radio(
        t.favorites,
        options=RECIPE_FILTERS,
        index=RECIPE_FILTERS.index(controller.state.filter),
        format_func=lambda value: labels[value],
        horizontal=True,
        label_visibility="collapsed",
        key=f"recipe_filter_{controller.state.filter}",
    )
    if selected != controller.state.filter:
        controller.set_filter(selected)
        st.rerun()


def render_recipe_list(controller: RecipeController) -> None:
    state = controller.state
    t = get_translations(state.language)

    render_filter_toggle(controller)

    current_phase = controller.phase()
    if current_phase == Phase.ERROR:
        show_error(t.error_title, hint=state.error)
        return

    recipes = controller.visible_recipes()
    if not recipes:
        if current_phase != Phase.INITIAL:
            show_empty_state(empty_message(t, state.filter))
        return

    for row_start in range(0, len(recipes), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS, gap="medium")
        for offset, column in enumerate(columns):
            index = row_start + offset
            if index >= len(recipes):
                break
            with column:
                render_recipe_card(controller, recipes[index], index)
