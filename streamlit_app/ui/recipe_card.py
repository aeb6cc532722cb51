"""
Recipe card: image, favorite toggle, name, description and quick facts.
"""

import logging

import streamlit as st

from recipe_ai.controller import RecipeController
from recipe_ai.images import PLACEHOLDER_IMAGE, resolve_image
from recipe_ai.models import Recipe
from recipe_ai.translations import get_translations

logger = logging.getLogger(__name__)

DESCRIPTION_PREVIEW_CHARS = 160


def render_recipe_image(recipe: Recipe) -> bool:
    """
    Show the recipe image, falling back to the placeholder.

    Returns:
        False if the stored image could not be displayed
    """
    try:
        st.image(resolve_image(recipe.image_url), width="stretch")
        return True
    except Exception as e:
        logger.debug("Image for %r failed to render, using placeholder: %s", recipe.recipe_name, e)
        st.image(PLACEHOLDER_IMAGE, width="stretch")
        return False


def render_recipe_card(controller: RecipeController, recipe: Recipe, index: int) -> None:
    t = get_translations(controller.state.language)
    favorite = controller.is_favorite(recipe.recipe_name)

    with st.container(border=True):
        render_recipe_image(recipe)

        name_col, fav_col = st.columns([5, 1])
        with name_col:
            st.markdown(f"#### {recipe.recipe_name}")
        with fav_col:
            if st.button(
                "❤️" if favorite else "🤍",
                key=f"card_fav_{index}_{recipe.recipe_name}",
                help=t.remove_from_favorites if favorite else t.add_to_favorites,
                type="tertiary",
            ):
                controller.toggle_favorite(recipe.recipe_name)
                st.rerun()

        description = recipe.description
        if len(description) > DESCRIPTION_PREVIEW_CHARS:
            description = description[:DESCRIPTION_PREVIEW_CHARS].rstrip() + "…"
        st.caption(description)

        st.markdown(
            f'<div class="rai-card-meta">⏱️ {recipe.cooking_time} &nbsp;·&nbsp; '
            f'🔥 {recipe.nutrition.calories} &nbsp;·&nbsp; ⭐ {recipe.rating} / 5</div>',
            unsafe_allow_html=True,
        )

        if st.button(t.view_recipe, key=f"card_open_{index}_{recipe.recipe_name}", width="stretch", icon="📖"):
            controller.select(recipe)
            st.rerun()
