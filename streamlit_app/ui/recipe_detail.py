"""
Recipe detail view.

Shows the selected recipe with:
- back button, image and on-demand image regeneration
- share (clipboard text with a transient confirmation) and favorite toggle
- rating, description, cooking time
- servings adjuster with scaled ingredient quantities
- nutrition summary
- standard / Thermomix instruction toggle

Portions, cook mode and image failures are per-recipe view state in
st.session_state; nothing here is persisted.
"""

import streamlit as st

from recipe_ai.controller import RecipeController
from recipe_ai.images import needs_regeneration
from recipe_ai.models import COOK_MODE_STANDARD, COOK_MODE_THERMOMIX, COOK_MODES, Recipe
from recipe_ai.scaling import adjust_portions, format_quantity, scale_ingredients
from recipe_ai.service import ImageGenerationError
from recipe_ai.sharing import CopiedNotice, share_recipe
from recipe_ai.translations import Translations, get_translations

from ui.feedback import show_error, working_spinner
from ui.recipe_card import render_recipe_image
from utils.session import get_copied_notice, get_view_value, set_view_value

PORTIONS_KEY = "portions"
COOK_MODE_KEY = "cook_mode"
IMAGE_FAILED_KEY = "image_failed"
IMAGE_ERROR_KEY = "image_error"
SHARE_TEXT_KEY = "share_text"

# How often a visible "copied" notice re-checks whether it has expired
NOTICE_REFRESH_SECONDS = 0.5


def _render_stars(rating: int) -> None:
    stars = "".join("★" if i < rating else '<span class="off">★</span>' for i in range(5))
    st.markdown(
        f'<span class="rai-stars">{stars}</span> <b>{float(rating):.1f} / 5</b>',
        unsafe_allow_html=True,
    )


def _render_image_section(controller: RecipeController, recipe: Recipe, t: Translations) -> None:
    name = recipe.recipe_name
    rendered = render_recipe_image(recipe)
    if not rendered:
        set_view_value(IMAGE_FAILED_KEY, name, True)

    failed = get_view_value(IMAGE_FAILED_KEY, name, False)
    if not needs_regeneration(recipe.image_url, load_failed=failed):
        return

    error = get_view_value(IMAGE_ERROR_KEY, name, None)
    if error:
        show_error(t.image_error, hint=error)

    if st.button(t.regenerate_image, key=f"regenerate_{name}", type="primary", icon="🖼️"):
        with working_spinner(t.regenerating):
            try:
                controller.regenerate_image(recipe)
            except ImageGenerationError as e:
                set_view_value(IMAGE_FAILED_KEY, name, True)
                set_view_value(IMAGE_ERROR_KEY, name, str(e))
            else:
                set_view_value(IMAGE_FAILED_KEY, name, False)
                set_view_value(IMAGE_ERROR_KEY, name, None)
        st.rerun()


def render_copied_notice(notice: CopiedNotice, label: str) -> None:
    """
    Show the "copied" caption while the notice is visible.

    The caption lives in a fragment that reruns every NOTICE_REFRESH_SECONDS.
    Once the notice has expired the fragment triggers a full rerun, which
    drops the caption and the fragment's timer with it.
    """
    if not notice.is_visible():
        return

    def caption() -> None:
        if notice.is_visible():
            st.caption(f"✅ {label}")
        else:
            st.rerun()

    st.fragment(caption, run_every=NOTICE_REFRESH_SECONDS)()


def _render_actions(controller: RecipeController, recipe: Recipe, ingredients, t: Translations) -> None:
    name = recipe.recipe_name
    favorite = controller.is_favorite(name)
    notice = get_copied_notice(name)

    share_col, fav_col = st.columns(2)
    with share_col:
        if st.button(t.share, key=f"share_{name}", help=t.share_recipe, icon="🔗", width="stretch"):
            copied = share_recipe(
                recipe,
                ingredients,
                controller.state.language,
                copy_to_clipboard=lambda text: set_view_value(SHARE_TEXT_KEY, name, text),
            )
            if copied:
                notice.show()
                st.toast(t.copied_to_clipboard, icon="📋")
    with fav_col:
        label = t.remove_from_favorites if favorite else t.add_to_favorites
        if st.button(label, key=f"detail_fav_{name}", icon="❤️" if favorite else "🤍", width="stretch"):
            controller.toggle_favorite(name)
            st.rerun()

    share_text = get_view_value(SHARE_TEXT_KEY, name, None)
    if share_text:
        # st.code renders a copy-to-clipboard button for the text
        st.code(share_text, language=None)
    render_copied_notice(notice, t.copied_to_clipboard)


def _render_ingredients(recipe: Recipe, t: Translations):
    name = recipe.recipe_name
    portions = get_view_value(PORTIONS_KEY, name, recipe.servings)

    st.markdown(f"### {t.ingredients}")
    st.markdown(f"⏱️ **{t.cooking_time}:** {recipe.cooking_time}")

    label_col, minus_col, value_col, plus_col = st.columns([3, 1, 1, 1])
    with label_col:
        st.markdown(f"**{t.servings}**")
    with minus_col:
        if st.button("➖", key=f"portions_minus_{name}"):
            set_view_value(PORTIONS_KEY, name, adjust_portions(portions, -1))
            st.rerun()
    with value_col:
        st.markdown(f"**{portions}**")
    with plus_col:
        if st.button("➕", key=f"portions_plus_{name}"):
            set_view_value(PORTIONS_KEY, name, adjust_portions(portions, 1))
            st.rerun()

    ingredients = scale_ingredients(recipe.ingredients, recipe.servings, portions)
    st.markdown(
        "\n".join(f"- {ing.name}: **{format_quantity(ing.quantity)} {ing.unit}**" for ing in ingredients)
    )

    st.markdown(f"#### {t.nutrition}")
    nutrition = recipe.nutrition
    st.markdown(
        f"- {t.calories}: **{nutrition.calories}**\n"
        f"- {t.protein}: **{nutrition.protein}**\n"
        f"- {t.carbs}: **{nutrition.carbs}**\n"
        f"- {t.fat}: **{nutrition.fat}**"
    )
    return ingredients


def _render_instructions(recipe: Recipe, t: Translations) -> None:
    name = recipe.recipe_name
    labels = {COOK_MODE_STANDARD: t.standard_cook, COOK_MODE_THERMOMIX: t.thermomix_cook}
    current = get_view_value(COOK_MODE_KEY, name, COOK_MODE_STANDARD)

    mode = st.radio(
        t.instructions,
        options=COOK_MODES,
        index=COOK_MODES.index(current),
        format_func=lambda value: labels[value],
        horizontal=True,
        label_visibility="collapsed",
        key=f"cook_mode_radio_{name}",
    )
    set_view_value(COOK_MODE_KEY, name, mode)

    st.markdown(f"### {t.instructions}")
    steps = recipe.instructions_for(mode)
    st.markdown("\n".join(f"{i}. {step}" for i, step in enumerate(steps, start=1)))


def render_recipe_detail(controller: RecipeController, recipe: Recipe) -> None:
    t = get_translations(controller.state.language)

    if st.button(t.back_button, key="detail_back", icon="⬅️"):
        controller.back()
        st.rerun()

    with st.container(border=True):
        _render_image_section(controller, recipe, t)

        st.markdown(f"# {recipe.recipe_name}")
        _render_stars(recipe.rating)
        st.write(recipe.description)

        ingredients_col, instructions_col = st.columns([1, 2], gap="large")
        with ingredients_col:
            ingredients = _render_ingredients(recipe, t)
        with instructions_col:
            _render_instructions(recipe, t)

        st.divider()
        _render_actions(controller, recipe, ingredients, t)
