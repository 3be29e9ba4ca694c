"""
Recipe card grid.

Renders the current result set as one bordered card per recipe, in response
order. An empty result set renders nothing.
"""

from typing import Sequence

import streamlit as st

from recipe_search.models import RecipeRecord
from recipe_search.utils.formatting import format_calories

GRID_COLUMNS = 3


def render_recipe_card(recipe: RecipeRecord) -> None:
    """
    Render a single recipe card.

    Shows title, source, image, calories (5 significant figures), the
    ingredient lines as a bullet list and an outbound link to the recipe.
    """
    with st.container(border=True):
        st.markdown(f"### {recipe.title}")
        if recipe.source_name:
            st.caption(f"from {recipe.source_name}")
        if recipe.image_url:
            st.image(recipe.image_url, caption=recipe.title, width="stretch")
        st.markdown(f"**Calories:** {format_calories(recipe.calories)}")
        st.markdown("**Ingredients:**")
        if recipe.ingredient_lines:
            st.markdown("\n".join(f"- {line}" for line in recipe.ingredient_lines))
        st.link_button("Go to Recipe", url=recipe.detail_url, width="stretch")


def render_recipe_grid(recipes: Sequence[RecipeRecord], columns: int = GRID_COLUMNS) -> None:
    """
    Render recipes in a grid, filling rows left to right.

    Args:
        recipes: Result set to render
        columns: Number of cards per row
    """
    if not recipes:
        return

    for start in range(0, len(recipes), columns):
        row = recipes[start:start + columns]
        cols = st.columns(columns, gap="medium")
        for col, recipe in zip(cols, row):
            with col:
                render_recipe_card(recipe)
