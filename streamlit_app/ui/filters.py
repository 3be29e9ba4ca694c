"""
Filter controls for the recipe page.

Each widget forwards its change to a recipe_search.filters transition through
an on_change callback, so the stored FilterSelection always reflects the order
in which tags were checked.
"""

import streamlit as st

from recipe_search.filters import (
    ALLERGY_TAGS,
    DIET_TAGS,
    MealType,
    select_meal,
    set_cook_time,
    toggle_allergy,
    toggle_diet,
)

from utils.state import get_filters, update_filters

MEAL_KEY = "meal_type_select"
COOK_TIME_KEY = "cook_time_input"


def _allergy_key(tag: str) -> str:
    return f"allergy_{tag}"


def _diet_key(tag: str) -> str:
    return f"diet_{tag}"


def _on_meal_change() -> None:
    update_filters(select_meal, st.session_state[MEAL_KEY])


def _on_allergy_change(tag: str) -> None:
    update_filters(toggle_allergy, tag, st.session_state[_allergy_key(tag)])


def _on_diet_change(tag: str) -> None:
    update_filters(toggle_diet, tag, st.session_state[_diet_key(tag)])


def _on_cook_time_change() -> None:
    update_filters(set_cook_time, st.session_state[COOK_TIME_KEY])


def render_meal_selector() -> None:
    """Single-select dropdown for the meal type."""
    selection = get_filters()
    options = [meal.value for meal in MealType]
    st.selectbox(
        "Choose a mealtime",
        options=options,
        index=options.index(selection.meal_type.value),
        key=MEAL_KEY,
        on_change=_on_meal_change,
    )


def render_allergy_checkboxes() -> None:
    """Checkbox group for allergy tags."""
    selection = get_filters()
    st.markdown("**Allergies**")
    st.caption("Indicate any Allergies")
    for tag in ALLERGY_TAGS:
        st.checkbox(
            tag,
            value=tag in selection.allergies,
            key=_allergy_key(tag),
            on_change=_on_allergy_change,
            args=(tag,),
        )


def render_diet_checkboxes() -> None:
    """Checkbox group for diet tags."""
    selection = get_filters()
    st.markdown("**Diet Preferences**")
    st.caption("Indicate any diet preferences")
    for tag in DIET_TAGS:
        st.checkbox(
            tag,
            value=tag in selection.diets,
            key=_diet_key(tag),
            on_change=_on_diet_change,
            args=(tag,),
        )


def render_cook_time_input() -> None:
    """Free-text field for the maximum cook time."""
    selection = get_filters()
    st.text_input(
        "Max Cook Time",
        value=selection.cook_time,
        placeholder="in minutes, ex: 30",
        help="leave blank for no preference",
        key=COOK_TIME_KEY,
        on_change=_on_cook_time_change,
    )
