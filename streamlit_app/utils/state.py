"""
Search State Management Module.

This module wraps Streamlit's session_state to hold the two pieces of view
state of the recipe page:

- the current FilterSelection (meal type, allergy/diet tags, cook time)
- the current SearchState (loading flag, result set, last notice)

Both are immutable objects from recipe_search; every update replaces the value
in session_state with a new one produced by a transition or reducer function.

# NOTE: This module uses session_state, so filters and results live only for the
    current Streamlit session. Refreshing the page resets them.
"""

from typing import Any, Callable

import streamlit as st

from recipe_search.filters import FilterSelection
from recipe_search.search import SearchState

# Session state keys
FILTERS_KEY = "filter_selection"
SEARCH_STATE_KEY = "search_state"


def init_state() -> None:
    """
    Ensure filters and search state exist in session state.

    Call this at the top of the page before rendering any widget.
    """
    if FILTERS_KEY not in st.session_state:
        st.session_state[FILTERS_KEY] = FilterSelection()
    if SEARCH_STATE_KEY not in st.session_state:
        st.session_state[SEARCH_STATE_KEY] = SearchState()


def get_filters() -> FilterSelection:
    """Get the current filter selection, initializing it if needed."""
    init_state()
    return st.session_state[FILTERS_KEY]


def update_filters(transition: Callable[..., FilterSelection], *args: Any) -> FilterSelection:
    """
    Apply a filter transition to the stored selection.

    Args:
        transition: One of the recipe_search.filters transition functions
            (select_meal, toggle_allergy, toggle_diet, set_cook_time)
        *args: Extra arguments after the selection

    Returns:
        The new selection, also stored in session state.
    """
    selection = transition(get_filters(), *args)
    st.session_state[FILTERS_KEY] = selection
    return selection


def get_search_state() -> SearchState:
    """Get the current search state, initializing it if needed."""
    init_state()
    return st.session_state[SEARCH_STATE_KEY]


def set_search_state(state: SearchState) -> None:
    """Replace the stored search state."""
    init_state()
    st.session_state[SEARCH_STATE_KEY] = state
