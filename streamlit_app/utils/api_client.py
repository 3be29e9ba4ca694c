"""
Recipe API Client Module.

This module is the **single source of truth** for recipe API communication from
the Streamlit page. It owns the connector instance and runs searches against
the session's search state.

Key principles:
- One request per submission, no retry
- Failures are turned into a notice by recipe_search.search.run_search;
  nothing raised by the network layer reaches Streamlit
- Form validation errors are returned to the caller for inline display
"""

import logging
from typing import Callable, Dict, Optional

import streamlit as st

from recipe_search.connectors.edamam_connector import EdamamConnector
from recipe_search.filters import FilterSelection
from recipe_search.search import SearchState, run_search

from utils.state import get_search_state, set_search_state

logger = logging.getLogger(__name__)


@st.cache_resource
def get_connector() -> EdamamConnector:
    """
    Create the Edamam connector once per Streamlit server process.

    Credentials are read from the environment (EDAMAM_APP_ID / EDAMAM_APP_KEY).
    """
    return EdamamConnector()


def search_recipes(
    selection: FilterSelection,
    on_loading: Optional[Callable[[SearchState], None]] = None,
) -> Dict[str, str]:
    """
    Submit the current filters and store the resulting search state.

    Args:
        selection: Current filter selection from session state
        on_loading: Optional callback run once the request is about to be sent

    Returns:
        Per-field form errors (empty dict when the form was accepted).
    """
    logger.debug("Submitting recipe search: %s", selection)
    form_data = {
        "items": list(selection.allergies),
        "diets": list(selection.diets),
        "cook_time": selection.cook_time,
    }
    state, errors = run_search(
        get_search_state(),
        form_data,
        get_connector(),
        meal_type=selection.meal_type,
        on_loading=on_loading,
    )
    if errors:
        return errors

    set_search_state(state)
    return {}
