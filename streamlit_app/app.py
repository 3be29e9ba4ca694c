"""
Recipe Finder - Streamlit Frontend Main Entry Point.

Single page: pick a meal type, allergy and diet filters and a maximum cook
time, press "Surprise Me" and browse recipe cards from the Edamam recipe
search API.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_search
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import recipe_search.config  # noqa: F401

import streamlit as st

from recipe_search.config import get_required_env_vars
from utils.api_client import search_recipes
from utils.state import get_filters, get_search_state, init_state
from ui.styles import load_global_styles
from ui.layout import page_header, section
from ui.cards import render_recipe_grid
from ui.feedback import (
    show_form_errors,
    show_notice,
    show_raw_response,
    working_spinner,
)
from ui.filters import (
    render_allergy_checkboxes,
    render_cook_time_input,
    render_diet_checkboxes,
    render_meal_selector,
)

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Finder",
    page_icon="🍳",
    layout="wide",
    initial_sidebar_state="collapsed",
)

load_global_styles()
init_state()

with st.sidebar:
    st.markdown("### 🍳 **Recipe Finder**")
    st.divider()
    with st.expander("System status", expanded=False):
        env_status = get_required_env_vars()
        for name, is_set in env_status.items():
            st.markdown(f"{'🟢' if is_set else '🔴'} `{name.upper()}`")
        if not all(env_status.values()):
            st.caption("Add EDAMAM_APP_ID and EDAMAM_APP_KEY to .env at the project root.")

page_header(
    "Recipe Finder",
    subtitle="Pick a mealtime and your filters, and we'll surprise you with recipes.",
)

meal_col, filters_col = st.columns([1, 2], gap="large")

with meal_col:
    render_meal_selector()

with filters_col:
    allergy_col, diet_col = st.columns(2, gap="medium")
    with allergy_col:
        render_allergy_checkboxes()
    with diet_col:
        render_diet_checkboxes()
    render_cook_time_input()
    submitted = st.button("Surprise Me", type="primary")

st.divider()

results_area = st.empty()

if submitted:
    with working_spinner("Finding recipes…"):
        errors = search_recipes(get_filters(), on_loading=lambda _state: results_area.empty())
    if errors:
        show_form_errors(errors)
    else:
        show_notice(get_search_state().notice)

search_state = get_search_state()

with results_area.container():
    if search_state.results:
        section("Recipes", caption=f"{len(search_state.results)} recipes")
        render_recipe_grid(search_state.results)

show_raw_response(search_state.notice)
