"""
UI Styling and Components Module.

This module provides global CSS styling, filter controls, recipe cards and
feedback helpers for the Recipe Finder Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, section
from ui.cards import render_recipe_grid

__all__ = [
    "load_global_styles",
    "page_header",
    "section",
    "render_recipe_grid",
]
