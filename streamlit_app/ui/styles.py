"""
Global CSS Styling for Recipe Finder.

This module provides load_global_styles() to inject consistent styling
across the page. Focuses on typography, spacing and the recipe card grid.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Finder app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Sets heading weights and spacing
    - Narrows the content width on large screens
    - Keeps card images at a uniform height
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        h3 {
            font-size: 1.25rem !important;
            margin-top: 0.25rem !important;
            margin-bottom: 0.25rem !important;
        }

        .block-container {
            max-width: 1200px;
            padding-top: 2rem;
        }

        .rf-page-header .subtitle {
            color: #6b7280;
            font-size: 1.05rem;
            margin-bottom: 1rem;
        }

        .rf-section-caption {
            color: #6b7280;
            font-size: 0.9rem;
            margin-bottom: 0.75rem;
        }

        [data-testid="stImage"] img {
            border-radius: 8px;
            object-fit: cover;
            max-height: 240px;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
