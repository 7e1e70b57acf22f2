"""
Global CSS Styling for the Dessert Browser.

This module provides load_global_styles() to inject consistent styling
across both pages.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Dessert Browser.

    This function:
    - Sets heading weights and page header spacing
    - Rounds recipe images (thumbnails and the detail hero image)
    - Keeps list rows compact
    """
    css = """
    <style>
        h1, h2, h3 {
            font-weight: 700 !important;
            letter-spacing: 0.01em !important;
        }

        .mdb-page-header {
            margin-bottom: 0.5rem;
        }

        .mdb-page-header .subtitle {
            color: #6b7280;
            font-size: 1rem;
            margin-bottom: 1rem;
        }

        [data-testid="stImage"] img {
            border-radius: 8px;
        }

        [data-testid="stHorizontalBlock"] {
            margin-bottom: 0.25rem;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
