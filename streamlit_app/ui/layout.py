"""
Layout primitives for consistent page structure.

Provides reusable components for page headers, sections and recipe rows.
"""

from typing import Callable, List, Optional
import streamlit as st

from mealdb.models import Ingredient, RecipeSummary

THUMBNAIL_WIDTH = 50
HERO_IMAGE_WIDTH = 320


def page_header(title: str, subtitle: Optional[str] = None, right: Optional[Callable[[], None]] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
        right: Optional callable that renders right-side content (e.g., a back button)
    """
    if right is not None:
        col_title, col_right = st.columns([3, 1])
        with col_title:
            _render_title(title, subtitle)
        with col_right:
            right()
    else:
        _render_title(title, subtitle)


def _render_title(title: str, subtitle: Optional[str]) -> None:
    st.markdown('<div class="mdb-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="subtitle">{subtitle}</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title
        caption: Optional caption/help text below title
    """
    st.markdown(f"### {title}")
    if caption:
        st.caption(caption)


def recipe_row(recipe: RecipeSummary) -> bool:
    """
    Render one list row: thumbnail, name and an open button.

    Args:
        recipe: Recipe to render

    Returns:
        True if the row's button was clicked on this run
    """
    col_image, col_name, col_action = st.columns([1, 6, 2], vertical_alignment="center")
    with col_image:
        st.image(recipe.thumbnail_url, width=THUMBNAIL_WIDTH)
    with col_name:
        st.markdown(recipe.name)
    with col_action:
        return st.button("View", key=f"open_recipe_{recipe.id}", use_container_width=True)


def ingredient_list(ingredients: List[Ingredient]) -> None:
    """Render ingredients as bullet lines ("• 200g Sugar")."""
    if not ingredients:
        st.caption("No ingredients listed.")
        return
    st.markdown("\n".join(f"- {ingredient.label}" for ingredient in ingredients))
