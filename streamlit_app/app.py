"""
Dessert Browser - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point and the dessert list page.
It sets up the page configuration, starts the list fetch on first visit and renders
whatever state the list controller is in: spinner, error with retry, or the list
of recipes with thumbnails. Choosing a recipe opens the Recipe Details page.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.

Run:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import mealdb
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from mealdb.state import Failure, Idle, Success
from utils.controllers import get_list_controller, rerun_while_loading, select_recipe
from ui.styles import load_global_styles
from ui.layout import page_header, recipe_row
from ui.feedback import show_empty_state, show_error, working_spinner

DETAIL_PAGE = "pages/01_🍰_Recipe_Details.py"

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Dessert Recipes",
    page_icon="🍰",
    layout="centered",
)

load_global_styles()

controller = get_list_controller()
if isinstance(controller.state, Idle):
    controller.load()
state = controller.poll()

page_header("Dessert Recipes", "Desserts from TheMealDB, A to Z.")

if isinstance(state, Failure):
    if show_error(state.reason, hint="Check your connection and try again.", retry_key="retry_list"):
        controller.load()
        st.rerun()
elif isinstance(state, Success):
    recipes = state.value
    if not recipes:
        show_empty_state("No desserts found", "The recipe service returned an empty list.")
    for recipe in recipes:
        if recipe_row(recipe):
            select_recipe(recipe.id)
            st.switch_page(DETAIL_PAGE)
else:
    with working_spinner("Loading desserts…"):
        rerun_while_loading(controller)

# A retry can still be in flight behind a published result
rerun_while_loading(controller)
