"""
Controller wiring for Streamlit pages.

This module wraps Streamlit's session_state so every page gets the same
recipe service and its own fetch controllers:

- get_recipe_service(): one RecipeService per server process (st.cache_resource)
- get_list_controller(): one ListController per browser session
- get_detail_controller(recipe_id): one DetailController per browser session,
  re-pointed at a new recipe id when the selection changes
- select_recipe()/get_selected_recipe_id(): the list -> detail navigation handoff

# NOTE: Controllers live in session_state, so their state survives reruns but is
    reset when the user refreshes the page or opens a new tab.
"""

import time
from typing import Optional

import streamlit as st

from mealdb.config import configure_logging
from mealdb.service import RecipeService
from mealdb.state import DetailController, FetchController, Idle, ListController

LIST_CONTROLLER_KEY = "list_controller"
DETAIL_CONTROLLER_KEY = "detail_controller"
SELECTED_RECIPE_KEY = "selected_recipe_id"
DETAIL_RELOAD_KEY = "detail_reload_requested"

# Seconds between reruns while a fetch is in flight
POLL_INTERVAL_SECONDS = 0.25


@st.cache_resource
def get_recipe_service() -> RecipeService:
    """
    Build the shared RecipeService once per server process.

    Logging is configured here as well since this is the first thing every page calls.
    """
    configure_logging()
    return RecipeService()


def get_list_controller() -> ListController:
    """Get or create the dessert list controller for this session."""
    if LIST_CONTROLLER_KEY not in st.session_state:
        st.session_state[LIST_CONTROLLER_KEY] = ListController(get_recipe_service())
    return st.session_state[LIST_CONTROLLER_KEY]


def get_detail_controller(recipe_id: str) -> DetailController:
    """
    Get the detail controller for this session, pointed at recipe_id.

    A fetch starts whenever the detail page is entered from the list, when the
    id changes, or when nothing has been loaded yet. Nothing is cached across ids.
    """
    controller = st.session_state.get(DETAIL_CONTROLLER_KEY)
    if controller is None:
        controller = DetailController(get_recipe_service(), recipe_id)
        st.session_state[DETAIL_CONTROLLER_KEY] = controller

    entered = st.session_state.pop(DETAIL_RELOAD_KEY, False)
    if entered or controller.recipe_id != recipe_id or isinstance(controller.state, Idle):
        controller.load(recipe_id)
    return controller


def select_recipe(recipe_id: str) -> None:
    """Remember which recipe the detail page should show and request a fresh fetch."""
    st.session_state[SELECTED_RECIPE_KEY] = recipe_id
    st.session_state[DETAIL_RELOAD_KEY] = True


def get_selected_recipe_id() -> Optional[str]:
    """Get the recipe id chosen on the list page, if any."""
    return st.session_state.get(SELECTED_RECIPE_KEY)


def rerun_while_loading(controller: FetchController) -> None:
    """
    Schedule another script run while the controller is loading or has fetches in flight.

    Streamlit only redraws on reruns, so this is how completed fetches get published.
    A Success/Failure can still be followed by a newer completion, so this keeps
    rerunning until nothing is in flight. Call it at the end of a page, after
    everything has been rendered.
    """
    if controller.pending:
        time.sleep(POLL_INTERVAL_SECONDS)
        st.rerun()
