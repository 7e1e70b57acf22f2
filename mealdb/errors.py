"""
Error taxonomy for recipe fetches.

Every failure the recipe service can report is a FetchError subclass. Each one
carries a user_message that the state controllers surface as-is, so the
presentation layer never has to inspect exception types.
"""

from typing import Optional


class FetchError(Exception):
    """Base class for all recipe fetch failures."""

    user_message = "Something went wrong while loading recipes."


class InvalidURLError(FetchError):
    """
    Raised when a request URL cannot be built from the configured base URL.

    With the default base URL this never happens; it requires a malformed
    MEALDB_BASE_URL override.
    """

    user_message = "The recipe service address is invalid."


class InvalidResponseError(FetchError):
    """
    Raised when the HTTP status is outside 200-299 or the transport fails.

    Attributes:
        status_code: HTTP status code, or None for transport failures
    """

    user_message = "The recipe service returned an invalid response."

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(FetchError):
    """Raised when a response body does not match the expected JSON shape."""

    user_message = "The recipe data could not be read."


class NotFoundError(FetchError):
    """
    Raised when a detail lookup returns no meals.

    Attributes:
        recipe_id: The id that was looked up
    """

    user_message = "That recipe could not be found."

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"No recipe found for id {recipe_id!r}")
        self.recipe_id = recipe_id
