"""
Recipe service for TheMealDB public API.

This module provides RecipeService, the single place that talks to the recipe API.
It issues the two read-only requests the app needs and turns the responses into
typed records:

- list_desserts(): GET {base_url}/filter.php?c=Dessert -> List[RecipeSummary], sorted by name
- get_detail(id):  GET {base_url}/lookup.php?i={id}    -> RecipeDetail with normalized ingredients

The service:
- Validates the HTTP status (200-299) before attempting to decode anything
- Decodes JSON bodies through the pydantic envelopes in mealdb.models
- Raises FetchError subclasses (mealdb.errors) for every failure, chaining the cause
- Holds no mutable state besides the HTTP session, so one instance can be shared

Construct one instance at startup and hand it to the state controllers.

Flow: controller.load() -> worker thread -> RecipeService -> requests.Session.get -> models -> controller inbox
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from mealdb.config import MealDBConfig
from mealdb.errors import DecodeError, InvalidResponseError, InvalidURLError, NotFoundError
from mealdb.ingredients import extract_ingredients
from mealdb.models import MealListResponse, MealLookupResponse, RecipeDetail, RecipeSummary

logger = logging.getLogger(__name__)

DESSERT_CATEGORY = "Dessert"


class RecipeService:
    """
    Client for the dessert list and recipe lookup endpoints.

    Attributes:
        base_url: API base URL without trailing slash
        session: HTTP session used for every request
        timeout: Per-request timeout in seconds, or None for the client default
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the recipe service.

        Args:
            base_url: API base URL (optional, reads MEALDB_BASE_URL or the public default)
            session: HTTP session (optional, a new requests.Session is created if not provided)
            timeout: Request timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS)
        """
        self.base_url = (base_url or MealDBConfig.get_base_url()).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()

    def build_url(self, path: str, params: Dict[str, str]) -> str:
        """
        Build a request URL from the base URL, an endpoint path and query parameters.

        Query values are percent-encoded.

        Args:
            path: Endpoint file name (e.g., "filter.php")
            params: Query parameters

        Returns:
            Absolute http(s) URL

        Raises:
            InvalidURLError: If the base URL does not produce a valid http(s) URL.
        """
        try:
            prepared = requests.Request("GET", f"{self.base_url}/{path}", params=params).prepare()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise InvalidURLError(f"Cannot build URL from base {self.base_url!r}: {e}") from e

        url = prepared.url or ""
        if not url.lower().startswith(("http://", "https://")):
            raise InvalidURLError(f"Unsupported URL {url!r}; expected http or https")
        return url

    def _get_json(self, url: str) -> Any:
        """
        GET a URL and return the decoded JSON body.

        Raises:
            InvalidResponseError: On transport failure or a status outside 200-299.
            DecodeError: If the body is not valid JSON.
        """
        logger.debug("GET %s (timeout=%s)", url, self.timeout)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise InvalidResponseError(f"Request to {url} failed: {e}") from e

        status_code = response.status_code
        if not 200 <= status_code <= 299:
            logger.warning("Request to %s returned HTTP %d", url, status_code)
            raise InvalidResponseError(
                f"Unexpected HTTP status {status_code} from {url}",
                status_code=status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Response from %s is not valid JSON: %s", url, e)
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

    def list_desserts(self) -> List[RecipeSummary]:
        """
        Fetch all dessert recipes.

        Returns:
            List of RecipeSummary sorted by name ascending (case-sensitive, ordinal).
            Recipes sharing a name keep their response order.

        Raises:
            InvalidResponseError: On transport failure or non-2xx status.
            DecodeError: If the body is not {"meals": [{idMeal, strMeal, strMealThumb}, ...]}.
        """
        url = self.build_url("filter.php", {"c": DESSERT_CATEGORY})
        payload = self._get_json(url)

        try:
            envelope = MealListResponse.model_validate(payload)
        except ValidationError as e:
            logger.warning("Dessert list payload has unexpected shape: %s", e)
            raise DecodeError(f"Unexpected dessert list payload: {e}") from e

        # sorted() is stable, so equal names keep response order
        recipes = sorted(envelope.meals, key=lambda recipe: recipe.name)
        logger.info("Fetched %d dessert recipes", len(recipes))
        return recipes

    def get_detail(self, recipe_id: str) -> RecipeDetail:
        """
        Fetch one recipe with its instructions and ingredients.

        Args:
            recipe_id: TheMealDB meal id (e.g., "52893")

        Returns:
            RecipeDetail built from the first meal of the response

        Raises:
            InvalidResponseError: On transport failure or non-2xx status.
            DecodeError: If the body or the meal's fixed fields do not match the expected shape.
            NotFoundError: If the response holds no meals.
        """
        url = self.build_url("lookup.php", {"i": recipe_id})
        payload = self._get_json(url)

        try:
            envelope = MealLookupResponse.model_validate(payload)
        except ValidationError as e:
            logger.warning("Lookup payload for %r has unexpected shape: %s", recipe_id, e)
            raise DecodeError(f"Unexpected lookup payload for {recipe_id!r}: {e}") from e

        if not envelope.meals:
            logger.info("No recipe found for id %r", recipe_id)
            raise NotFoundError(recipe_id)

        raw = envelope.meals[0]
        try:
            detail = RecipeDetail.model_validate({**raw, "ingredients": extract_ingredients(raw)})
        except ValidationError as e:
            logger.warning("Recipe %r is missing required fields: %s", recipe_id, e)
            raise DecodeError(f"Recipe {recipe_id!r} has unexpected fields: {e}") from e

        logger.info("Fetched recipe %s (%r) with %d ingredients", detail.id, detail.name, len(detail.ingredients))
        return detail

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
