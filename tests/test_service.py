"""
Tests for RecipeService using a mocked HTTP session.

These tests mock the requests session to avoid making real API calls during testing.
The tests verify that:
- Request URLs are built from the base URL and encoded query parameters
- Non-2xx statuses and transport failures raise InvalidResponseError before decoding
- Malformed bodies raise DecodeError and empty lookups raise NotFoundError
- The dessert list is sorted by name with a stable tie order
- Detail responses are normalized into ordered ingredients
"""

from unittest.mock import Mock

import pytest
import requests

from mealdb.errors import DecodeError, InvalidResponseError, InvalidURLError, NotFoundError
from mealdb.models import Ingredient
from mealdb.service import RecipeService

BASE_URL = "https://themealdb.com/api/json/v1/1"


def make_response(status_code=200, payload=None, json_error=None):
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_service(response=None, error=None):
    """Build a RecipeService whose session returns response (or raises error)."""
    session = Mock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return RecipeService(base_url=BASE_URL, session=session, timeout=10), session


def meal(meal_id, name):
    return {"idMeal": meal_id, "strMeal": name, "strMealThumb": f"https://img/{meal_id}.jpg"}


def detail_payload(**slots):
    """Build a lookup body for one meal with all ingredient slots blank unless given."""
    raw = {
        "idMeal": "52893",
        "strMeal": "Apple & Blackberry Crumble",
        "strDrinkAlternate": None,
        "strCategory": "Dessert",
        "strArea": "British",
        "strInstructions": "Heat oven to 190C.",
        "strMealThumb": "https://img/52893.jpg",
        "strTags": "Pudding",
    }
    for index in range(1, 21):
        raw[f"strIngredient{index}"] = ""
        raw[f"strMeasure{index}"] = " "
    raw.update(slots)
    return {"meals": [raw]}


class TestBuildUrl:
    """Tests for URL construction."""

    def test_list_url(self):
        """Test the dessert filter URL."""
        service, _ = make_service()
        assert service.build_url("filter.php", {"c": "Dessert"}) == f"{BASE_URL}/filter.php?c=Dessert"

    def test_query_values_are_encoded(self):
        """Test that ids are percent-encoded rather than injected into the query."""
        service, _ = make_service()
        url = service.build_url("lookup.php", {"i": "1&c=x"})
        assert url == f"{BASE_URL}/lookup.php?i=1%26c%3Dx"

    def test_trailing_slash_on_base_url_is_ignored(self):
        """Test that a base URL ending in '/' does not produce '//'."""
        service = RecipeService(base_url=BASE_URL + "/", session=Mock())
        assert service.build_url("filter.php", {"c": "Dessert"}) == f"{BASE_URL}/filter.php?c=Dessert"

    @pytest.mark.parametrize("base_url", ["not a url", "themealdb.com/api", "ftp://themealdb.com/api", "http://"])
    def test_invalid_base_url_raises(self, base_url):
        """Test that an unusable base URL raises InvalidURLError."""
        service = RecipeService(base_url=base_url, session=Mock())
        with pytest.raises(InvalidURLError):
            service.build_url("filter.php", {"c": "Dessert"})

    def test_invalid_base_url_skips_request(self):
        """Test that no request is sent when the URL cannot be built."""
        session = Mock()
        service = RecipeService(base_url="not a url", session=session)

        with pytest.raises(InvalidURLError):
            service.list_desserts()

        session.get.assert_not_called()


class TestListDesserts:
    """Tests for list_desserts."""

    def test_requests_dessert_filter(self):
        """Test that the dessert filter endpoint is called with the configured timeout."""
        service, session = make_service(make_response(payload={"meals": [meal("1", "Pie")]}))

        service.list_desserts()

        session.get.assert_called_once_with(f"{BASE_URL}/filter.php?c=Dessert", timeout=10)

    def test_decodes_and_sorts_by_name(self):
        """Test that results are decoded and sorted case-sensitively by name."""
        payload = {
            "meals": [
                meal("3", "Banana Pancakes"),
                meal("4", "apple frangipan tart"),
                meal("1", "Apple & Blackberry Crumble"),
                meal("2", "Bakewell tart"),
            ]
        }
        service, _ = make_service(make_response(payload=payload))

        recipes = service.list_desserts()

        assert [r.name for r in recipes] == [
            "Apple & Blackberry Crumble",
            "Bakewell tart",
            "Banana Pancakes",
            "apple frangipan tart",
        ]
        assert recipes[0].id == "1"
        assert recipes[0].thumbnail_url == "https://img/1.jpg"

    def test_sort_is_stable_for_equal_names(self):
        """Test that recipes sharing a name keep their response order."""
        payload = {"meals": [meal("9", "Eton Mess"), meal("5", "Apam balik"), meal("2", "Eton Mess")]}
        service, _ = make_service(make_response(payload=payload))

        recipes = service.list_desserts()

        assert [r.id for r in recipes] == ["5", "9", "2"]

    def test_empty_list(self):
        """Test that an empty meals array is a valid, empty result."""
        service, _ = make_service(make_response(payload={"meals": []}))
        assert service.list_desserts() == []

    def test_extra_fields_are_ignored(self):
        """Test that unexpected keys on a meal do not break decoding."""
        item = meal("1", "Pie")
        item["strCategory"] = "Dessert"
        service, _ = make_service(make_response(payload={"meals": [item]}))

        assert service.list_desserts()[0].name == "Pie"

    @pytest.mark.parametrize("status_code", [404, 500, 301, 199])
    def test_bad_status_raises_invalid_response(self, status_code):
        """Test that non-2xx statuses raise InvalidResponseError without decoding."""
        response = make_response(status_code=status_code, payload={"meals": []})
        service, _ = make_service(response)

        with pytest.raises(InvalidResponseError) as exc_info:
            service.list_desserts()

        assert exc_info.value.status_code == status_code
        response.json.assert_not_called()

    def test_any_2xx_status_is_accepted(self):
        """Test that 2xx statuses other than 200 are accepted."""
        service, _ = make_service(make_response(status_code=203, payload={"meals": []}))
        assert service.list_desserts() == []

    def test_transport_error_raises_invalid_response(self):
        """Test that connection failures raise InvalidResponseError with no status."""
        service, _ = make_service(error=requests.exceptions.ConnectionError("connection refused"))

        with pytest.raises(InvalidResponseError) as exc_info:
            service.list_desserts()

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_invalid_json_raises_decode_error(self):
        """Test that a non-JSON body raises DecodeError."""
        service, _ = make_service(make_response(json_error=ValueError("Expecting value")))

        with pytest.raises(DecodeError):
            service.list_desserts()

    @pytest.mark.parametrize(
        "payload",
        [
            {"meals": None},
            {"results": []},
            [],
            {"meals": [{"idMeal": "1", "strMeal": "Pie"}]},
            {"meals": [{"idMeal": 1, "strMeal": "Pie", "strMealThumb": "https://img/1.jpg"}]},
        ],
    )
    def test_unexpected_shape_raises_decode_error(self, payload):
        """Test that bodies not matching {meals: [...]} raise DecodeError."""
        service, _ = make_service(make_response(payload=payload))

        with pytest.raises(DecodeError):
            service.list_desserts()


class TestGetDetail:
    """Tests for get_detail."""

    def test_requests_lookup_endpoint(self):
        """Test that the lookup endpoint is called with the recipe id."""
        service, session = make_service(make_response(payload=detail_payload()))

        service.get_detail("52893")

        session.get.assert_called_once_with(f"{BASE_URL}/lookup.php?i=52893", timeout=10)

    def test_decodes_fixed_fields(self):
        """Test that id, name, instructions and thumbnail are decoded."""
        service, _ = make_service(make_response(payload=detail_payload()))

        detail = service.get_detail("52893")

        assert detail.id == "52893"
        assert detail.name == "Apple & Blackberry Crumble"
        assert detail.instructions == "Heat oven to 190C."
        assert detail.thumbnail_url == "https://img/52893.jpg"

    def test_single_ingredient_fixture(self):
        """Test that only strIngredient1/strMeasure1 filled yields exactly ('Sugar', '200g')."""
        payload = detail_payload(strIngredient1="Sugar", strMeasure1="200g")
        service, _ = make_service(make_response(payload=payload))

        detail = service.get_detail("52893")

        assert detail.ingredients == [Ingredient(name="Sugar", measure="200g")]

    def test_ingredients_follow_slot_order_and_filtering(self):
        """Test normalization of a realistic payload with gaps and nulls."""
        payload = detail_payload(
            strIngredient1="Plain Flour",
            strMeasure1="120g",
            strIngredient2="Caster Sugar",
            strMeasure2="60g",
            strIngredient3=None,
            strMeasure3="1 tbs",
            strIngredient4="Butter",
            strMeasure4="60g",
            strIngredient5="Blackberries",
            strMeasure5="",
        )
        service, _ = make_service(make_response(payload=payload))

        detail = service.get_detail("52893")

        assert [(i.name, i.measure) for i in detail.ingredients] == [
            ("Plain Flour", "120g"),
            ("Caster Sugar", "60g"),
            ("Butter", "60g"),
        ]

    def test_uses_first_meal(self):
        """Test that only the first meal of the response is used."""
        payload = detail_payload()
        second = dict(payload["meals"][0], idMeal="99999", strMeal="Other")
        payload["meals"].append(second)
        service, _ = make_service(make_response(payload=payload))

        assert service.get_detail("52893").id == "52893"

    @pytest.mark.parametrize("payload", [{"meals": []}, {"meals": None}])
    def test_no_meals_raises_not_found(self, payload):
        """Test that an empty or null meals value raises NotFoundError."""
        service, _ = make_service(make_response(payload=payload))

        with pytest.raises(NotFoundError) as exc_info:
            service.get_detail("0")

        assert exc_info.value.recipe_id == "0"

    @pytest.mark.parametrize("status_code", [404, 500])
    def test_bad_status_raises_invalid_response(self, status_code):
        """Test that 404/500 raise InvalidResponseError, not NotFound or a decode attempt."""
        response = make_response(status_code=status_code, payload={"meals": []})
        service, _ = make_service(response)

        with pytest.raises(InvalidResponseError):
            service.get_detail("52893")

        response.json.assert_not_called()

    def test_timeout_raises_invalid_response(self):
        """Test that a transport timeout raises InvalidResponseError."""
        service, _ = make_service(error=requests.exceptions.Timeout("read timed out"))

        with pytest.raises(InvalidResponseError):
            service.get_detail("52893")

    def test_invalid_json_raises_decode_error(self):
        """Test that a non-JSON body raises DecodeError."""
        service, _ = make_service(make_response(json_error=ValueError("Expecting value")))

        with pytest.raises(DecodeError):
            service.get_detail("52893")

    @pytest.mark.parametrize("missing", ["idMeal", "strMeal", "strInstructions", "strMealThumb"])
    def test_missing_fixed_field_raises_decode_error(self, missing):
        """Test that a meal without one of the fixed fields raises DecodeError."""
        payload = detail_payload()
        del payload["meals"][0][missing]
        service, _ = make_service(make_response(payload=payload))

        with pytest.raises(DecodeError):
            service.get_detail("52893")

    @pytest.mark.parametrize("payload", [{"meals": ["not an object"]}, {"meals": "nope"}, "nope"])
    def test_unexpected_shape_raises_decode_error(self, payload):
        """Test that malformed lookup bodies raise DecodeError."""
        service, _ = make_service(make_response(payload=payload))

        with pytest.raises(DecodeError):
            service.get_detail("52893")


class TestServiceConfiguration:
    """Tests for defaults taken from configuration."""

    def test_defaults_come_from_config(self, monkeypatch):
        """Test that base URL and timeout fall back to MealDBConfig."""
        monkeypatch.setenv("MEALDB_BASE_URL", "https://example.test/api/")
        monkeypatch.setenv("MEALDB_TIMEOUT_SECONDS", "7.5")

        service = RecipeService(session=Mock())

        assert service.base_url == "https://example.test/api"
        assert service.timeout == 7.5

    def test_creates_session_when_missing(self):
        """Test that a requests.Session is created when none is given."""
        service = RecipeService(base_url=BASE_URL)
        try:
            assert isinstance(service.session, requests.Session)
        finally:
            service.close()
