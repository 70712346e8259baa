"""
Tests for the catalog page controller and its HTTP client.

The controller talks to the real app through FastAPI's TestClient, or to an
httpx.MockTransport when simulating an unreachable API.
"""

from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.main import app
from storefront.ui.client import RecommendationClient, TransportFailure
from storefront.ui.controller import TRANSPORT_ALERT, CatalogController
from storefront.ui.state import CatalogViewState, local_image_path

CLIENT_PATH = "storefront.services.recommendation_service._get_gemini_client"


def _mock_http(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), base_url="http://api.test")


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def controller():
    """Controller wired to the app in-process."""
    return CatalogController(RecommendationClient(TestClient(app)))


@pytest.fixture
def offline_controller():
    """Controller whose API cannot be reached."""
    return CatalogController(RecommendationClient(_mock_http(_unreachable)))


class TestCatalogViewState:
    """Tests for CatalogViewState."""

    def test_defaults(self):
        state = CatalogViewState()
        assert state.selected_category == "All"
        assert state.preference == ""
        assert state.recommendations is None
        assert state.loading is False
        assert state.status == "idle"
        assert state.alert is None

    def test_displays_category_filter(self, catalog):
        state = CatalogViewState(selected_category="Watch")
        assert [p.name for p in state.displayed_products(catalog)] == ["Smartwatch Lite"]

    def test_recommendations_take_precedence(self, catalog):
        state = CatalogViewState(selected_category="Watch", recommendations=[catalog[5]])
        assert state.displayed_products(catalog) == [catalog[5]]

    def test_empty_recommendations_shown_as_empty(self, catalog):
        state = CatalogViewState(recommendations=[])
        assert state.displayed_products(catalog) == []
        assert state.showing_recommendations

    def test_recommendation_summary(self, catalog):
        assert CatalogViewState().recommendation_summary() is None
        state = CatalogViewState(recommendations=catalog[:2])
        assert state.recommendation_summary() == (
            "Found 2 recommended products based on your request."
        )


class TestLocalImagePath:
    """Tests for local_image_path function."""

    def test_existing_image(self, tmp_path, catalog):
        images = tmp_path / "images"
        images.mkdir()
        (images / "Budget Phone X1.jpg").write_bytes(b"\xff\xd8\xff")

        path = local_image_path(catalog[0], str(tmp_path))

        assert path == str(images / "Budget Phone X1.jpg")

    def test_missing_file(self, tmp_path, catalog):
        assert local_image_path(catalog[1], str(tmp_path)) is None

    def test_no_image(self, tmp_path, make_product):
        product = make_product(1).model_copy(update={"image": ""})
        assert local_image_path(product, str(tmp_path)) is None


class TestCatalogController:
    """Tests for CatalogController actions."""

    def test_categories(self, controller):
        assert controller.categories == ["All", "Phone", "Watch", "Laptop", "Audio"]

    def test_select_category(self, controller):
        controller.select_category("Laptop")
        assert [p.id for p in controller.displayed_products()] == [4, 5]

    def test_submit_replaces_display_and_resets_category(self, controller, make_gemini_client):
        controller.select_category("Audio")
        controller.set_preference("a phone with a good camera")

        mock_gemini = make_gemini_client(text='{"recommendedIds": [1, 2]}')
        with patch(CLIENT_PATH, return_value=mock_gemini):
            controller.submit()

        state = controller.state
        assert state.status == "resolved"
        assert state.loading is False
        assert state.selected_category == "All"
        assert [p.name for p in controller.displayed_products()] == ["Budget Phone X1", "Pro Phone Z5"]

    def test_submit_uses_fallback_result(self, controller):
        controller.set_preference("I want a phone under $500 for gaming")
        with patch(CLIENT_PATH, return_value=None):
            controller.submit()

        assert [p.id for p in controller.displayed_products()] == [1, 2, 4]

    def test_blank_preference_ignored(self, controller, make_gemini_client):
        controller.set_preference("   ")
        mock_gemini = make_gemini_client(text='{"recommendedIds": [1]}')
        with patch(CLIENT_PATH, return_value=mock_gemini):
            controller.submit()

        assert controller.state.status == "idle"
        assert controller.state.recommendations is None
        mock_gemini.aio.models.generate_content.assert_not_called()

    def test_transport_failure_keeps_prior_state(self, offline_controller, catalog):
        state = offline_controller.state
        state.recommendations = [catalog[2]]
        offline_controller.set_preference("laptop")

        offline_controller.submit()

        assert state.status == "failed"
        assert state.alert == TRANSPORT_ALERT
        assert state.loading is False
        assert state.recommendations == [catalog[2]]

    def test_malformed_response_raises_alert(self, catalog):
        http = _mock_http(lambda request: httpx.Response(200, json={"recommendations": [{"id": 1}]}))
        controller = CatalogController(RecommendationClient(http))
        controller.state.recommendations = [catalog[5]]
        controller.set_preference("phone")

        controller.submit()

        state = controller.state
        assert state.status == "failed"
        assert state.alert == TRANSPORT_ALERT
        assert state.loading is False
        assert state.recommendations == [catalog[5]]

    def test_acknowledge_returns_to_idle(self, offline_controller):
        offline_controller.set_preference("laptop")
        offline_controller.submit()
        offline_controller.acknowledge()

        assert offline_controller.state.status == "idle"
        assert offline_controller.state.alert is None

    def test_clear(self, controller):
        controller.set_preference("wireless")
        with patch(CLIENT_PATH, return_value=None):
            controller.submit()
        assert controller.state.recommendations is not None

        controller.clear()

        state = controller.state
        assert state.recommendations is None
        assert state.preference == ""
        assert state.selected_category == "All"
        assert state.status == "idle"
        assert len(controller.displayed_products()) == 6

    def test_missing_recommendations_field_keeps_display(self, catalog):
        http = _mock_http(lambda request: httpx.Response(200, json={}))
        controller = CatalogController(RecommendationClient(http))
        controller.select_category("Phone")
        controller.set_preference("phone")

        controller.submit()

        assert controller.state.status == "resolved"
        assert controller.state.recommendations is None
        assert controller.state.selected_category == "Phone"


class TestRecommendationClient:
    """Tests for RecommendationClient."""

    def test_sends_preferences_and_catalog(self, catalog):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = request.read()
            return httpx.Response(200, json={"recommendations": [catalog[0].model_dump(mode="json")]})

        client = RecommendationClient(_mock_http(handler))
        result = client.recommend("phone", catalog)

        assert seen["path"] == "/api/recommend"
        assert b'"preferences":"phone"' in seen["body"].replace(b" ", b"")
        assert result == [catalog[0]]

    def test_connection_error(self, catalog):
        client = RecommendationClient(_mock_http(_unreachable))
        with pytest.raises(TransportFailure):
            client.recommend("phone", catalog)

    @pytest.mark.parametrize("status_code", [400, 500, 503])
    def test_error_status(self, catalog, status_code):
        http = _mock_http(lambda request: httpx.Response(status_code, json={"error": "nope"}))
        with pytest.raises(TransportFailure):
            RecommendationClient(http).recommend("phone", catalog)

    @pytest.mark.parametrize("body", [
        {"recommendations": [{"id": 1}]},
        {"recommendations": [{"id": 1, "name": "X", "category": "Y", "price": -5}]},
        {"recommendations": "Budget Phone X1"},
        {"recommendations": {"id": 1}},
    ])
    def test_malformed_recommendations(self, catalog, body):
        http = _mock_http(lambda request: httpx.Response(200, json=body))
        with pytest.raises(TransportFailure):
            RecommendationClient(http).recommend("phone", catalog)

    def test_non_json_body(self, catalog):
        http = _mock_http(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(TransportFailure):
            RecommendationClient(http).recommend("phone", catalog)
