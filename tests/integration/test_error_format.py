"""Integration tests for the ``{"message": ...}`` error envelope."""

import pytest

pytestmark = pytest.mark.integration


class TestErrorEnvelope:
    def test_unknown_route_returns_message(self, client):
        response = client.get("/no/such/route")
        assert response.status_code == 404
        assert response.json() == {"message": "not found"}

    def test_unsupported_method_returns_message(self, api_client):
        response = api_client.patch("/api/v1/customers", {}, format="json")
        assert response.status_code == 405
        assert set(response.json()) == {"message"}

    def test_parse_error_returns_message_only(self, api_client):
        response = api_client.post(
            "/api/v1/customers", data="{", content_type="application/json"
        )
        assert response.status_code == 422
        assert set(response.json()) == {"message"}

    def test_unsupported_media_type_returns_message(self, api_client):
        response = api_client.post(
            "/api/v1/customers", data="a=1", content_type="application/x-www-form-urlencoded"
        )
        assert response.status_code == 415
        assert set(response.json()) == {"message"}

    def test_success_responses_use_data_envelope(self, api_client):
        response = api_client.get("/api/v1/customers")
        assert response.status_code == 200
        assert set(response.json()) == {"data"}

    def test_api_prefix_has_no_root_view(self, api_client):
        response = api_client.get("/api/v1/")
        assert response.status_code == 404
        assert response.json() == {"message": "not found"}
