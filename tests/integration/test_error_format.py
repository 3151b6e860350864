"""Integration tests for standardized error responses."""

import json

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/products/12345")
        assert response.status_code == 404
        data = response.json()
        assert data["type"] == "client_error"
        assert isinstance(data["errors"], list)
        assert data["errors"]
        assert "code" in data["errors"][0]
        assert "detail" in data["errors"][0]

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/v1/products", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "parse_error"

    def test_validation_error_names_the_field(self, api_client):
        response = api_client.post(
            "/api/v1/products", {"category": "Toys"}, format="json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        assert [e["attr"] for e in data["errors"]] == ["name"]

    def test_unclassified_error_returns_500_without_body(self, api_client, monkeypatch):
        from modules.products.services import ProductService

        def _boom(self, id):
            raise RuntimeError("secret internals")

        monkeypatch.setattr(ProductService, "get_product", _boom)
        response = api_client.get("/api/v1/products/1")
        assert response.status_code == 500
        assert response.content == b""

    def test_non_object_body_is_a_parse_error(self, api_client):
        response = api_client.post(
            "/api/v1/products", data="[1, 2]", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "parse_error"


class TestOpenApiSchema:
    def test_body_listing_is_marked_deprecated(self, api_client):
        response = api_client.get("/api/schema", {"format": "json"})
        assert response.status_code == 200
        schema = json.loads(response.content)
        assert schema["paths"]["/api/v1/products/list"]["get"]["deprecated"] is True
        assert "put" not in schema["paths"]["/api/v1/products/{id}"]
