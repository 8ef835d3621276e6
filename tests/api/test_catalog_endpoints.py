"""API tests for the catalog module endpoints.

Tests cover:
- GET  /v1/catalog/ping
- POST /v1/catalog/products (201 + Location, 400 validation problems, 422)
- GET  /v1/catalog/products/{id} (200, 404, 422 for malformed ids)
- PATCH /v1/catalog/products/{id} (200, 400, 404)
"""

from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.presentation.api.errors import VALIDATION_PROBLEM_TITLE

PRODUCTS = "/v1/catalog/products"


def _create(client, name="Widget", price="9.99"):
    return client.post(PRODUCTS, json={"name": name, "price": price})


def _fields(response) -> list[str]:
    return [error["field"] for error in response.json()["errors"]]


@pytest.mark.api
class TestPing:
    """Test the module liveness route."""

    def test_ping(self, client):
        response = client.get("/v1/catalog/ping")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "module": "Catalog"}


@pytest.mark.api
class TestCreateProduct:
    """Test POST /v1/catalog/products."""

    def test_create_returns_id_and_location(self, client):
        response = _create(client)

        assert response.status_code == 201
        product_id = UUID(response.json()["id"])
        assert response.headers["location"] == f"{PRODUCTS}/{product_id}"

    def test_created_product_can_be_fetched(self, client):
        product_id = _create(client, name="  Widget ", price="9.99").json()["id"]

        response = client.get(f"{PRODUCTS}/{product_id}")

        assert response.status_code == 200
        assert response.json() == {"id": product_id, "name": "Widget", "price": "9.99"}

    def test_numeric_price_accepted(self, client):
        response = client.post(PRODUCTS, json={"name": "Widget", "price": 5})

        assert response.status_code == 201

    def test_each_create_returns_new_id(self, client):
        first = _create(client).json()["id"]
        second = _create(client).json()["id"]

        assert first != second

    def test_empty_name_is_validation_problem(self, client):
        response = _create(client, name="")

        assert response.status_code == 400
        body = response.json()
        assert body["title"] == VALIDATION_PROBLEM_TITLE
        assert body["status"] == 400
        assert body["errors"] == {"validation": ["name cannot be empty"]}
        assert body["instance"] == PRODUCTS
        assert body["type"] == "http://testserver/errors/validation"
        assert body["trace_id"] == response.headers["x-trace-id"]

    def test_negative_price_is_validation_problem(self, client):
        response = _create(client, price="-1")

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "product.price.negative": ["price must be greater than or equal to 0"]
        }
        assert response.json()["type"] == "http://testserver/errors/product.price.negative"

    def test_several_failures_reported_together(self, client):
        response = _create(client, name=" ", price="-1")

        assert response.status_code == 400
        message = "name cannot be empty; price must be greater than or equal to 0"
        assert response.json()["detail"] == message
        assert response.json()["errors"] == {"validation": [message]}

    def test_wrong_type_is_request_validation_problem(self, client):
        response = client.post(PRODUCTS, json={"name": "Widget", "price": "cheap"})

        assert response.status_code == 422
        body = response.json()
        assert body["title"] == "Validation Failed"
        assert body["errors"][0]["field"] == "price"

    def test_missing_field_is_request_validation_problem(self, client):
        response = client.post(PRODUCTS, json={"price": "1"})

        assert response.status_code == 422
        assert _fields(response) == ["name"]


@pytest.mark.api
class TestGetProduct:
    """Test GET /v1/catalog/products/{id}."""

    def test_unknown_product_is_404_problem(self, client):
        product_id = uuid7()

        response = client.get(f"{PRODUCTS}/{product_id}")

        assert response.status_code == 404
        body = response.json()
        assert body["title"] == "Resource Not Found"
        assert body["status"] == 404
        assert body["type"] == "http://testserver/errors/product.not_found"
        assert str(product_id) in body["detail"]

    def test_malformed_id_is_422(self, client):
        response = client.get(f"{PRODUCTS}/not-a-uuid")

        assert response.status_code == 422
        assert _fields(response) == ["product_id"]


@pytest.mark.api
class TestRenameProduct:
    """Test PATCH /v1/catalog/products/{id}."""

    def test_rename_returns_updated_product(self, client):
        product_id = _create(client).json()["id"]

        response = client.patch(f"{PRODUCTS}/{product_id}", json={"name": "Gadget"})

        assert response.status_code == 200
        assert response.json()["name"] == "Gadget"
        assert client.get(f"{PRODUCTS}/{product_id}").json()["name"] == "Gadget"

    def test_rename_revalidates(self, client):
        product_id = _create(client).json()["id"]

        response = client.patch(f"{PRODUCTS}/{product_id}", json={"name": "   "})

        assert response.status_code == 400
        assert client.get(f"{PRODUCTS}/{product_id}").json()["name"] == "Widget"

    def test_rename_unknown_product_is_404(self, client):
        response = client.patch(f"{PRODUCTS}/{uuid7()}", json={"name": "Gadget"})

        assert response.status_code == 404


@pytest.mark.api
class TestModuleIsolation:
    """Test every app instance gets its own service registry."""

    def test_products_do_not_leak_between_apps(self, test_settings):
        from fastapi.testclient import TestClient

        from src.main import create_app

        with TestClient(create_app(test_settings)) as first:
            product_id = _create(first).json()["id"]
        with TestClient(create_app(test_settings)) as second:
            assert second.get(f"{PRODUCTS}/{product_id}").status_code == 404
