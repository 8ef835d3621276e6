"""Unit tests for ErrorResponseBuilder.

Tests cover:
- Status mapping (NotFoundError → 404, ConflictError → 409, others → 400)
- 400 responses use the validation problem shape (code → messages)
- Problem type URI built from the app's api_base_url
"""

import json
from unittest.mock import MagicMock

import pytest

from src.core.config import Settings
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.modules.catalog.domain.errors import ProductErrorCode
from src.presentation.api.errors import VALIDATION_PROBLEM_TITLE, ErrorResponseBuilder


@pytest.fixture
def request_stub() -> MagicMock:
    request = MagicMock()
    request.url.path = "/v1/catalog/products"
    request.app.state.settings = Settings(api_base_url="https://api.example.com")
    return request


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestStatusMapping:
    """Test DomainError → HTTP status mapping."""

    @pytest.mark.parametrize(
        ("error", "status"),
        [
            (
                NotFoundError(
                    code=ProductErrorCode.NOT_FOUND,
                    message="missing",
                    resource_type="Product",
                    resource_id="1",
                ),
                404,
            ),
            (
                ConflictError(
                    code=ProductErrorCode.ALREADY_EXISTS,
                    message="exists",
                    resource_type="Product",
                ),
                409,
            ),
            (ValidationError(code=ErrorCode.VALIDATION, message="bad"), 400),
            (DomainError(code=ProductErrorCode.PRICE_NEGATIVE, message="neg"), 400),
        ],
    )
    def test_get_status_code(self, error, status):
        assert ErrorResponseBuilder.get_status_code(error) == status


@pytest.mark.unit
class TestFromDomainError:
    """Test response bodies."""

    def test_validation_problem_body(self, request_stub):
        error = ValidationError(code=ErrorCode.VALIDATION, message="name cannot be empty")

        response = ErrorResponseBuilder.from_domain_error(error, request_stub)

        assert response.status_code == 400
        body = _body(response)
        assert body["type"] == "https://api.example.com/errors/validation"
        assert body["title"] == VALIDATION_PROBLEM_TITLE
        assert body["status"] == 400
        assert body["detail"] == "name cannot be empty"
        assert body["instance"] == "/v1/catalog/products"
        assert body["errors"] == {"validation": ["name cannot be empty"]}

    def test_domain_rule_uses_its_code(self, request_stub):
        error = DomainError(code=ProductErrorCode.PRICE_NEGATIVE, message="Price must be >= 0")

        body = _body(ErrorResponseBuilder.from_domain_error(error, request_stub))

        assert body["errors"] == {"product.price.negative": ["Price must be >= 0"]}

    def test_not_found_problem_body(self, request_stub):
        error = NotFoundError(
            code=ProductErrorCode.NOT_FOUND,
            message="Product 1 not found",
            resource_type="Product",
            resource_id="1",
        )

        response = ErrorResponseBuilder.from_domain_error(error, request_stub)

        assert response.status_code == 404
        body = _body(response)
        assert body["title"] == "Resource Not Found"
        assert body["type"] == "https://api.example.com/errors/product.not_found"
        assert "errors" not in body
