"""Route metadata types for module route registries.

Each module declares its endpoints as a list of RouteMetadata entries (its
route registry). ``register_routes_from_registry`` turns those declarations
into FastAPI routes on the module's router.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, docs)
    HTTPMethod: HTTP method enum
    ErrorSpec: Error response specification for OpenAPI

Usage:
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/products",
        handler=create_product,
        tags=["Catalog"],
        summary="Create product",
        status_code=201,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404)
        description: Human-readable error description
        model: Optional Pydantic model for the response body

    Examples:
        >>> ErrorSpec(status=400, description="Validation error")
        >>> ErrorSpec(status=404, description="Product not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: URL path relative to the module prefix (e.g. "/products/{product_id}")
        handler: Async function that implements the endpoint

    OpenAPI documentation:
        tags, summary, description, operation_id

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (e.g., 200, 201)
        errors: Possible error responses for OpenAPI
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # OpenAPI documentation
    tags: Sequence[str]
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Deprecation
    deprecated: bool = False
