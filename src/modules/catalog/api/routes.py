"""Catalog route registry.

CATALOG_ROUTES is the authoritative list of catalog endpoints. The module's
``map_endpoints`` turns it into FastAPI routes under the catalog prefix.
"""

from fastapi import status

from src.modules.catalog.api.endpoints import (
    create_product,
    get_product,
    ping,
    rename_product,
)
from src.modules.catalog.api.schemas import (
    PingResponse,
    ProductCreatedResponse,
    ProductResponse,
)
from src.presentation.api.errors import ProblemDetails, ValidationProblemDetails
from src.presentation.api.routes import ErrorSpec, HTTPMethod, RouteMetadata

CATALOG_TAGS = ["Catalog"]

CATALOG_ROUTES: list[RouteMetadata] = [
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/ping",
        handler=ping,
        tags=CATALOG_TAGS,
        summary="Ping catalog",
        description="Report that the catalog module is loaded and serving.",
        operation_id="catalog_ping",
        response_model=PingResponse,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/products",
        handler=create_product,
        tags=CATALOG_TAGS,
        summary="Create product",
        description="Validate and create a product. Returns its id.",
        operation_id="create_product",
        response_model=ProductCreatedResponse,
        status_code=status.HTTP_201_CREATED,
        errors=[
            ErrorSpec(status=400, description="Validation error", model=ValidationProblemDetails),
            ErrorSpec(status=409, description="Product already exists", model=ProblemDetails),
        ],
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/products/{product_id}",
        handler=get_product,
        tags=CATALOG_TAGS,
        summary="Get product",
        operation_id="get_product",
        response_model=ProductResponse,
        errors=[
            ErrorSpec(status=404, description="Product not found", model=ProblemDetails),
        ],
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/products/{product_id}",
        handler=rename_product,
        tags=CATALOG_TAGS,
        summary="Rename product",
        operation_id="rename_product",
        response_model=ProductResponse,
        errors=[
            ErrorSpec(status=400, description="Validation error", model=ValidationProblemDetails),
            ErrorSpec(status=404, description="Product not found", model=ProblemDetails),
        ],
    ),
]
