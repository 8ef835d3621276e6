"""Catalog endpoint handlers.

Endpoints (relative to the module prefix, ``/v1/catalog`` by default):
    GET    /ping                   - Module liveness
    POST   /products               - Create product
    GET    /products/{product_id}  - Get product
    PATCH  /products/{product_id}  - Rename product

Routes are declared in ``routes.CATALOG_ROUTES``; handlers are resolved from
the service registry per request.
"""

from uuid import UUID

from fastapi import Depends, Request, Response
from fastapi.responses import JSONResponse

from src.core.result import Failure, Success
from src.modules.catalog.api.schemas import (
    CreateProductRequest,
    PingResponse,
    ProductCreatedResponse,
    ProductResponse,
    RenameProductRequest,
)
from src.modules.catalog.application.commands import CreateProduct, RenameProduct
from src.modules.catalog.application.handlers import (
    CreateProductHandler,
    GetProductHandler,
    RenameProductHandler,
)
from src.modules.catalog.application.queries import GetProduct
from src.presentation.api.dependencies import provide
from src.presentation.api.errors import ErrorResponseBuilder

MODULE_NAME = "Catalog"


async def ping() -> PingResponse:
    """Module liveness probe."""
    return PingResponse(status="ok", module=MODULE_NAME)


async def create_product(
    request: Request,
    response: Response,
    data: CreateProductRequest,
    handler: CreateProductHandler = Depends(provide(CreateProductHandler)),
) -> ProductCreatedResponse | JSONResponse:
    """Create a product.

    POST /v1/catalog/products → 201 Created

    Returns:
        ProductCreatedResponse with a Location header on success.
        JSONResponse with a validation problem (400) or conflict (409).
    """
    result = await handler.handle(CreateProduct(name=data.name, price=data.price))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=product_id):
            response.headers["Location"] = f"{request.url.path}/{product_id}"
            return ProductCreatedResponse(id=product_id)


async def get_product(
    request: Request,
    product_id: UUID,
    handler: GetProductHandler = Depends(provide(GetProductHandler)),
) -> ProductResponse | JSONResponse:
    """Get a product by id.

    GET /v1/catalog/products/{product_id} → 200 OK, or 404.
    """
    result = await handler.handle(GetProduct(product_id=product_id))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=dto):
            return ProductResponse.from_dto(dto)


async def rename_product(
    request: Request,
    product_id: UUID,
    data: RenameProductRequest,
    handler: RenameProductHandler = Depends(provide(RenameProductHandler)),
) -> ProductResponse | JSONResponse:
    """Rename a product.

    PATCH /v1/catalog/products/{product_id} → 200 OK, 400 or 404.
    """
    result = await handler.handle(RenameProduct(product_id=product_id, name=data.name))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=dto):
            return ProductResponse.from_dto(dto)
