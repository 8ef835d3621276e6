"""GetProduct query handler.

Queries are side-effect free: no events, no writes. Returns a DTO rather
than the domain entity.
"""

from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.modules.catalog.application.dtos import ProductResult
from src.modules.catalog.application.queries import GetProduct
from src.modules.catalog.domain.errors import ProductErrorCode
from src.modules.catalog.domain.protocols import ProductRepository


class GetProductHandler:
    """Handler for the GetProduct query."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def handle(self, query: GetProduct) -> Result[ProductResult, DomainError]:
        """Return the product, or Failure(NotFoundError) if it does not exist."""
        product = await self._repository.find_by_id(query.product_id)
        if product is None:
            return Failure(
                error=NotFoundError(
                    code=ProductErrorCode.NOT_FOUND,
                    message=f"Product {query.product_id} not found",
                    resource_type="Product",
                    resource_id=str(query.product_id),
                )
            )
        return Success(value=ProductResult.from_entity(product))
