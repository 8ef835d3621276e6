"""In-memory Product repository.

Implements the ProductRepository port with a dict keyed by product id.

Implementation notes:
    - Stores deep copies on write and returns deep copies on read, so a
      product mutated without being stored again never leaks into the store
    - An asyncio.Lock serializes writes; the repository is registered as a
      singleton and shared by every request handled in the process
"""

import asyncio
import copy
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.modules.catalog.domain.errors import ProductErrorCode
from src.modules.catalog.domain.product import Product


class InMemoryProductRepository:
    """Process-local Product store."""

    def __init__(self) -> None:
        self._products: dict[UUID, Product] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._products)

    async def add(self, product: Product) -> Result[None, DomainError]:
        async with self._lock:
            if product.id in self._products:
                return Failure(
                    error=ConflictError(
                        code=ProductErrorCode.ALREADY_EXISTS,
                        message=f"Product {product.id} already exists",
                        resource_type="Product",
                    )
                )
            self._products[product.id] = copy.deepcopy(product)
        return Success(value=None)

    async def update(self, product: Product) -> Result[None, DomainError]:
        async with self._lock:
            if product.id not in self._products:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.RESOURCE_NOT_FOUND,
                        message=f"Product {product.id} not found",
                        resource_type="Product",
                        resource_id=str(product.id),
                    )
                )
            self._products[product.id] = copy.deepcopy(product)
        return Success(value=None)

    async def find_by_id(self, product_id: UUID) -> Product | None:
        product = self._products.get(product_id)
        if product is None:
            return None
        return copy.deepcopy(product)
