"""Product repository protocol (port).

The persistence store is an external collaborator: the catalog only needs
something that accepts a product and reports success or failure. The
in-memory adapter lives in ``src.modules.catalog.infrastructure``.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.modules.catalog.domain.product import Product


class ProductRepository(Protocol):
    """Persistence port for Product entities."""

    async def add(self, product: Product) -> Result[None, DomainError]:
        """Store a new product.

        Returns:
            Success(None), or Failure(ConflictError) if the id is taken.
        """
        ...

    async def update(self, product: Product) -> Result[None, DomainError]:
        """Store changes to an existing product.

        Returns:
            Success(None), or Failure(NotFoundError) if the product is unknown.
        """
        ...

    async def find_by_id(self, product_id: UUID) -> Product | None:
        """Find a product by id.

        Returns:
            The product if found, None otherwise.
        """
        ...
