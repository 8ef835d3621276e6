"""Catalog DTOs (Data Transfer Objects).

Result dataclasses carried from handlers back to the presentation layer, so
the API never holds a mutable Product entity.

DTOs:
    - ProductResult: Result from GetProduct and RenameProduct
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.modules.catalog.domain.product import Product


@dataclass(frozen=True, kw_only=True)
class ProductResult:
    """Single product result.

    Attributes:
        id: Product identifier.
        name: Display name.
        price: Price.
    """

    id: UUID
    name: str
    price: Decimal

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResult":
        return cls(id=product.id, name=product.name, price=product.price)
