"""Catalog commands (CQRS write operations).

Commands represent caller intent to change catalog state. They are
immutable data containers; handlers validate and execute them and return
Result types.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Create a new product.

    Attributes:
        name: Display name (trimmed by the domain).
        price: Non-negative price.

    Example:
        >>> command = CreateProduct(name="Widget", price=Decimal("9.99"))
        >>> result = await handler.handle(command)
    """

    name: str
    price: Decimal


@dataclass(frozen=True, kw_only=True)
class RenameProduct:
    """Rename an existing product.

    Attributes:
        product_id: Product to rename.
        name: New display name.
    """

    product_id: UUID
    name: str
