"""Product domain entity.

Pure business logic, no framework dependencies.

Business Rules:
    - Name is required, trimmed, and at most NAME_MAX_LENGTH characters
    - Price is a non-negative Decimal
    - Identity is a UUIDv7 minted by the factory and never reassigned

Products are created only through ``Product.create``; the plain constructor
is reserved for repositories rehydrating trusted, already-validated state.
Every rule violation is returned as a ``Failure``, never raised.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from uuid_extensions import uuid7

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.core.validation import is_finite_number
from src.domain.entities.entity import Entity, EntityChange
from src.modules.catalog.domain.errors import ProductErrorCode
from src.modules.catalog.domain.events import ProductCreated, ProductRenamed

NAME_MAX_LENGTH = 200


def _check_name(name: str | None) -> Result[str, DomainError]:
    """Return the trimmed name, or the rule it breaks."""
    if name is None or not name.strip():
        return Failure(
            error=DomainError(code=ProductErrorCode.NAME_EMPTY, message="Name is required")
        )
    trimmed = name.strip()
    if len(trimmed) > NAME_MAX_LENGTH:
        return Failure(
            error=DomainError(
                code=ProductErrorCode.NAME_TOO_LONG,
                message=f"Name must be at most {NAME_MAX_LENGTH} characters",
            )
        )
    return Success(value=trimmed)


@dataclass(eq=False)
class Product(Entity[UUID]):
    """Product sold through the catalog.

    Attributes:
        id: Unique product identifier (UUIDv7).
        name: Trimmed, non-empty display name.
        price: Non-negative price.

    Example:
        >>> match Product.create("  Widget ", Decimal("9.99")):
        ...     case Success(value=change):
        ...         change.entity.name
        'Widget'
    """

    name: str
    price: Decimal

    @classmethod
    def create(
        cls, name: str, price: Decimal
    ) -> Result[EntityChange["Product"], DomainError]:
        """Validating factory.

        Re-checks the domain invariants on its own, whatever validation the
        caller already performed.

        Args:
            name: Raw product name (trimmed here).
            price: Product price.

        Returns:
            Success(EntityChange) carrying the new product and a
            ProductCreated event, or Failure with a ``product.*`` code.
        """
        name_result = _check_name(name)
        if isinstance(name_result, Failure):
            return name_result

        if price is None or not is_finite_number(price):
            return Failure(
                error=DomainError(
                    code=ProductErrorCode.PRICE_INVALID,
                    message="Price must be a finite number",
                )
            )

        if price < 0:
            return Failure(
                error=DomainError(
                    code=ProductErrorCode.PRICE_NEGATIVE,
                    message="Price must be >= 0",
                )
            )

        product = cls(id=uuid7(), name=name_result.value, price=price)
        event = ProductCreated(product_id=product.id, name=product.name, price=product.price)
        return Success(value=EntityChange(entity=product, events=(event,)))

    def rename(self, name: str) -> Result[EntityChange["Product"], DomainError]:
        """Change the product name.

        The product is left untouched when the new name breaks a rule.

        Returns:
            Success(EntityChange) with a ProductRenamed event, or Failure.
        """
        name_result = _check_name(name)
        if isinstance(name_result, Failure):
            return name_result

        old_name = self.name
        self.name = name_result.value
        event = ProductRenamed(product_id=self.id, old_name=old_name, new_name=self.name)
        return Success(value=EntityChange(entity=self, events=(event,)))
