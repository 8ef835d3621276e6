"""Product domain events.

Raised by Product state transitions and returned to the caller inside an
EntityChange; handlers publish them after the product has been stored.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class ProductCreated(DomainEvent):
    """A product was created through the validating factory."""

    product_id: UUID
    name: str
    price: Decimal


@dataclass(frozen=True, kw_only=True, slots=True)
class ProductRenamed(DomainEvent):
    """A product's name changed."""

    product_id: UUID
    old_name: str
    new_name: str
