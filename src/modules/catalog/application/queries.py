"""Catalog queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetProduct:
    """Fetch a single product by id.

    Attributes:
        product_id: Product identifier.
    """

    product_id: UUID
