"""Catalog request and response schemas.

Request schemas only enforce JSON types; business rules (empty name, negative
price) are checked by the command validators and the domain so they surface
as 400 validation problems rather than 422 schema errors.
"""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.modules.catalog.application.dtos import ProductResult


# =============================================================================
# Request Schemas
# =============================================================================


class CreateProductRequest(BaseModel):
    """Create product request."""

    name: str = Field(..., description="Product name", examples=["Widget"])
    price: Decimal = Field(..., description="Product price", examples=["9.99"])


class RenameProductRequest(BaseModel):
    """Rename product request."""

    name: str = Field(..., description="New product name", examples=["Gadget"])


# =============================================================================
# Response Schemas
# =============================================================================


class PingResponse(BaseModel):
    """Module liveness response."""

    status: str = Field(..., examples=["ok"])
    module: str = Field(..., examples=["Catalog"])


class ProductCreatedResponse(BaseModel):
    """Identifier of a newly created product."""

    id: UUID = Field(..., description="Product unique identifier")


class ProductResponse(BaseModel):
    """Single product response.

    Attributes:
        id: Product unique identifier.
        name: Display name.
        price: Price (serialized as a decimal string).
    """

    id: UUID = Field(..., description="Product unique identifier")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Product price", examples=["9.99"])

    @classmethod
    def from_dto(cls, dto: ProductResult) -> "ProductResponse":
        """Convert application DTO to response schema."""
        return cls(id=dto.id, name=dto.name, price=dto.price)
