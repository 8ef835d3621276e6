"""Catalog domain - Product entity, events, error codes and repository port."""

from src.modules.catalog.domain.errors import ProductErrorCode
from src.modules.catalog.domain.events import ProductCreated, ProductRenamed
from src.modules.catalog.domain.product import NAME_MAX_LENGTH, Product
from src.modules.catalog.domain.protocols import ProductRepository

__all__ = [
    "NAME_MAX_LENGTH",
    "Product",
    "ProductCreated",
    "ProductErrorCode",
    "ProductRenamed",
    "ProductRepository",
]
