"""Catalog infrastructure adapters."""

from src.modules.catalog.infrastructure.event_handlers import CatalogEventHandler
from src.modules.catalog.infrastructure.in_memory_product_repository import (
    InMemoryProductRepository,
)

__all__ = ["CatalogEventHandler", "InMemoryProductRepository"]
