"""Catalog module: products with create, get and rename."""

from src.modules.catalog.module import CatalogModule

__all__ = ["CatalogModule"]
