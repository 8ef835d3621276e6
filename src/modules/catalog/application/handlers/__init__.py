"""Catalog command and query handlers."""

from src.modules.catalog.application.handlers.create_product_handler import (
    CreateProductHandler,
)
from src.modules.catalog.application.handlers.get_product_handler import (
    GetProductHandler,
)
from src.modules.catalog.application.handlers.rename_product_handler import (
    RenameProductHandler,
)

__all__ = [
    "CreateProductHandler",
    "GetProductHandler",
    "RenameProductHandler",
]
