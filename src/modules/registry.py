"""Module registry - the explicit, ordered list of modules the host loads.

Adding a module means adding its class here; load order is list order.
"""

from src.modules.catalog import CatalogModule

MODULE_REGISTRY: list[type] = [
    CatalogModule,
]
