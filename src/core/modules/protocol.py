"""Module protocol - the contract every pluggable module satisfies.

A module is a self-contained unit of functionality that registers its own
dependencies and routes into the shared host. Modules are instantiated once
at startup with a zero-argument constructor and live for the process
lifetime.

Structural typing (PEP 544): modules do NOT inherit from this protocol.

Usage:
    class CatalogModule:
        name = "Catalog"

        def register_services(self, services: ServiceRegistry, settings: Settings) -> None:
            services.add_singleton(ProductRepository, ...)

        def map_endpoints(self, router: RouteSurface) -> None:
            router.include_router(catalog_router)
"""

from typing import Protocol, runtime_checkable

from fastapi import APIRouter, FastAPI

from src.core.config import Settings
from src.core.container.services import ServiceRegistry

# Routing surface modules attach their routes to
RouteSurface = FastAPI | APIRouter


@runtime_checkable
class Module(Protocol):
    """Protocol for pluggable host modules.

    Attributes:
        name: Unique, human-readable module name (e.g. "Catalog").
    """

    name: str

    def register_services(self, services: ServiceRegistry, settings: Settings) -> None:
        """Register the module's dependencies into the shared registry.

        Args:
            services: Service-registration context shared by all modules.
            settings: Application configuration.
        """
        ...

    def map_endpoints(self, router: RouteSurface) -> None:
        """Attach the module's routes to the shared routing surface.

        Args:
            router: FastAPI application (or router) receiving the routes.
        """
        ...
