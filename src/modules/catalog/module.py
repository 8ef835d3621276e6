"""Catalog module - product catalog feature slice.

Registers the product repository, command/query handlers and event
subscriptions into the host's service registry, and mounts the catalog
routes under ``settings.catalog_route_prefix``.
"""

from fastapi import APIRouter

from src.core.config import Settings
from src.core.container.services import ServiceRegistry
from src.core.modules.protocol import RouteSurface
from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.modules.catalog.api.routes import CATALOG_ROUTES
from src.modules.catalog.application.handlers import (
    CreateProductHandler,
    GetProductHandler,
    RenameProductHandler,
)
from src.modules.catalog.domain.protocols import ProductRepository
from src.modules.catalog.infrastructure import (
    CatalogEventHandler,
    InMemoryProductRepository,
)
from src.presentation.api.routes import register_routes_from_registry


class CatalogModule:
    """Product catalog.

    Service registrations:
        ProductRepository     singleton (in-memory store)
        CreateProductHandler  transient
        RenameProductHandler  transient
        GetProductHandler     transient
    """

    name = "Catalog"

    def __init__(self) -> None:
        self._route_prefix = Settings.model_fields["catalog_route_prefix"].default

    @property
    def route_prefix(self) -> str:
        return self._route_prefix

    def register_services(self, services: ServiceRegistry, settings: Settings) -> None:
        self._route_prefix = settings.catalog_route_prefix

        services.add_singleton(ProductRepository, lambda _: InMemoryProductRepository())
        services.add_transient(
            CreateProductHandler,
            lambda s: CreateProductHandler(
                repository=s.resolve(ProductRepository),
                event_bus=s.resolve(EventBusProtocol),
                logger=self._logger(s),
            ),
        )
        services.add_transient(
            RenameProductHandler,
            lambda s: RenameProductHandler(
                repository=s.resolve(ProductRepository),
                event_bus=s.resolve(EventBusProtocol),
                logger=self._logger(s),
            ),
        )
        services.add_transient(
            GetProductHandler,
            lambda s: GetProductHandler(repository=s.resolve(ProductRepository)),
        )

        CatalogEventHandler(logger=self._logger(services)).subscribe(
            services.resolve(EventBusProtocol)
        )

    def map_endpoints(self, router: RouteSurface) -> None:
        catalog_router = APIRouter(prefix=self._route_prefix)
        register_routes_from_registry(catalog_router, CATALOG_ROUTES)
        router.include_router(catalog_router)

    def _logger(self, services: ServiceRegistry) -> LoggerProtocol:
        return services.resolve(LoggerProtocol).bind(module=self.name)
