"""
Main FastAPI application entry point (the host).

``create_app`` is the composition root: it builds the shared infrastructure,
loads every module of the explicit module registry, then mounts the modules'
routes. Any startup failure (ModuleLoadError, ServiceRegistrationError) is
raised out of ``create_app`` and aborts the process.

Startup order:
    1. Logger (structlog) and service registry
    2. Shared infrastructure (logger, event bus) registered into the registry
    3. Modules instantiated and registered, in MODULE_REGISTRY order
    4. Middleware and global exception handlers
    5. Host routes (/, /health) and module routes
"""

from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import Settings, get_settings
from src.core.container import ServiceRegistry, build_logger, register_infrastructure
from src.core.modules import load_modules, map_module_endpoints
from src.modules import MODULE_REGISTRY
from src.presentation.api.errors import register_exception_handlers
from src.presentation.api.middleware import TraceMiddleware


def create_app(
    settings: Settings | None = None,
    module_types: Sequence[type] = MODULE_REGISTRY,
) -> FastAPI:
    """Build the host application.

    Args:
        settings: Application configuration (defaults to the cached settings).
        module_types: Ordered module classes to load.

    Returns:
        FastAPI: Fully wired application.

    Raises:
        ModuleLoadError: If a module cannot be instantiated or registered.
        ServiceRegistrationError: If a module registration conflicts or
            resolves a missing service.
    """
    config = settings or get_settings()
    logger = build_logger(config)

    services = ServiceRegistry()
    register_infrastructure(services, logger)
    modules = load_modules(module_types, services, config, logger=logger)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("application_started", modules=[m.name for m in modules])
        yield
        logger.info("application_stopped")

    app = FastAPI(
        title=config.app_name,
        description="Modular monolith host",
        version=config.app_version,
        docs_url="/docs" if config.is_development else None,
        redoc_url="/redoc" if config.is_development else None,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.services = services
    app.state.modules = modules

    # Wire trace middleware (request correlation)
    app.add_middleware(TraceMiddleware)

    # Register global exception handlers (RFC 7807 error responses)
    register_exception_handlers(app, logger)

    @app.get("/", tags=["System"])
    async def root() -> dict[str, str]:
        """
        Root endpoint - basic application info.

        Returns:
            dict: Application name, status and version.
        """
        return {
            "message": config.app_name,
            "status": "operational",
            "version": config.app_version,
        }

    @app.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        """Health check endpoint for monitoring and load balancers."""
        return {"status": "healthy"}

    map_module_endpoints(app, modules, logger=logger)
    return app


app = create_app()
