"""Container module - Centralized dependency wiring.

Exports the service registry (the registration context modules write into)
and the shared infrastructure factories.

    from src.core.container import ServiceRegistry, build_logger
"""

from src.core.container.infrastructure import (
    build_event_bus,
    build_logger,
    register_infrastructure,
)
from src.core.container.services import (
    ServiceAlreadyRegisteredError,
    ServiceLifetime,
    ServiceNotRegisteredError,
    ServiceRegistrationError,
    ServiceRegistry,
)

__all__ = [
    "ServiceAlreadyRegisteredError",
    "ServiceLifetime",
    "ServiceNotRegisteredError",
    "ServiceRegistrationError",
    "ServiceRegistry",
    "build_event_bus",
    "build_logger",
    "register_infrastructure",
]
