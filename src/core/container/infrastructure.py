"""Infrastructure dependency factories.

Application-scoped singletons for shared infrastructure services:
- Logging (structlog console adapter)
- Event bus (in-memory)

``register_infrastructure`` publishes these singletons into a ServiceRegistry
so modules can resolve them by protocol during their own registration.
"""

from typing import TYPE_CHECKING

from src.core.config import Settings
from src.core.container.services import ServiceRegistry
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol

if TYPE_CHECKING:
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus


def build_logger(config: Settings) -> LoggerProtocol:
    """Build a logger for ``config``.

    Adapter selection is centralized here (composition root):
    - testing/ci: ConsoleAdapter (JSON)
    - development/production: ConsoleAdapter (human-readable)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = config.is_testing or config.is_ci
    return ConsoleAdapter(use_json=use_json, level=config.log_level_number).bind(
        app=config.app_name,
        environment=config.environment.value,
    )


def build_event_bus(logger: LoggerProtocol) -> "InMemoryEventBus":
    """Build an in-memory event bus logging through ``logger``."""
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    return InMemoryEventBus(logger=logger)


def register_infrastructure(
    services: ServiceRegistry,
    logger: LoggerProtocol,
) -> None:
    """Register shared infrastructure into ``services``.

    Each host gets its own event bus, so module subscriptions never leak
    between application instances.

    Args:
        services: Registry being populated during startup.
        logger: Logger shared by the host and all modules.
    """
    services.add_instance(LoggerProtocol, logger)
    services.add_singleton(
        EventBusProtocol,
        lambda registry: build_event_bus(registry.resolve(LoggerProtocol)),
    )
