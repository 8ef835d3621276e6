"""Catalog event handlers.

Subscriptions:
- ProductCreated → log product_created_event
- ProductRenamed → log product_renamed_event
"""

from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.modules.catalog.domain.events import ProductCreated, ProductRenamed


class CatalogEventHandler:
    """Logs catalog domain events once they have been published.

    Attributes:
        _logger: Logger bound to the catalog module.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_product_created(self, event: ProductCreated) -> None:
        self._logger.info(
            "product_created_event",
            event_id=str(event.event_id),
            product_id=str(event.product_id),
            name=event.name,
            price=str(event.price),
        )

    async def handle_product_renamed(self, event: ProductRenamed) -> None:
        self._logger.info(
            "product_renamed_event",
            event_id=str(event.event_id),
            product_id=str(event.product_id),
            old_name=event.old_name,
            new_name=event.new_name,
        )

    def subscribe(self, event_bus: EventBusProtocol) -> None:
        """Wire every handler method to its event type."""
        event_bus.subscribe(ProductCreated, self.handle_product_created)
        event_bus.subscribe(ProductRenamed, self.handle_product_renamed)
