"""Event bus protocol (port) for domain events.

This module defines the EventBusProtocol interface that all event bus
implementations must satisfy. The domain defines the port and the
infrastructure layer provides adapters.

Implementations:
    - InMemoryEventBus: src/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = services.resolve(EventBusProtocol)
    >>>
    >>> async def log_product_created(event: ProductCreated) -> None:
    ...     logger.info("product_created", product_id=str(event.product_id))
    >>>
    >>> event_bus.subscribe(ProductCreated, log_product_created)
    >>> await event_bus.publish(ProductCreated(product_id=uuid7(), name="Widget"))
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[Any], Awaitable[None]]
"""Async event handler: accepts a single event (DomainEvent subclass), returns None."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and is never raised to the publisher.
        2. **Async support**: All handlers are async.
        3. **Type safety**: Handlers registered for specific event types only
           receive events of that type.
        4. **No ordering guarantees** between handlers of the same event.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (exact type match).
            handler: Async function called with the published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.
        """
        ...

    async def publish_all(self, events: tuple[DomainEvent, ...]) -> None:
        """Publish events one after another, preserving their order.

        Args:
            events: Events returned by an entity state transition.
        """
        ...
