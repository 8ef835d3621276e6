"""In-memory event bus implementation.

This module implements the EventBusProtocol using an in-memory dictionary-based
registry. Suitable for a single-process modular monolith: every module
publishes to and subscribes on the same bus instance.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=build_logger(settings))
    >>> bus.subscribe(ProductCreated, log_product_created)
    >>> await bus.publish(ProductCreated(product_id=uuid7(), name="Widget"))
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe. Subscriptions are made during single-threaded
        startup; publishing happens on the event loop.

    Attributes:
        _handlers: Event class → list of async handlers.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches
                (no inheritance matching).
            handler: Async function to call when event is published.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers subscribed to ``event_type``."""
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged but NOT propagated to the publisher.
        If no handlers are registered, this is a no-op.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for handler, result in zip(handlers, results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__name__", repr(handler)),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )

    async def publish_all(self, events: tuple[DomainEvent, ...]) -> None:
        """Publish events sequentially, in the order they were raised."""
        for event in events:
            await self.publish(event)
