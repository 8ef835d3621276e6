"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Multiple handlers for same event
- Handler failure doesn't break others (fail-open)
- No handlers registered (no-op)
- Exact type matching (no inheritance matching)
- publish_all keeps event order
- Error logging for handler failures

Architecture:
- Unit tests with mocked logger
- Tests fail-open behavior (critical requirement)
"""

from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.domain.events.base_event import DomainEvent
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from src.modules.catalog.domain.events import ProductCreated, ProductRenamed


def _created() -> ProductCreated:
    return ProductCreated(product_id=uuid4(), name="Widget", price=Decimal("9.99"))


def _renamed() -> ProductRenamed:
    return ProductRenamed(product_id=uuid4(), old_name="Widget", new_name="Gadget")


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    @pytest.mark.asyncio
    async def test_subscribe_and_publish_single_handler(self):
        """Test subscribing single handler and publishing event."""
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event = _created()

        # Act
        event_bus.subscribe(ProductCreated, handler)
        await event_bus.publish(event)

        # Assert
        assert received == [event]
        assert event_bus.handler_count(ProductCreated) == 1

    @pytest.mark.asyncio
    async def test_multiple_handlers_all_called(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        called: list[str] = []

        async def handler_1(event: DomainEvent) -> None:
            called.append("handler_1")

        async def handler_2(event: DomainEvent) -> None:
            called.append("handler_2")

        event_bus.subscribe(ProductCreated, handler_1)
        event_bus.subscribe(ProductCreated, handler_2)
        await event_bus.publish(_created())

        # Order not guaranteed due to concurrent execution
        assert sorted(called) == ["handler_1", "handler_2"]

    @pytest.mark.asyncio
    async def test_publish_with_no_handlers_registered(self):
        """Test publishing event with no handlers is no-op (not an error)."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(_created())

        mock_logger.debug.assert_not_called()

    @pytest.mark.asyncio
    async def test_handlers_only_receive_their_event_type(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        @dataclass(frozen=True, kw_only=True, slots=True)
        class SpecialProductCreated(ProductCreated):
            pass

        event_bus.subscribe(ProductCreated, handler)
        await event_bus.publish(_renamed())
        await event_bus.publish(
            SpecialProductCreated(product_id=uuid4(), name="x", price=Decimal("1"))
        )

        assert received == []


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test fail-open behavior (critical requirement)."""

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        called: list[str] = []

        async def failing_handler(event: DomainEvent) -> None:
            raise ValueError("handler exploded")

        async def working_handler(event: DomainEvent) -> None:
            called.append("working")

        event_bus.subscribe(ProductCreated, failing_handler)
        event_bus.subscribe(ProductCreated, working_handler)

        # Act - should not raise
        await event_bus.publish(_created())

        assert called == ["working"]
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("event_handler_failed",)
        assert kwargs["handler_name"] == "failing_handler"
        assert kwargs["error_type"] == "ValueError"
        assert kwargs["error_message"] == "handler exploded"


@pytest.mark.unit
class TestInMemoryEventBusPublishAll:
    """Test publish_all."""

    @pytest.mark.asyncio
    async def test_publish_all_keeps_order(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event_bus.subscribe(ProductCreated, handler)
        event_bus.subscribe(ProductRenamed, handler)
        events = (_created(), _renamed(), _created())

        await event_bus.publish_all(events)

        assert received == list(events)

    @pytest.mark.asyncio
    async def test_publish_all_empty_is_noop(self):
        event_bus = InMemoryEventBus(logger=MagicMock())

        await event_bus.publish_all(())
