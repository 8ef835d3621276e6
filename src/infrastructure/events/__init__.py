"""Event bus adapters implementing EventBusProtocol."""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
