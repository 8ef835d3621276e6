"""Domain protocols (ports) package.

This package contains protocol definitions shared by all modules.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import EventBusProtocol, LoggerProtocol
"""

from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
]
