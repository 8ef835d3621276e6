"""Domain events package.

Usage:
    >>> from src.domain.events import DomainEvent
"""

from src.domain.events.base_event import DomainEvent

__all__ = ["DomainEvent"]
