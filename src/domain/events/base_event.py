"""Base domain event class.

This module defines the foundational DomainEvent base class used by all domain
events in the system. Domain events represent "things that happened" in the
business domain and are always named in past tense (e.g., ProductCreated,
ProductRenamed).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class ProductCreated(DomainEvent):
    ...     product_id: UUID
    ...     name: str
    >>>
    >>> event = ProductCreated(product_id=uuid4(), name="Widget")
    >>> print(event.event_id)  # Auto-generated UUID
    >>> print(event.occurred_at)  # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (ProductCreated, NOT CreateProduct)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Event class name, used as the log/event name."""
        return type(self).__name__
