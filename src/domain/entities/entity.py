"""Entity base class and state-transition result.

Entities are mutable domain objects with a stable identity. Their identity is
assigned once at construction and can never be reassigned afterwards.

State transitions (factories and mutators) do not buffer domain events inside
the entity. They return an ``EntityChange`` carrying the entity plus the
immutable, ordered tuple of events the transition produced; the caller owns
those events (typically publishing them after persistence).

Usage:
    @dataclass(eq=False)
    class Product(Entity[UUID]):
        name: str

    change = EntityChange(entity=product, events=(ProductCreated(...),))
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from src.domain.events.base_event import DomainEvent

IdT = TypeVar("IdT")
EntityT = TypeVar("EntityT", bound="Entity[Any]")

_IDENTITY_FIELD = "id"


@dataclass(eq=False)
class Entity(Generic[IdT]):
    """Base shape for domain entities.

    Equality and hashing are identity-based: two entities are equal when they
    are of the same type and share the same id.

    Attributes:
        id: Entity identity (write-once).
    """

    id: IdT

    def __setattr__(self, name: str, value: Any) -> None:
        if name == _IDENTITY_FIELD and _IDENTITY_FIELD in self.__dict__:
            raise AttributeError(
                f"{type(self).__name__} identity cannot be reassigned"
            )
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityChange(Generic[EntityT]):
    """Outcome of a successful entity state transition.

    Attributes:
        entity: The created or mutated entity.
        events: Domain events raised by the transition, in order.
    """

    entity: EntityT
    events: tuple[DomainEvent, ...] = ()
