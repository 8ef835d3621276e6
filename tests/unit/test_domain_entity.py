"""Unit tests for the Entity base class and EntityChange.

Tests cover:
- Write-once identity
- Identity-based equality and hashing
- EntityChange immutability and event ordering
"""

from dataclasses import FrozenInstanceError, dataclass
from uuid import uuid4

import pytest

from src.domain.entities import Entity, EntityChange
from src.domain.events import DomainEvent


@dataclass(eq=False)
class _Thing(Entity[str]):
    label: str


@dataclass(eq=False)
class _OtherThing(Entity[str]):
    label: str


@dataclass(frozen=True, kw_only=True, slots=True)
class _ThingHappened(DomainEvent):
    step: int


@pytest.mark.unit
class TestEntityIdentity:
    """Test entity identity rules."""

    def test_id_cannot_be_reassigned(self):
        thing = _Thing(id="a", label="x")

        with pytest.raises(AttributeError, match="identity cannot be reassigned"):
            thing.id = "b"

        assert thing.id == "a"

    def test_other_fields_are_mutable(self):
        thing = _Thing(id="a", label="x")

        thing.label = "y"

        assert thing.label == "y"

    def test_equality_uses_id(self):
        assert _Thing(id="a", label="x") == _Thing(id="a", label="y")
        assert _Thing(id="a", label="x") != _Thing(id="b", label="x")

    def test_different_entity_types_never_equal(self):
        assert _Thing(id="a", label="x") != _OtherThing(id="a", label="x")

    def test_hash_follows_identity(self):
        things = {_Thing(id="a", label="x"), _Thing(id="a", label="y")}

        assert len(things) == 1


@pytest.mark.unit
class TestEntityChange:
    """Test EntityChange."""

    def test_events_keep_order(self):
        thing = _Thing(id=str(uuid4()), label="x")
        events = (_ThingHappened(step=1), _ThingHappened(step=2))

        change = EntityChange(entity=thing, events=events)

        assert [e.step for e in change.events] == [1, 2]
        assert change.entity is thing

    def test_change_is_immutable(self):
        change = EntityChange(entity=_Thing(id="a", label="x"))

        assert change.events == ()
        with pytest.raises(FrozenInstanceError):
            change.events = ()  # type: ignore[misc]

    def test_domain_event_defaults(self):
        first, second = _ThingHappened(step=1), _ThingHappened(step=1)

        assert first.event_id != second.event_id
        assert first.occurred_at.tzinfo is not None
        assert first.event_type == "_ThingHappened"
