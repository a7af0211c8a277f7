"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Self

from events.domain.value_objects import EventId, Location, PriceTier


@dataclass(frozen=True, kw_only=True)
class EventDraft:
    """Caller-supplied content of an Event, before the store assigns identity."""

    title: str
    location: Location
    date: datetime | None = None
    description: str | None = None
    categories: frozenset[str] = frozenset()
    banner: str | None = None
    flyers: frozenset[str] = frozenset()
    coupons: frozenset[str] = frozenset()
    price: tuple[PriceTier, ...] = ()
    city: str = ""
    formatted_address: str = ""
    participants: frozenset[str] = frozenset()

    @property
    def cheapest_price(self) -> PriceTier | None:
        """Return the lowest price tier, or None when the event has no prices."""
        if not self.price:
            return None
        return min(self.price, key=lambda tier: tier.amount)


@dataclass(frozen=True, kw_only=True)
class Event(EventDraft):
    """Domain representation of an Event."""

    id: EventId
    created_at: datetime

    @classmethod
    def from_draft(cls, draft: EventDraft, id: EventId, created_at: datetime) -> Self:
        return cls(id=id, created_at=created_at, **_draft_values(draft))

    def to_draft(self) -> EventDraft:
        return EventDraft(**_draft_values(self))


@dataclass(frozen=True)
class UpdateResult:
    """Summary of a replace operation."""

    matched_count: int
    modified_count: int


def _draft_values(source: EventDraft) -> dict:
    return {f.name: getattr(source, f.name) for f in fields(EventDraft)}
