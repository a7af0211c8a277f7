"""In-memory implementation of the EventStore.

Evaluates filters with the clauses' own ``matches``. Intended for tests and
single-process use; it holds no locks.
"""

from collections.abc import Callable
from datetime import datetime, timezone

from events.domain import Event, EventDraft, EventFilter, EventId, Location, UpdateResult
from events.domain.filters import (
    MAIN_EVENTS_LIMIT,
    HasCategory,
    OccursOnOrAfter,
    TitleContains,
    ensure_aware,
    one_month_after,
)
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Dictionary-backed event store keyed by EventId."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._events: dict[EventId, Event] = {}
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def add(self, draft: EventDraft) -> Event:
        event_id = EventId.generate()
        while event_id in self._events:
            event_id = EventId.generate()
        event = Event.from_draft(draft, id=event_id, created_at=self._clock())
        self._events[event_id] = event
        return event

    def find_by_id(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def find_by_location_and_date(
        self, location: Location, date: datetime | None
    ) -> Event | None:
        return next(
            (
                event
                for event in self._events.values()
                if event.location == location and event.date == date
            ),
            None,
        )

    def find_by_city(self, city: str) -> list[Event]:
        return [event for event in self._events.values() if event.city == city]

    def find_by_category(self, category: str) -> list[Event]:
        return self._select(HasCategory(category).matches)

    def find_by_name(self, name: str) -> list[Event]:
        return self._select(TitleContains(name).matches)

    def filter_by(self, event_filter: EventFilter) -> list[Event]:
        return self._select(event_filter.matches)

    def find_main(self, date: datetime) -> list[Event]:
        date = ensure_aware(date)
        end = one_month_after(date)
        upcoming = [
            event
            for event in self._select(OccursOnOrAfter(date).matches)
            if ensure_aware(event.date) <= end
        ]
        upcoming.sort(key=lambda event: ensure_aware(event.date))
        return upcoming[:MAIN_EVENTS_LIMIT]

    def update(self, event_id: EventId, draft: EventDraft) -> UpdateResult:
        current = self._events.get(event_id)
        if current is None:
            return UpdateResult(matched_count=0, modified_count=0)
        if current.to_draft() == draft:
            return UpdateResult(matched_count=1, modified_count=0)
        self._events[event_id] = Event.from_draft(
            draft, id=current.id, created_at=current.created_at
        )
        return UpdateResult(matched_count=1, modified_count=1)

    def _select(self, predicate: Callable[[Event], bool]) -> list[Event]:
        return [event for event in self._events.values() if predicate(event)]
