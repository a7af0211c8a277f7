"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Lookups of a single event
return None when nothing matches; storage failures propagate to the caller.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import Event, EventDraft, EventFilter, EventId, Location, UpdateResult


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def add(self, draft: EventDraft) -> Event:
        """Persist a new event, assigning its id and created_at."""
        ...

    @abstractmethod
    def find_by_id(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_location_and_date(
        self, location: Location, date: datetime | None
    ) -> Event | None:
        """Return the event at exactly this location and date, or None."""
        ...

    @abstractmethod
    def find_by_city(self, city: str) -> list[Event]:
        ...

    @abstractmethod
    def find_by_category(self, category: str) -> list[Event]:
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> list[Event]:
        """Return events whose title contains name, ignoring case."""
        ...

    @abstractmethod
    def filter_by(self, event_filter: EventFilter) -> list[Event]:
        """Return all events matching every clause of the filter."""
        ...

    @abstractmethod
    def find_main(self, date: datetime) -> list[Event]:
        """Return up to four events dated within one month from date, soonest first."""
        ...

    @abstractmethod
    def update(self, event_id: EventId, draft: EventDraft) -> UpdateResult:
        """Replace the event's content, keeping its id and created_at."""
        ...
