"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from dataclasses import replace
from datetime import datetime

from events.domain import Event, EventCriteria, EventDraft, EventId, compose_filter
from events.domain.errors import (
    EventAlreadyExistsError,
    EventNotFoundError,
    InvalidEventIdError,
    ParticipantAlreadyRegisteredError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def create_event(self, draft: EventDraft) -> Event:
        """Store a new event.

        Raises:
            EventAlreadyExistsError: If an event exists at the same location and date.
        """
        if self._store.find_by_location_and_date(draft.location, draft.date):
            logger.warning(
                "Rejected duplicate event '%s' at %s on %s",
                draft.title,
                draft.location,
                draft.date,
            )
            raise EventAlreadyExistsError()

        event = self._store.add(draft)
        logger.info("Created event %s '%s'", event.id, event.title)
        return event

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.find_by_id(self._parse_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def find_events_by_city(self, city: str) -> list[Event]:
        return self._store.find_by_city(city)

    def find_events_by_category(self, category: str) -> list[Event]:
        return self._store.find_by_category(category)

    def find_events_by_name(self, name: str) -> list[Event]:
        return self._store.find_by_name(name)

    def filter_events(self, criteria: EventCriteria) -> list[Event]:
        """Return events matching every supplied criterion."""
        return self._store.filter_by(compose_filter(criteria))

    def find_main_events(self, date: datetime) -> list[Event]:
        """Return the highlighted events of the month starting at date."""
        return self._store.find_main(date)

    def add_participant(self, event_id: str, user_id: str) -> Event:
        """Register a user as participant and return the updated event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            ParticipantAlreadyRegisteredError: If the user already participates.
        """
        event = self.get_event(event_id)
        if user_id in event.participants:
            raise ParticipantAlreadyRegisteredError(user_id)

        draft = replace(
            event.to_draft(), participants=event.participants | {user_id}
        )
        result = self._store.update(event.id, draft)
        if result.matched_count == 0:
            raise EventNotFoundError(event_id)
        logger.info("Added participant %s to event %s", user_id, event.id)
        return Event.from_draft(draft, id=event.id, created_at=event.created_at)

    @staticmethod
    def _parse_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc
