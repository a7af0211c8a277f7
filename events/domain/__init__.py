from events.domain.filters import EventCriteria, EventFilter, compose_filter
from events.domain.models import Event, EventDraft, UpdateResult
from events.domain.value_objects import EventId, Location, PriceTier

__all__ = [
    "Event",
    "EventDraft",
    "UpdateResult",
    "EventId",
    "Location",
    "PriceTier",
    "EventCriteria",
    "EventFilter",
    "compose_filter",
]
