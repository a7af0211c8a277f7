from events.handlers.views import (
    CategoryEventListView,
    CityEventListView,
    EventDetailView,
    EventListView,
    MainEventListView,
    NameEventListView,
    ParticipantListView,
)

__all__ = [
    "EventListView",
    "MainEventListView",
    "CityEventListView",
    "CategoryEventListView",
    "NameEventListView",
    "EventDetailView",
    "ParticipantListView",
]
