from django.urls import path

from events.handlers import (
    CategoryEventListView,
    CityEventListView,
    EventDetailView,
    EventListView,
    MainEventListView,
    NameEventListView,
    ParticipantListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/main", MainEventListView.as_view(), name="event-main"),
    path("events/city/<str:city>", CityEventListView.as_view(), name="event-city"),
    path(
        "events/category/<str:category>",
        CategoryEventListView.as_view(),
        name="event-category",
    ),
    path("events/name/<str:name>", NameEventListView.as_view(), name="event-name"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/participants",
        ParticipantListView.as_view(),
        name="participant-list",
    ),
]
