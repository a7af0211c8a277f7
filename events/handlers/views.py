"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events import models
from events.domain import Event, EventId
from events.domain.errors import DomainError, ErrorCode, InvalidEventIdError
from events.handlers.serializers import (
    EventCreateSerializer,
    EventCriteriaSerializer,
    EventSerializer,
    MainEventsQuerySerializer,
    ParticipantSerializer,
)
from events.services import EventService
from events.stores.django_store import DjangoEventStore

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.PARTICIPANT_ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
}


def event_detail_cache_key(event_id: str) -> str:
    return f"events:{event_id}"


def get_event_service() -> EventService:
    return EventService(DjangoEventStore(models.Event))


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


def events_response(events: list[Event]) -> Response:
    return Response(EventSerializer(events, many=True).data)


class EventListView(APIView):
    """Handler for GET /api/events (search) and POST /api/events (create)"""

    def get(self, request: Request) -> Response:
        serializer = EventCriteriaSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        events = get_event_service().filter_events(serializer.to_criteria())
        return events_response(events)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().create_event(serializer.to_draft())
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class MainEventListView(APIView):
    """Handler for GET /api/events/main"""

    def get(self, request: Request) -> Response:
        serializer = MainEventsQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        date = serializer.validated_data.get("date") or timezone.now()
        return events_response(get_event_service().find_main_events(date))


class CityEventListView(APIView):
    """Handler for GET /api/events/city/{city}"""

    def get(self, request: Request, city: str) -> Response:
        return events_response(get_event_service().find_events_by_city(city))


class CategoryEventListView(APIView):
    """Handler for GET /api/events/category/{category}"""

    def get(self, request: Request, category: str) -> Response:
        return events_response(get_event_service().find_events_by_category(category))


class NameEventListView(APIView):
    """Handler for GET /api/events/name/{name}"""

    def get(self, request: Request, name: str) -> Response:
        return events_response(get_event_service().find_events_by_name(name))


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        # Key on the canonical form, the one signals invalidate.
        try:
            key = event_detail_cache_key(str(EventId.from_string(event_id)))
        except ValueError:
            return error_response(InvalidEventIdError())
        data = cache.get(key)
        if data is None:
            try:
                event = get_event_service().get_event(event_id)
            except DomainError as error:
                return error_response(error)
            data = EventSerializer(event).data
            cache.set(key, data, settings.EVENTS_CACHE_TIMEOUT)
        return Response(data)


class ParticipantListView(APIView):
    """Handler for POST /api/events/{event_id}/participants"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = ParticipantSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().add_participant(
                event_id, serializer.validated_data["user_id"]
            )
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data)
