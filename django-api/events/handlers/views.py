"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never expose internal error details

Domain errors are mapped to responses by events.handlers.errors.
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import actor_of
from events.cache import EVENT_LIST_KEY, cache_timeout, event_detail_key
from events.handlers.serializers import (
    EventRequestSerializer,
    EventSerializer,
    RegistrationRequestSerializer,
    RegistrationResultSerializer,
)
from events.services.event_service import parse_event_id
from events.services.factory import build_event_service, build_registration_service


def _events_response(events) -> Response:
    return Response(EventSerializer(events, many=True).data)


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAuthenticated()]
        return [AllowAny()]

    def get(self, request: Request) -> Response:
        data = cache.get(EVENT_LIST_KEY)
        if data is None:
            data = EventSerializer(build_event_service().list_events(), many=True).data
            cache.set(EVENT_LIST_KEY, data, cache_timeout())
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = build_event_service().create_event(serializer.to_details(), actor_of(request))
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]

    def get(self, request: Request, event_id: str) -> Response:
        key = event_detail_key(str(parse_event_id(event_id)))
        data = cache.get(key)
        if data is None:
            data = EventSerializer(build_event_service().get_event(event_id)).data
            cache.set(key, data, cache_timeout())
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = build_event_service().update_event(
            event_id, serializer.to_details(), actor_of(request)
        )
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        build_event_service().delete_event(event_id, actor_of(request))
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventStatusView(APIView):
    """Base handler for PUT /api/events/{event_id}/<transition>"""

    permission_classes = [IsAuthenticated]
    action = ""

    def put(self, request: Request, event_id: str) -> Response:
        service = build_event_service()
        event = getattr(service, f"{self.action}_event")(event_id, actor_of(request))
        return Response(EventSerializer(event).data)


class EventPublishView(EventStatusView):
    action = "publish"


class EventCancelView(EventStatusView):
    action = "cancel"


class EventCompleteView(EventStatusView):
    action = "complete"


class EventRegistrationView(APIView):
    """Handler for POST /api/events/register"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        serializer = RegistrationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = build_registration_service().register_for_event(
            serializer.to_command(), actor_of(request)
        )
        return Response(
            RegistrationResultSerializer(result).data, status=status.HTTP_201_CREATED
        )


class UpcomingEventListView(APIView):
    """Handler for GET /api/events/upcoming"""

    def get(self, request: Request) -> Response:
        return _events_response(build_event_service().list_upcoming())


class EventSearchView(APIView):
    """Handler for GET /api/events/search?q=term"""

    def get(self, request: Request) -> Response:
        term = request.query_params.get("q", "").strip()
        if not term:
            return Response([])
        return _events_response(build_event_service().search_events(term))


class CategoryEventListView(APIView):
    """Handler for GET /api/events/category/{category}"""

    def get(self, request: Request, category: str) -> Response:
        return _events_response(build_event_service().list_by_category(category))


class OrganizerEventListView(APIView):
    """Handler for GET /api/events/organizer/{organizer_id}"""

    def get(self, request: Request, organizer_id: str) -> Response:
        return _events_response(build_event_service().list_by_organizer(organizer_id))


class AttendeeEventListView(APIView):
    """Handler for GET /api/events/attendee/{user_id}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, user_id: str) -> Response:
        return _events_response(build_event_service().events_for_attendee(user_id))
