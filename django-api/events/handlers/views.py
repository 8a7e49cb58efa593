"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses (via common.exceptions)
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.stores.django_store import DjangoAccountStore
from common.exceptions import error_body
from events.cache import EVENT_LIST_KEY, event_detail_key
from events.handlers.serializers import (
    AdminEventSerializer,
    EventInputSerializer,
    EventSerializer,
)
from events.services.event_service import EventService, parse_event_id
from events.stores.django_store import DjangoEventStore
from verification.flows import AIServiceError, generate_event_insights

logger = logging.getLogger(__name__)


def get_event_service() -> EventService:
    return EventService(
        DjangoEventStore(),
        announcement_recipients=DjangoAccountStore().announcement_recipients,
    )


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        query = request.query_params.get("q", "").strip()
        category = request.query_params.get("category", "").strip()
        service = get_event_service()

        if query or category:
            events = service.list_events(query=query, category=category)
            return Response(EventSerializer(events, many=True).data)

        data = cache.get(EVENT_LIST_KEY)
        if data is None:
            data = EventSerializer(service.list_events(), many=True).data
            cache.set(EVENT_LIST_KEY, data, settings.TICKETSWIFT_CACHE_TTL)
        return Response(data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        key = event_detail_key(str(parse_event_id(event_id)))
        data = cache.get(key)
        if data is None:
            event = get_event_service().get_event(event_id)
            data = EventSerializer(event).data
            cache.set(key, data, settings.TICKETSWIFT_CACHE_TTL)
        return Response(data)


class AdminEventListView(APIView):
    """Handler for GET/POST /api/admin/events"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        events = get_event_service().list_events()
        return Response(AdminEventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(serializer.to_draft()).unwrap()
        return Response(AdminEventSerializer(event).data, status=status.HTTP_201_CREATED)


class AdminEventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/admin/events/{event_id}"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_event(event_id)
        return Response(AdminEventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_event(event_id, serializer.to_draft()).unwrap()
        return Response(AdminEventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(event_id).unwrap()
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminEventInsightsView(APIView):
    """Handler for POST /api/admin/events/{event_id}/insights"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_event(event_id)
        try:
            insights = generate_event_insights(
                total_tickets_sold=event.total_sold,
                total_revenue=event.total_revenue,
                category_distribution={
                    category.name: category.sold.value for category in event.ticket_categories
                },
            )
        except AIServiceError:
            logger.warning("Insights generation failed", extra={"event_id": event_id})
            return Response(
                error_body("AI_UNAVAILABLE", "Failed to generate insights. Please try again."),
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response(
            {"summary": insights.summary, "recommendations": insights.recommendations}
        )
