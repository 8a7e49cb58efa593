"""HTTP handlers for the booking workflow, booking history and admin reconciliation.

The booking attempt for an event is kept in the session between requests;
every handler loads it, asks the service for the next attempt, and saves it.
"""

from django.conf import settings
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain.errors import UserNotFoundError
from accounts.handlers.serializers import AccountSerializer
from accounts.stores.django_store import DjangoAccountStore
from audit.services.audit_service import AuditService
from audit.stores.django_store import DjangoAuditStore
from bookings.domain import BookingAttempt, GateDecision
from bookings.domain.inventory import WARNING_MESSAGES
from bookings.handlers.serializers import (
    AdminBookingSerializer,
    BookingAttemptSerializer,
    BookingSerializer,
    DashboardSerializer,
    QuantityInputSerializer,
    ReceiptUploadSerializer,
    StatusInputSerializer,
    TicketDownloadSerializer,
)
from bookings.handlers.session import SessionAttemptStore
from bookings.services.booking_service import BookingService
from bookings.services.dashboard_service import DashboardService
from bookings.services.reconciliation_service import ReconciliationService
from bookings.services.workflow_service import BookingWorkflowService
from bookings.stores.django_store import DjangoBookingStore
from events.handlers.views import get_event_service
from events.services.event_service import parse_event_id


def get_workflow_service() -> BookingWorkflowService:
    return BookingWorkflowService(
        get_event_service(),
        DjangoAccountStore(),
        DjangoBookingStore(),
        AuditService(DjangoAuditStore()),
        max_tickets=settings.TICKETSWIFT_MAX_TICKETS_PER_EVENT,
    )


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore(), AuditService(DjangoAuditStore()))


def get_reconciliation_service() -> ReconciliationService:
    return ReconciliationService(
        DjangoBookingStore(),
        DjangoAccountStore(),
        get_event_service(),
        AuditService(DjangoAuditStore()),
    )


def get_dashboard_service() -> DashboardService:
    return DashboardService(get_event_service(), DjangoAccountStore(), DjangoBookingStore())


def _account(request: Request):
    account = DjangoAccountStore().get_account(request.user.pk)
    if account is None:
        raise UserNotFoundError(request.user.pk)
    return account


def _attempt_response(
    attempt: BookingAttempt,
    gate: GateDecision | None = None,
    warning: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    data = dict(
        BookingAttemptSerializer(
            attempt,
            context={"gate": gate, "max_tickets": settings.TICKETSWIFT_MAX_TICKETS_PER_EVENT},
        ).data
    )
    data["warning"] = warning
    return Response(data, status=status_code)


class BookingAttemptView(APIView):
    """Handler for GET/DELETE /api/events/{event_id}/booking"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]

    def get(self, request: Request, event_id: str) -> Response:
        key = str(parse_event_id(event_id))
        user_id = request.user.pk if request.user.is_authenticated else None
        view = get_workflow_service().view(key, user_id, SessionAttemptStore(request.session).load(key))
        return _attempt_response(view.attempt, gate=view.gate)

    def delete(self, request: Request, event_id: str) -> Response:
        key = str(parse_event_id(event_id))
        sessions = SessionAttemptStore(request.session)
        attempt = sessions.load(key)
        if attempt is not None:
            get_workflow_service().discard(attempt)
            sessions.clear(key)
        return Response(status=status.HTTP_204_NO_CONTENT)


class BookingQuantityView(APIView):
    """Handler for POST /api/events/{event_id}/booking/quantities"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        serializer = QuantityInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        key = str(parse_event_id(event_id))
        sessions = SessionAttemptStore(request.session)
        attempt, outcome = get_workflow_service().adjust_quantity(
            sessions.load_or_start(key),
            serializer.validated_data["category_id"],
            serializer.validated_data["delta"],
        )
        sessions.save(attempt)

        warning = None
        if outcome.warning is not None:
            warning = WARNING_MESSAGES[outcome.warning].format(
                cap=settings.TICKETSWIFT_MAX_TICKETS_PER_EVENT
            )
        return _attempt_response(attempt, warning=warning)


class BookingProceedView(APIView):
    """Handler for POST /api/events/{event_id}/booking/proceed"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        key = str(parse_event_id(event_id))
        sessions = SessionAttemptStore(request.session)
        attempt = get_workflow_service().proceed(sessions.load_or_start(key), request.user.pk)
        sessions.save(attempt)
        return _attempt_response(attempt)


class BookingBackView(APIView):
    """Handler for POST /api/events/{event_id}/booking/back"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        key = str(parse_event_id(event_id))
        sessions = SessionAttemptStore(request.session)
        attempt = get_workflow_service().back(sessions.load_or_start(key))
        sessions.save(attempt)
        return _attempt_response(attempt)


class BookingReceiptView(APIView):
    """Handler for POST/DELETE /api/events/{event_id}/booking/receipt"""

    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request: Request, event_id: str) -> Response:
        serializer = ReceiptUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        key = str(parse_event_id(event_id))
        sessions = SessionAttemptStore(request.session)
        attempt = get_workflow_service().upload_receipt(
            sessions.load_or_start(key), _account(request), serializer.validated_data["image"]
        )
        sessions.save(attempt)
        return _attempt_response(attempt)

    def delete(self, request: Request, event_id: str) -> Response:
        key = str(parse_event_id(event_id))
        sessions = SessionAttemptStore(request.session)
        attempt = get_workflow_service().remove_receipt(sessions.load_or_start(key))
        sessions.save(attempt)
        return _attempt_response(attempt)


class BookingSubmitView(APIView):
    """Handler for POST /api/events/{event_id}/booking/submit"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        key = str(parse_event_id(event_id))
        sessions = SessionAttemptStore(request.session)
        outcome = get_workflow_service().submit(sessions.load_or_start(key), _account(request))
        sessions.save(outcome.attempt)
        booking = outcome.result.unwrap()
        return Response(
            {
                "attempt": BookingAttemptSerializer(outcome.attempt).data,
                "booking": BookingSerializer(booking).data,
            },
            status=status.HTTP_201_CREATED,
        )


class MyBookingListView(APIView):
    """Handler for GET /api/profile/bookings"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        bookings = get_booking_service().list_for_user(request.user.pk)
        return Response(BookingSerializer(bookings, many=True).data)


class MyBookingCancelView(APIView):
    """Handler for POST /api/profile/bookings/{booking_id}/cancel"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, booking_id: str) -> Response:
        booking = get_booking_service().cancel_own_booking(request.user.pk, booking_id).unwrap()
        return Response(BookingSerializer(booking).data)


class MyBookingTicketsView(APIView):
    """Handler for GET /api/profile/bookings/{booking_id}/tickets"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, booking_id: str) -> Response:
        booking, tickets = get_booking_service().tickets_for_download(request.user.pk, booking_id)
        return Response(
            {
                "booking": BookingSerializer(booking).data,
                "tickets": TicketDownloadSerializer(tickets, many=True).data,
            }
        )


class AdminDashboardView(APIView):
    """Handler for GET /api/admin/dashboard"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        stats = get_dashboard_service().stats()
        users = {account.id: account for account in DjangoAccountStore().list_accounts()}
        return Response(DashboardSerializer(stats, context={"users": users}).data)


class AdminBookingListView(APIView):
    """Handler for GET /api/admin/bookings"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        bookings = get_reconciliation_service().list_bookings(request.query_params.get("status"))
        users = {account.id: account for account in DjangoAccountStore().list_accounts()}
        return Response(AdminBookingSerializer(bookings, many=True, context={"users": users}).data)


class AdminPaymentStatusView(APIView):
    """Handler for POST /api/admin/bookings/{booking_id}/payment-status"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request, booking_id: str) -> Response:
        serializer = StatusInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_reconciliation_service().set_payment_status(
            booking_id, serializer.validated_data["status"]
        ).unwrap()
        return Response(AdminBookingSerializer(booking).data)


class AdminBookingCancelView(APIView):
    """Handler for POST /api/admin/bookings/{booking_id}/cancel"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request, booking_id: str) -> Response:
        booking = get_reconciliation_service().cancel_booking(request.user.pk, booking_id).unwrap()
        return Response(AdminBookingSerializer(booking).data)


class AdminUserVerificationView(APIView):
    """Handler for POST /api/admin/users/{user_id}/verification"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request, user_id: int) -> Response:
        serializer = StatusInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_reconciliation_service().set_identity_verification(
            user_id, serializer.validated_data["status"]
        ).unwrap()
        return Response(AccountSerializer(account).data)
