"""Serializers for booking attempts, bookings and admin input."""

from django.core.files.storage import default_storage
from rest_framework import serializers


class SelectionLineSerializer(serializers.Serializer):
    category_id = serializers.CharField()
    category_name = serializers.CharField()
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    quantity = serializers.IntegerField()
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)


class GateSerializer(serializers.Serializer):
    allowed = serializers.BooleanField()
    reason = serializers.CharField(source="reason.value", allow_null=True, default=None)
    message = serializers.CharField(allow_null=True)


class ReceiptCheckSerializer(serializers.Serializer):
    state = serializers.CharField(source="state.value")
    message = serializers.CharField(allow_null=True)
    uploaded = serializers.SerializerMethodField()

    def get_uploaded(self, receipt) -> bool:
        return receipt.reference is not None


class BookingAttemptSerializer(serializers.Serializer):
    """Serializer for a BookingAttempt; pass the gate decision in context."""

    event_id = serializers.CharField()
    stage = serializers.CharField(source="stage.value")
    lines = SelectionLineSerializer(source="selection.lines", many=True)
    total_tickets = serializers.IntegerField(source="selection.total_tickets")
    total_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="selection.total_price"
    )
    receipt = ReceiptCheckSerializer()
    can_submit = serializers.BooleanField()
    booking_id = serializers.CharField(allow_null=True)
    error = serializers.CharField(allow_null=True)
    gate = serializers.SerializerMethodField()
    max_tickets = serializers.SerializerMethodField()

    def get_gate(self, attempt) -> dict | None:
        gate = self.context.get("gate")
        return GateSerializer(gate).data if gate is not None else None

    def get_max_tickets(self, attempt) -> int | None:
        return self.context.get("max_tickets")


class QuantityInputSerializer(serializers.Serializer):
    category_id = serializers.CharField()
    delta = serializers.IntegerField()


class ReceiptUploadSerializer(serializers.Serializer):
    image = serializers.FileField()


class TicketSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    category_name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, source="price.amount")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField()
    event_name = serializers.CharField()
    event_starts_at = serializers.DateTimeField(allow_null=True)
    tickets = TicketSerializer(many=True)
    number_of_tickets = serializers.IntegerField()
    total_amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="total_amount.amount"
    )
    status = serializers.CharField(source="status.value")
    is_downloadable = serializers.BooleanField()
    created_at = serializers.DateTimeField()


class AdminBookingSerializer(BookingSerializer):
    """Booking with its owner and receipt link; pass ``users`` in context."""

    user_id = serializers.IntegerField()
    user_name = serializers.SerializerMethodField()
    user_email = serializers.SerializerMethodField()
    payment_screenshot_url = serializers.SerializerMethodField()

    def _user(self, booking):
        return self.context.get("users", {}).get(booking.user_id)

    def get_user_name(self, booking) -> str | None:
        user = self._user(booking)
        return user.name if user else None

    def get_user_email(self, booking) -> str | None:
        user = self._user(booking)
        return user.email if user else None

    def get_payment_screenshot_url(self, booking) -> str | None:
        if not booking.payment_screenshot:
            return None
        return default_storage.url(booking.payment_screenshot)


class TicketDownloadSerializer(serializers.Serializer):
    """One admission ticket as handed to the user."""

    ticket_id = serializers.UUIDField(source="id")
    category_name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, source="price.amount")


class StatusInputSerializer(serializers.Serializer):
    status = serializers.CharField()


class DashboardSerializer(serializers.Serializer):
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    tickets_sold = serializers.IntegerField()
    user_count = serializers.IntegerField()
    upcoming_events = serializers.IntegerField()
    sold_out_events = serializers.IntegerField()
    recent_bookings = AdminBookingSerializer(many=True)
