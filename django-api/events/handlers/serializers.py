"""Serializers for transforming domain models to API responses and parsing admin input."""

from rest_framework import serializers

from events.domain import EventDraft, TicketCategoryDraft


class TicketCategorySerializer(serializers.Serializer):
    """Serializer for TicketCategory domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, source="price.amount")
    limit = serializers.IntegerField(source="limit.value")
    sold = serializers.IntegerField(source="sold.value")
    remaining = serializers.IntegerField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    venue = serializers.CharField()
    category = serializers.CharField()
    starts_at = serializers.DateTimeField()
    booking_deadline = serializers.DateTimeField(allow_null=True)
    image_url = serializers.CharField(allow_null=True)
    ticket_categories = TicketCategorySerializer(many=True)


class AdminEventSerializer(EventSerializer):
    """Event with sales totals for the admin console."""

    total_sold = serializers.IntegerField()
    total_revenue = serializers.DecimalField(max_digits=12, decimal_places=2)
    is_sold_out = serializers.BooleanField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class TicketCategoryInputSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False, allow_null=True)
    name = serializers.CharField(min_length=1, max_length=100)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    limit = serializers.IntegerField(min_value=1)


class EventInputSerializer(serializers.Serializer):
    """Admin create/update payload."""

    name = serializers.CharField(min_length=3, max_length=255)
    description = serializers.CharField(min_length=10)
    venue = serializers.CharField(min_length=3, max_length=255)
    category = serializers.CharField(min_length=1, max_length=100)
    starts_at = serializers.DateTimeField()
    booking_deadline = serializers.DateTimeField(required=False, allow_null=True)
    image_url = serializers.URLField(required=False, allow_null=True, allow_blank=True)
    ticket_categories = TicketCategoryInputSerializer(many=True, allow_empty=False)

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            name=data["name"],
            description=data["description"],
            venue=data["venue"],
            category=data["category"],
            starts_at=data["starts_at"],
            booking_deadline=data.get("booking_deadline"),
            image_url=data.get("image_url") or None,
            ticket_categories=tuple(
                TicketCategoryDraft(
                    id=str(category["id"]) if category.get("id") else None,
                    name=category["name"],
                    price=category["price"],
                    limit=category["limit"],
                )
                for category in data["ticket_categories"]
            ),
        )
