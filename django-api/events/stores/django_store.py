"""Django ORM implementation of the EventStore."""

import logging

from django.db import DatabaseError, transaction
from django.db.models import F

from common.errors import PersistenceError
from common.results import WriteResult
from events import models
from events.domain import (
    Capacity,
    Event,
    EventDraft,
    EventId,
    Money,
    TicketCategory,
    TicketCategoryId,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def to_domain(event: models.Event) -> Event:
    return Event(
        id=EventId(event.id),
        name=event.name,
        description=event.description,
        venue=event.venue,
        category=event.category,
        starts_at=event.starts_at,
        booking_deadline=event.booking_deadline,
        image_url=event.image_url,
        created_at=event.created_at,
        updated_at=event.updated_at,
        ticket_categories=tuple(
            TicketCategory(
                id=TicketCategoryId(category.id),
                name=category.name,
                price=Money(category.price),
                limit=Capacity(category.limit),
                sold=Capacity(category.sold),
            )
            for category in event.ticket_categories.all()
        ),
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _queryset(self):
        return models.Event.objects.prefetch_related("ticket_categories")

    def list_events(self, query: str | None = None, category: str | None = None) -> list[Event]:
        events = self._queryset()
        if query:
            events = events.filter(name__icontains=query)
        if category:
            events = events.filter(category__iexact=category)
        return [to_domain(event) for event in events]

    def get_event(self, event_id: EventId) -> Event | None:
        event = self._queryset().filter(id=event_id.value).first()
        return to_domain(event) if event is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(id=event_id.value).exists()

    def create_event(self, draft: EventDraft) -> WriteResult[Event]:
        try:
            with transaction.atomic():
                event = models.Event.objects.create(**self._event_fields(draft))
                models.TicketCategory.objects.bulk_create(
                    models.TicketCategory(
                        event=event,
                        name=category.name,
                        price=category.price,
                        limit=category.limit,
                        sold=0,
                        position=position,
                    )
                    for position, category in enumerate(draft.ticket_categories)
                )
        except DatabaseError:
            logger.exception("Event create failed")
            return WriteResult.failure(PersistenceError("create", "events"))

        return WriteResult.success(self.get_event(EventId(event.id)))

    def update_event(self, event_id: EventId, draft: EventDraft) -> WriteResult[Event]:
        path = f"events/{event_id}"
        try:
            with transaction.atomic():
                models.Event.objects.filter(id=event_id.value).update(**self._event_fields(draft))
                # update() bypasses auto_now and post_save; save() touches both.
                event = models.Event.objects.get(id=event_id.value)
                event.save(update_fields=["updated_at"])

                kept_ids = []
                for position, category in enumerate(draft.ticket_categories):
                    fields = {
                        "name": category.name,
                        "price": category.price,
                        "limit": category.limit,
                        "position": position,
                    }
                    if category.id:
                        models.TicketCategory.objects.filter(
                            id=category.id, event=event
                        ).update(**fields)
                        kept_ids.append(category.id)
                    else:
                        created = models.TicketCategory.objects.create(event=event, sold=0, **fields)
                        kept_ids.append(created.id)

                models.TicketCategory.objects.filter(event=event).exclude(id__in=kept_ids).delete()
        except DatabaseError:
            logger.exception("Event update failed", extra={"event_id": str(event_id)})
            return WriteResult.failure(PersistenceError("update", path))

        return WriteResult.success(self.get_event(event_id))

    def delete_event(self, event_id: EventId) -> WriteResult[None]:
        try:
            models.Event.objects.filter(id=event_id.value).delete()
        except DatabaseError:
            logger.exception("Event delete failed", extra={"event_id": str(event_id)})
            return WriteResult.failure(PersistenceError("delete", f"events/{event_id}"))
        return WriteResult.success()

    def add_sold(self, event_id: EventId, counts_by_category: dict[str, int]) -> WriteResult[None]:
        try:
            with transaction.atomic():
                for name, count in counts_by_category.items():
                    models.TicketCategory.objects.filter(
                        event_id=event_id.value, name=name
                    ).update(sold=F("sold") + count)
                event = models.Event.objects.filter(id=event_id.value).first()
                if event is not None:
                    # Touch the event so cached copies are invalidated.
                    event.save(update_fields=["updated_at"])
        except DatabaseError:
            logger.exception("Sold counter update failed", extra={"event_id": str(event_id)})
            return WriteResult.failure(PersistenceError("update", f"events/{event_id}"))
        return WriteResult.success()

    @staticmethod
    def _event_fields(draft: EventDraft) -> dict:
        return {
            "name": draft.name,
            "description": draft.description,
            "venue": draft.venue,
            "category": draft.category,
            "starts_at": draft.starts_at,
            "booking_deadline": draft.booking_deadline,
            "image_url": draft.image_url,
        }
