"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import invalidate_event
from events.models import Event, TicketCategory


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_event(str(instance.id))


@receiver([post_save, post_delete], sender=TicketCategory)
def invalidate_ticket_category_cache(sender, instance, **kwargs):
    """Invalidate the parent event's caches when a category changes."""
    invalidate_event(str(instance.event_id))
