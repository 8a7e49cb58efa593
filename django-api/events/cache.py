"""Cache keys for the public catalog."""

from django.core.cache import cache

EVENT_LIST_KEY = "events:list"


def event_detail_key(event_id: str) -> str:
    return f"events:{event_id}"


def invalidate_event(event_id: str) -> None:
    cache.delete_many([EVENT_LIST_KEY, event_detail_key(event_id)])
