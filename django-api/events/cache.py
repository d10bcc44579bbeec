"""Cache keys for the event read path."""

from django.conf import settings
from django.core.cache import cache

EVENT_LIST_KEY = "events:list"


def event_detail_key(event_id: str) -> str:
    """Key for one event. ``event_id`` must be the canonical UUID string."""
    return f"events:{event_id}"


def cache_timeout() -> int:
    return getattr(settings, "EVENTS_CACHE_TIMEOUT", 300)


def invalidate_event(event_id: str) -> None:
    cache.delete_many([EVENT_LIST_KEY, event_detail_key(event_id)])
