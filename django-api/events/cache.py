"""Cache keys for event reads and their invalidation."""

from django.core.cache import cache

POPULAR_KEY = "events:popular"
UPCOMING_KEY = "events:upcoming"
CATEGORIES_KEY = "events:categories"


def detail_key(event_id) -> str:
    return f"events:{event_id}"


def invalidate_event(event_id) -> None:
    """Drop every cached read that may include the event."""
    cache.delete_many([POPULAR_KEY, UPCOMING_KEY, detail_key(event_id)])
