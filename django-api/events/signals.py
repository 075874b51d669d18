"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import invalidate_event
from events.models import Event, TicketType


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_event(instance.id)


@receiver([post_save, post_delete], sender=TicketType)
def invalidate_ticket_type_cache(sender, instance, **kwargs):
    """Invalidate the owning event's caches when a ticket type changes."""
    invalidate_event(instance.event_id)
