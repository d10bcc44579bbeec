"""Django signals for cache invalidation.

Conditional writes in DjangoEventStore use queryset updates, which do not
fire these; the store invalidates for those itself.
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import invalidate_event
from events.models import Event


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_event(str(instance.pk))
