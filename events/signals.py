"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.handlers.views import event_detail_cache_key
from events.models import Event, EventCategory, PriceTier


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate the detail cache when an event is saved or deleted."""
    cache.delete(event_detail_cache_key(str(instance.pk)))


@receiver([post_save, post_delete], sender=PriceTier)
@receiver([post_save, post_delete], sender=EventCategory)
def invalidate_parent_event_cache(sender, instance, **kwargs):
    """Invalidate the parent event's cache when a tier or tag changes."""
    cache.delete(event_detail_cache_key(str(instance.event_id)))
