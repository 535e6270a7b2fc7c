"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.handlers.views import event_cache_key
from events.models import Event


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate cached detail payloads when an event is saved or deleted."""
    slugs = {instance.slug, getattr(instance, "_loaded_slug", None)}
    cache.delete_many([event_cache_key(slug) for slug in slugs if slug])
    instance._loaded_slug = instance.slug
