from events.services.event_service import EventService


def get_event_service() -> EventService:
    """Build the service wired to the Django ORM store."""
    from events.stores.django_store import DjangoEventStore

    return EventService(DjangoEventStore())


__all__ = ["EventService", "get_event_service"]
