from events.handlers.views import EventDetailView

__all__ = ["EventDetailView"]
