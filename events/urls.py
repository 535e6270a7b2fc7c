from django.urls import re_path

from events.handlers import EventDetailView

urlpatterns = [
    # Matches an empty segment too, so a blank slug gets a 400 instead of a 404.
    re_path(r"^events/(?P<slug>[^/]*)$", EventDetailView.as_view(), name="event-detail"),
]
