"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    MODE_CHOICES = [
        ("online", "Online"),
        ("offline", "Offline"),
        ("hybrid", "Hybrid"),
    ]

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField()
    overview = models.TextField()
    image = models.CharField(max_length=500)
    venue = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    date = models.CharField(max_length=10)
    time = models.CharField(max_length=5)
    mode = models.CharField(max_length=10, choices=MODE_CHOICES)
    audience = models.CharField(max_length=255)
    agenda = models.JSONField(default=list)
    organizer = models.CharField(max_length=255)
    tags = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        # Remembered so cache entries under a replaced slug can be dropped.
        instance._loaded_slug = instance.__dict__.get("slug")
        return instance
