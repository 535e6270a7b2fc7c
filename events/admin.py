from django import forms
from django.contrib import admin

from events.domain import EVENT_FIELDS, normalize_event_fields
from events.domain.errors import EventValidationError
from events.models import Event


class EventAdminForm(forms.ModelForm):
    """Runs event normalization on the fields the editor changed."""

    # Accepts any parseable date; stored as YYYY-MM-DD after normalization.
    date = forms.CharField(max_length=64)

    class Meta:
        model = Event
        fields = list(EVENT_FIELDS)

    def clean(self):
        cleaned_data = super().clean()
        changed = [name for name in self.changed_data if name in EVENT_FIELDS]
        if not self.instance.pk:
            changed = list(EVENT_FIELDS)
        changed = [name for name in changed if name not in self.errors]
        try:
            normalized = normalize_event_fields(cleaned_data, changed)
        except EventValidationError as exc:
            for name, message in exc.field_errors.items():
                self.add_error(name if name in self.fields else None, message)
            return cleaned_data

        slug = normalized.get("slug")
        if slug:
            clash = Event.objects.filter(slug=slug).exclude(pk=self.instance.pk)
            if clash.exists():
                self.add_error("title", "An event with this slug already exists")
                return cleaned_data
            self.instance.slug = slug
        return normalized


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    form = EventAdminForm
    list_display = ["title", "slug", "date", "time", "mode", "created_at"]
    list_filter = ["mode"]
    search_fields = ["title", "slug", "location", "organizer"]
    readonly_fields = ["slug", "created_at", "updated_at"]
