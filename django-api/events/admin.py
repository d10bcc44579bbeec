from django.contrib import admin
from django.db.models import F

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "status", "organizer_name", "start_date", "version"]
    list_filter = ["status", "category"]
    search_fields = ["title", "location", "organizer_name"]
    # Inventory is only ever changed through the registration service.
    readonly_fields = ["ticket_types", "registrations", "version", "created_at", "updated_at"]

    def save_model(self, request, obj, form, change):
        if change:
            obj.version = F("version") + 1
        super().save_model(request, obj, form, change)
        obj.refresh_from_db(fields=["version"])
