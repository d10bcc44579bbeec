"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.

Ticket types, registrations, speakers and agenda are stored as JSON arrays
on the event row so that a registration is a single-row conditional update.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    class Status(models.TextChoices):
        DRAFT = "DRAFT"
        PUBLISHED = "PUBLISHED"
        CANCELLED = "CANCELLED"
        COMPLETED = "COMPLETED"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    organizer_id = models.CharField(max_length=64, db_index=True)
    organizer_name = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.DRAFT)
    category = models.CharField(max_length=100, blank=True, db_index=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    additional_info = models.JSONField(default=dict, blank=True)
    speakers = models.JSONField(default=list, blank=True)
    agenda = models.JSONField(default=list, blank=True)
    ticket_types = models.JSONField(default=list, blank=True)
    registrations = models.JSONField(default=list, blank=True)
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="events_even_created_4b9a3c_idx"),
            models.Index(fields=["organizer_id", "status"], name="events_even_organiz_8e1f2d_idx"),
            models.Index(fields=["status", "start_date"], name="events_even_status_7c2a9b_idx"),
        ]

    def __str__(self) -> str:
        return self.title
