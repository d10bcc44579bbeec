"""Django ORM models for user accounts.

Notifications are embedded in the account row as a JSON array.
"""

import uuid

from django.db import models


class UserAccount(models.Model):
    """Persistence model for platform users."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    roles = models.JSONField(default=list, blank=True)
    enabled = models.BooleanField(default=True)
    notifications = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["email"]

    def __str__(self) -> str:
        return self.email
