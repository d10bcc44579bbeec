"""Wires account services to their Django-backed collaborators."""

from accounts.services.notification_service import NotificationService
from accounts.stores import DjangoUserStore


def build_notification_service() -> NotificationService:
    return NotificationService(DjangoUserStore())
