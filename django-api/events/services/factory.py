"""Wires services to their Django-backed collaborators."""

from django.conf import settings

from accounts.services.factory import build_notification_service
from events.services.concurrency import DEFAULT_MAX_ATTEMPTS
from events.services.event_service import EventService
from events.services.registration_service import RegistrationService
from events.stores import DjangoEventStore


def _max_attempts() -> int:
    return getattr(settings, "EVENTS_REGISTRATION_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)


def build_event_service() -> EventService:
    return EventService(DjangoEventStore(), max_attempts=_max_attempts())


def build_registration_service() -> RegistrationService:
    return RegistrationService(
        DjangoEventStore(),
        notifier=build_notification_service(),
        max_attempts=_max_attempts(),
    )
