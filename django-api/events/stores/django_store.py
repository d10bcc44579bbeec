"""Django ORM implementation of the EventStore.

Writes to an existing event go through ``save_event``, a single
``UPDATE ... WHERE id = %s AND version = %s``. Two writers that read the
same version cannot both succeed, which is what keeps ticket counts and the
registration ledger from being overwritten by a stale copy.
"""

from dataclasses import replace
from datetime import datetime
from typing import Any

from django.db import transaction
from django.db.models import F, Q
from django.utils import timezone

from events import models
from events.cache import invalidate_event
from events.domain import Event, EventId, EventStatus
from events.domain.errors import ConcurrencyConflictError, EventNotFoundError
from events.stores import documents
from events.stores.interfaces import EventStore


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        location=row.location,
        start_date=row.start_date,
        end_date=row.end_date,
        organizer_id=row.organizer_id,
        organizer_name=row.organizer_name,
        status=EventStatus(row.status),
        category=row.category,
        image_url=row.image_url,
        additional_info=dict(row.additional_info or {}),
        speakers=[documents.speaker_from_document(d) for d in row.speakers],
        agenda=[documents.agenda_item_from_document(d) for d in row.agenda],
        ticket_types=[documents.ticket_type_from_document(d) for d in row.ticket_types],
        registrations=[documents.registration_from_document(d) for d in row.registrations],
        created_at=row.created_at,
        updated_at=row.updated_at,
        version=row.version,
    )


def _to_fields(event: Event) -> dict[str, Any]:
    return {
        "title": event.title,
        "description": event.description,
        "location": event.location,
        "start_date": event.start_date,
        "end_date": event.end_date,
        "organizer_id": event.organizer_id,
        "organizer_name": event.organizer_name,
        "status": event.status.value,
        "category": event.category,
        "image_url": event.image_url,
        "additional_info": dict(event.additional_info),
        "speakers": [documents.speaker_to_document(s) for s in event.speakers],
        "agenda": [documents.agenda_item_to_document(a) for a in event.agenda],
        "ticket_types": [documents.ticket_type_to_document(t) for t in event.ticket_types],
        "registrations": [
            documents.registration_to_document(r) for r in event.registrations
        ],
    }


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [_to_domain(row) for row in models.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_domain(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def add_event(self, event: Event) -> Event:
        row = models.Event.objects.create(id=event.id.value, version=1, **_to_fields(event))
        return _to_domain(row)

    def save_event(self, event: Event, expected_version: int) -> Event:
        now = timezone.now()
        with transaction.atomic():
            updated = models.Event.objects.filter(
                pk=event.id.value, version=expected_version
            ).update(
                version=F("version") + 1,
                updated_at=now,
                **_to_fields(event),
            )
            if updated == 0:
                if not models.Event.objects.filter(pk=event.id.value).exists():
                    raise EventNotFoundError(str(event.id))
                raise ConcurrencyConflictError(str(event.id))

        # Queryset updates bypass post_save, so the cache is cleared here.
        invalidate_event(str(event.id))
        return replace(event, version=expected_version + 1, updated_at=now)

    def delete_event(self, event_id: EventId) -> None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is not None:
            row.delete()

    def list_by_organizer(self, organizer_id: str) -> list[Event]:
        rows = models.Event.objects.filter(organizer_id=organizer_id)
        return [_to_domain(row) for row in rows]

    def list_published(
        self,
        category: str | None = None,
        starts_after: datetime | None = None,
        search: str | None = None,
    ) -> list[Event]:
        rows = models.Event.objects.filter(status=EventStatus.PUBLISHED.value)
        if category is not None:
            rows = rows.filter(category=category)
        if search:
            rows = rows.filter(Q(title__icontains=search) | Q(description__icontains=search))
        if starts_after is not None:
            rows = rows.filter(start_date__gt=starts_after).order_by("start_date")
        return [_to_domain(row) for row in rows]

    def list_for_attendee(self, user_id: str) -> list[Event]:
        # JSON containment lookups are not portable across backends, so the
        # ledger is scanned in Python.
        events = []
        for row in models.Event.objects.iterator():
            if any(r.get("user_id") == user_id for r in row.registrations):
                events.append(_to_domain(row))
        return events
