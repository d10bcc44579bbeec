"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

The acting user is always passed in explicitly.
"""

import logging
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from django.utils import timezone

from accounts.domain import Actor
from events.domain import (
    AgendaItem,
    Capacity,
    Event,
    EventId,
    EventStatus,
    Money,
    Speaker,
    TicketType,
    TicketTypeId,
)
from events.domain.errors import (
    EventLockedError,
    EventNotFoundError,
    InvalidEventIdError,
    InvalidTicketTypeError,
    PermissionDeniedError,
)
from events.domain.lifecycle import transition
from events.services.commands import EventDetails, TicketTypeSpec
from events.services.concurrency import DEFAULT_MAX_ATTEMPTS, apply_to_event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidEventIdError()


def _new_id() -> str:
    return str(uuid.uuid4())


def _with_speaker_ids(speakers: list[Speaker]) -> list[Speaker]:
    return [s if s.id else replace(s, id=_new_id()) for s in speakers]


def _with_agenda_ids(agenda: list[AgendaItem]) -> list[AgendaItem]:
    items = []
    for item in agenda:
        sessions = tuple(s if s.id else replace(s, id=_new_id()) for s in item.sessions)
        items.append(replace(item, id=item.id or _new_id(), sessions=sessions))
    return items


def _merge_ticket_types(current: list[TicketType], specs: list[TicketTypeSpec]) -> list[TicketType]:
    """Build the new ticket type list, carrying sold counts over by ID."""
    existing = {t.id: t for t in current}
    merged = []
    for spec in specs:
        previous = existing.get(spec.id) if spec.id is not None else None
        sold = previous.sold if previous is not None else 0
        try:
            quantity = Capacity(spec.quantity)
            price = Money(spec.price)
        except ValueError as exc:
            raise InvalidTicketTypeError(str(exc))
        if not quantity.is_unlimited and quantity.value < sold:
            raise InvalidTicketTypeError(
                f"Quantity for {spec.name} cannot be lower than the {sold} tickets already sold"
            )
        merged.append(
            TicketType(
                id=previous.id if previous is not None else TicketTypeId.new(),
                name=spec.name,
                description=spec.description,
                price=price,
                quantity=quantity,
                sold=sold,
                sale_start_date=spec.sale_start_date,
                sale_end_date=spec.sale_end_date,
                is_available=spec.is_available,
            )
        )

    kept = {t.id for t in merged}
    for ticket_type in current:
        if ticket_type.id not in kept and ticket_type.sold > 0:
            raise InvalidTicketTypeError(
                f"Ticket type {ticket_type.name} has sales and cannot be removed"
            )
    return merged


class EventService:
    """Service for event catalog and lifecycle operations."""

    def __init__(
        self,
        store: EventStore,
        clock: Callable[[], datetime] = timezone.now,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._store = store
        self._clock = clock
        self._max_attempts = max_attempts

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def list_by_organizer(self, organizer_id: str) -> list[Event]:
        return self._store.list_by_organizer(organizer_id)

    def list_by_category(self, category: str) -> list[Event]:
        return self._store.list_published(category=category)

    def list_upcoming(self) -> list[Event]:
        return self._store.list_published(starts_after=self._clock())

    def search_events(self, term: str) -> list[Event]:
        return self._store.list_published(search=term)

    def events_for_attendee(self, user_id: str) -> list[Event]:
        return self._store.list_for_attendee(user_id)

    def create_event(self, details: EventDetails, actor: Actor) -> Event:
        """Create a DRAFT event owned by ``actor``.

        Raises:
            PermissionDeniedError: If the actor is neither organizer nor admin.
        """
        if not actor.can_organize:
            raise PermissionDeniedError("Only organizers can create events")

        event = Event(
            id=EventId.new(),
            title=details.title,
            description=details.description,
            location=details.location,
            start_date=details.start_date,
            end_date=details.end_date,
            organizer_id=actor.user_id,
            organizer_name=actor.name,
            status=EventStatus.DRAFT,
            category=details.category,
            image_url=details.image_url,
            additional_info=dict(details.additional_info),
            speakers=_with_speaker_ids(details.speakers or []),
            agenda=_with_agenda_ids(details.agenda or []),
            ticket_types=_merge_ticket_types([], details.ticket_types or []),
        )
        created = self._store.add_event(event)
        logger.info("Event %s created by %s", created.id, actor.user_id)
        return created

    def update_event(self, event_id: str, details: EventDetails, actor: Actor) -> Event:
        """Replace an event's fields.

        Cancelled and completed events keep their dates, location, ticket
        types and agenda; only descriptive fields may still change.

        Raises:
            InvalidEventIdError, EventNotFoundError, PermissionDeniedError,
            EventLockedError, InvalidTicketTypeError, ConcurrencyConflictError
        """
        parsed = parse_event_id(event_id)

        def apply(event: Event) -> None:
            self._authorize(event, actor, "update")

            ticket_types = (
                _merge_ticket_types(event.ticket_types, details.ticket_types)
                if details.ticket_types is not None
                else event.ticket_types
            )
            agenda = (
                _with_agenda_ids(details.agenda)
                if details.agenda is not None
                else event.agenda
            )

            if event.status.is_terminal:
                changed = [
                    name
                    for name, old, new in (
                        ("start_date", event.start_date, details.start_date),
                        ("end_date", event.end_date, details.end_date),
                        ("location", event.location, details.location),
                        ("ticket_types", event.ticket_types, ticket_types),
                        ("agenda", event.agenda, agenda),
                    )
                    if old != new
                ]
                if changed:
                    raise EventLockedError(str(event.id), changed)

            event.title = details.title
            event.description = details.description
            event.location = details.location
            event.start_date = details.start_date
            event.end_date = details.end_date
            event.category = details.category
            event.image_url = details.image_url
            event.additional_info = dict(details.additional_info)
            if details.speakers is not None:
                event.speakers = _with_speaker_ids(details.speakers)
            event.agenda = agenda
            event.ticket_types = ticket_types

        updated, _ = apply_to_event(self._store, parsed, apply, self._max_attempts)
        return updated

    def delete_event(self, event_id: str, actor: Actor) -> None:
        event = self.get_event(event_id)
        self._authorize(event, actor, "delete")
        self._store.delete_event(event.id)
        logger.info("Event %s deleted by %s", event.id, actor.user_id)

    def publish_event(self, event_id: str, actor: Actor) -> Event:
        return self._change_status(event_id, EventStatus.PUBLISHED, actor, "publish")

    def cancel_event(self, event_id: str, actor: Actor) -> Event:
        return self._change_status(event_id, EventStatus.CANCELLED, actor, "cancel")

    def complete_event(self, event_id: str, actor: Actor) -> Event:
        return self._change_status(event_id, EventStatus.COMPLETED, actor, "complete")

    def _change_status(
        self, event_id: str, target: EventStatus, actor: Actor, verb: str
    ) -> Event:
        parsed = parse_event_id(event_id)

        def apply(event: Event) -> None:
            self._authorize(event, actor, verb)
            event.status = transition(event.status, target)

        updated, _ = apply_to_event(self._store, parsed, apply, self._max_attempts)
        logger.info("Event %s is now %s", updated.id, updated.status.value)
        return updated

    @staticmethod
    def _authorize(event: Event, actor: Actor, verb: str) -> None:
        if not (event.is_owned_by(actor.user_id) or actor.is_admin):
            raise PermissionDeniedError(f"You can only {verb} your own events")
