"""Event registration: the ticket inventory transaction.

A registration checks the event status, the user's existing registrations
and the requested ticket type, then increments the ticket type's sold count
and appends to the ledger. All of that is applied to one loaded copy of the
event and committed with a single conditional write, so concurrent
registrations against the same event either see each other's result or
lose the write and start over.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol
from uuid import UUID

from django.utils import timezone

from accounts.domain import Actor
from events.domain import (
    ConfirmationCode,
    Event,
    Money,
    Registration,
    RegistrationId,
    RegistrationLedger,
    RegistrationStatus,
    TicketTypeId,
    TicketTypeRegistry,
)
from events.domain.errors import (
    AlreadyRegisteredError,
    EventNotPublishedError,
    TicketTypeNotFoundError,
)
from events.services.commands import RegisterForEvent, RegistrationResult
from events.services.concurrency import DEFAULT_MAX_ATTEMPTS, apply_to_event
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class RegistrationNotifier(Protocol):
    def notify_registration_confirmed(
        self, user_id: str, event_title: str, event_id: str
    ) -> object: ...


def _parse_ticket_type_id(ticket_type_id: str) -> TicketTypeId:
    try:
        return TicketTypeId(UUID(ticket_type_id))
    except (ValueError, TypeError, AttributeError):
        raise TicketTypeNotFoundError(str(ticket_type_id))


def _new_confirmation_code(ledger: RegistrationLedger) -> ConfirmationCode:
    taken = ledger.confirmation_codes()
    code = ConfirmationCode.generate()
    while code.value in taken:
        code = ConfirmationCode.generate()
    return code


class RegistrationService:
    """Registers attendees against an event's ticket inventory."""

    def __init__(
        self,
        store: EventStore,
        notifier: RegistrationNotifier,
        clock: Callable[[], datetime] = timezone.now,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._clock = clock
        self._max_attempts = max_attempts

    def register_for_event(self, command: RegisterForEvent, actor: Actor) -> RegistrationResult:
        """Register ``actor`` for an event with one ticket of the requested type.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            EventNotPublishedError: If the event is not PUBLISHED.
            AlreadyRegisteredError: If the actor already holds a confirmed
                registration for the event.
            TicketTypeNotFoundError: If the ticket type is not on the event.
            TicketUnavailableError: If the ticket type is off sale, sold out,
                or outside its sale window.
            ConcurrencyConflictError: If concurrent writes kept winning.
        """
        event_id = parse_event_id(command.event_id)
        amount_paid = Money(command.amount_paid)

        def register(event: Event) -> Registration:
            if not event.status.accepts_registrations:
                raise EventNotPublishedError(str(event.id), event.status.value)

            ledger = RegistrationLedger(event)
            if ledger.has_confirmed_registration(actor.user_id):
                raise AlreadyRegisteredError(str(event.id), actor.user_id)

            ticket_type_id = _parse_ticket_type_id(command.ticket_type_id)
            now = self._clock()
            ticket_type = TicketTypeRegistry(event).reserve(ticket_type_id, now)

            registration = Registration(
                id=RegistrationId.new(),
                user_id=actor.user_id,
                user_name=actor.name,
                user_email=actor.email,
                ticket_type_id=ticket_type.id,
                ticket_type_name=ticket_type.name,
                amount_paid=amount_paid,
                status=RegistrationStatus.CONFIRMED,
                registered_at=now,
                confirmation_code=_new_confirmation_code(ledger),
                session_ids=tuple(command.session_ids),
                attendee_info=dict(command.attendee_info),
            )
            ledger.append(registration)
            return registration

        event, registration = apply_to_event(
            self._store, event_id, register, self._max_attempts
        )
        logger.info(
            "User %s registered for event %s with ticket %s (%s)",
            actor.user_id,
            event.id,
            registration.ticket_type_id,
            registration.confirmation_code,
        )

        self._notify(actor, event)
        return RegistrationResult(registration=registration, event=event)

    def _notify(self, actor: Actor, event: Event) -> None:
        # The registration is already committed; a lost notification must not undo it.
        try:
            self._notifier.notify_registration_confirmed(actor.user_id, event.title, str(event.id))
        except Exception:
            logger.exception(
                "Failed to send registration confirmation to user %s for event %s",
                actor.user_id,
                event.id,
            )
