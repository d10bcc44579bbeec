"""Ticket type registry embedded in an Event."""

from dataclasses import replace
from datetime import datetime

from events.domain.errors import (
    TicketTypeNotFoundError,
    TicketUnavailableError,
    UnavailableReason,
)
from events.domain.models import Event, TicketType
from events.domain.value_objects import TicketTypeId


class TicketTypeRegistry:
    """Lookup and reservation over an event's ticket types.

    ``reserve`` mutates the event in memory only. Callers are responsible
    for writing the event back without interleaving another reservation
    on the same event.
    """

    def __init__(self, event: Event) -> None:
        self._event = event

    def find(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        for ticket_type in self._event.ticket_types:
            if ticket_type.id == ticket_type_id:
                return ticket_type
        return None

    def get(self, ticket_type_id: TicketTypeId) -> TicketType:
        ticket_type = self.find(ticket_type_id)
        if ticket_type is None:
            raise TicketTypeNotFoundError(str(ticket_type_id))
        return ticket_type

    def check_available(self, ticket_type: TicketType, now: datetime) -> None:
        """Raise TicketUnavailableError if ``ticket_type`` cannot be sold at ``now``."""
        reason = None
        if not ticket_type.is_available:
            reason = UnavailableReason.NOT_AVAILABLE
        elif ticket_type.quantity.is_exhausted_by(ticket_type.sold):
            reason = UnavailableReason.SOLD_OUT
        elif ticket_type.sale_start_date is not None and now < ticket_type.sale_start_date:
            reason = UnavailableReason.SALE_NOT_STARTED
        elif ticket_type.sale_end_date is not None and now > ticket_type.sale_end_date:
            reason = UnavailableReason.SALE_ENDED

        if reason is not None:
            raise TicketUnavailableError(str(ticket_type.id), reason)

    def reserve(self, ticket_type_id: TicketTypeId, now: datetime) -> TicketType:
        """Consume one ticket and return the updated ticket type.

        Raises:
            TicketTypeNotFoundError: If the event has no such ticket type.
            TicketUnavailableError: If the ticket type is off sale, sold out,
                or ``now`` is outside its sale window.
        """
        ticket_type = self.get(ticket_type_id)
        self.check_available(ticket_type, now)

        reserved = replace(ticket_type, sold=ticket_type.sold + 1)
        self._event.ticket_types = [
            reserved if t.id == ticket_type_id else t for t in self._event.ticket_types
        ]
        return reserved
