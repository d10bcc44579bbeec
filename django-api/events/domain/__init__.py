from events.domain.ledger import RegistrationLedger
from events.domain.lifecycle import EventStatus
from events.domain.models import (
    AgendaItem,
    Event,
    Registration,
    RegistrationStatus,
    Session,
    Speaker,
    TicketType,
)
from events.domain.ticketing import TicketTypeRegistry
from events.domain.value_objects import (
    Capacity,
    ConfirmationCode,
    EventId,
    Money,
    RegistrationId,
    TicketTypeId,
)

__all__ = [
    "Event",
    "AgendaItem",
    "Session",
    "Speaker",
    "TicketType",
    "Registration",
    "RegistrationStatus",
    "EventStatus",
    "TicketTypeRegistry",
    "RegistrationLedger",
    "EventId",
    "TicketTypeId",
    "RegistrationId",
    "ConfirmationCode",
    "Money",
    "Capacity",
]
