from events.services.commands import (
    EventDetails,
    RegisterForEvent,
    RegistrationResult,
    TicketTypeSpec,
)
from events.services.event_service import EventService
from events.services.registration_service import RegistrationService

__all__ = [
    "EventService",
    "RegistrationService",
    "EventDetails",
    "TicketTypeSpec",
    "RegisterForEvent",
    "RegistrationResult",
]
