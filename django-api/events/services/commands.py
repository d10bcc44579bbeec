"""Service inputs and outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from events.domain import AgendaItem, Event, Registration, Speaker, TicketTypeId


@dataclass(frozen=True)
class TicketTypeSpec:
    """Requested ticket type. ``id`` is None for a new ticket type."""

    name: str
    price: Decimal
    quantity: int
    id: TicketTypeId | None = None
    description: str = ""
    sale_start_date: datetime | None = None
    sale_end_date: datetime | None = None
    is_available: bool = True


@dataclass(frozen=True)
class EventDetails:
    """Organizer-supplied event fields for create and update.

    Collections left as None are not touched on update.
    """

    title: str
    start_date: datetime
    end_date: datetime
    description: str = ""
    location: str = ""
    category: str = ""
    image_url: str | None = None
    additional_info: dict[str, str] = field(default_factory=dict)
    speakers: list[Speaker] | None = None
    agenda: list[AgendaItem] | None = None
    ticket_types: list[TicketTypeSpec] | None = None


@dataclass(frozen=True)
class RegisterForEvent:
    event_id: str
    ticket_type_id: str
    amount_paid: Decimal
    session_ids: tuple[str, ...] = ()
    attendee_info: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RegistrationResult:
    """The created registration and the event as it was committed."""

    registration: Registration
    event: Event
