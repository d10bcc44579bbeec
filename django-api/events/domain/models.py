"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).

The Event is the aggregate root and the unit of atomicity: ticket types,
registrations, speakers and agenda are owned by value and are written back
together with the event.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from events.domain.lifecycle import EventStatus
from events.domain.value_objects import (
    Capacity,
    ConfirmationCode,
    EventId,
    Money,
    RegistrationId,
    TicketTypeId,
)


class RegistrationStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    PENDING = "PENDING"


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    name: str
    price: Money
    quantity: Capacity
    sold: int = 0
    description: str = ""
    sale_start_date: datetime | None = None
    sale_end_date: datetime | None = None
    is_available: bool = True

    def __post_init__(self) -> None:
        if self.sold < 0:
            raise ValueError("Sold count cannot be negative")

    @property
    def remaining(self) -> int | None:
        """Tickets left, or None when capacity is unlimited."""
        if self.quantity.is_unlimited:
            return None
        return max(self.quantity.value - self.sold, 0)


@dataclass(frozen=True)
class Registration:
    """A confirmed binding of one user to one ticket type within an event.

    User and ticket type names are snapshots taken at registration time.
    """

    id: RegistrationId
    user_id: str
    user_name: str
    user_email: str
    ticket_type_id: TicketTypeId
    ticket_type_name: str
    amount_paid: Money
    status: RegistrationStatus
    registered_at: datetime
    confirmation_code: ConfirmationCode
    session_ids: tuple[str, ...] = ()
    attendee_info: dict[str, str] = field(default_factory=dict)

    @property
    def is_confirmed(self) -> bool:
        return self.status is RegistrationStatus.CONFIRMED


@dataclass(frozen=True)
class Speaker:
    id: str
    name: str
    bio: str = ""
    photo_url: str | None = None
    company: str = ""
    job_title: str = ""
    social_links: tuple[str, ...] = ()


@dataclass(frozen=True)
class Session:
    """A slot inside an agenda item (workshop, panel, talk)."""

    id: str
    title: str
    description: str = ""
    location: str = ""
    start_time: datetime | None = None
    end_time: datetime | None = None
    speaker_ids: tuple[str, ...] = ()
    capacity: int = 0
    session_type: str = ""
    additional_info: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AgendaItem:
    id: str
    title: str
    description: str = ""
    start_time: datetime | None = None
    end_time: datetime | None = None
    type: str = ""
    sessions: tuple[Session, ...] = ()


@dataclass
class Event:
    """Domain representation of an Event aggregate.

    ``version`` is bumped by the store on every successful write and is the
    token for conditional writes.
    """

    id: EventId
    title: str
    description: str
    location: str
    start_date: datetime
    end_date: datetime
    organizer_id: str
    organizer_name: str
    status: EventStatus = EventStatus.DRAFT
    category: str = ""
    image_url: str | None = None
    additional_info: dict[str, str] = field(default_factory=dict)
    speakers: list[Speaker] = field(default_factory=list)
    agenda: list[AgendaItem] = field(default_factory=list)
    ticket_types: list[TicketType] = field(default_factory=list)
    registrations: list[Registration] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    version: int = 0

    def is_owned_by(self, user_id: str) -> bool:
        return self.organizer_id == user_id
