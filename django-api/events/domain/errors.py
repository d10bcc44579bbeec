"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    EVENT_NOT_PUBLISHED = "EVENT_NOT_PUBLISHED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    TICKET_UNAVAILABLE = "TICKET_UNAVAILABLE"
    CONCURRENCY_CONFLICT = "CONCURRENCY_CONFLICT"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
    EVENT_LOCKED = "EVENT_LOCKED"
    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_USER_ID = "INVALID_USER_ID"
    NOTIFICATION_NOT_FOUND = "NOTIFICATION_NOT_FOUND"


class UnavailableReason(Enum):
    """Why a ticket type cannot be reserved right now."""

    NOT_AVAILABLE = "NOT_AVAILABLE"
    SOLD_OUT = "SOLD_OUT"
    SALE_NOT_STARTED = "SALE_NOT_STARTED"
    SALE_ENDED = "SALE_ENDED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class TicketTypeNotFoundError(DomainError):
    """Raised when the event has no ticket type with the requested ID."""

    def __init__(self, ticket_type_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_TYPE_NOT_FOUND,
            message="Ticket type not found",
        )
        self.ticket_type_id = ticket_type_id


class EventNotPublishedError(DomainError):
    """Raised when registering for an event that is not PUBLISHED."""

    def __init__(self, event_id: str, status: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_PUBLISHED,
            message="Cannot register for an event that is not published",
        )
        self.event_id = event_id
        self.status = status


class AlreadyRegisteredError(DomainError):
    """Raised when the user already holds a confirmed registration."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="You are already registered for this event",
        )
        self.event_id = event_id
        self.user_id = user_id


_UNAVAILABLE_MESSAGES = {
    UnavailableReason.NOT_AVAILABLE: "This ticket type is not on sale",
    UnavailableReason.SOLD_OUT: "No tickets available for this ticket type",
    UnavailableReason.SALE_NOT_STARTED: "Ticket sales have not started yet",
    UnavailableReason.SALE_ENDED: "Ticket sales have ended",
}


class TicketUnavailableError(DomainError):
    """Raised when a ticket type cannot be reserved."""

    def __init__(self, ticket_type_id: str, reason: UnavailableReason) -> None:
        super().__init__(
            code=ErrorCode.TICKET_UNAVAILABLE,
            message=_UNAVAILABLE_MESSAGES[reason],
        )
        self.ticket_type_id = ticket_type_id
        self.reason = reason


class ConcurrencyConflictError(DomainError):
    """Raised when a conditional write lost against a concurrent writer.

    Safe to retry.
    """

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONCURRENCY_CONFLICT,
            message="The event was modified concurrently, please retry",
        )
        self.event_id = event_id


class InvalidStatusTransitionError(DomainError):
    """Raised when a lifecycle transition is not allowed."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS_TRANSITION,
            message=f"Cannot move an event from {current} to {target}",
        )
        self.current = current
        self.target = target


class EventLockedError(DomainError):
    """Raised when a structural edit targets a cancelled or completed event."""

    def __init__(self, event_id: str, fields: list[str]) -> None:
        super().__init__(
            code=ErrorCode.EVENT_LOCKED,
            message="Dates, location, ticket types and agenda cannot change "
            "once an event is cancelled or completed",
        )
        self.event_id = event_id
        self.fields = fields


class InvalidTicketTypeError(DomainError):
    """Raised when a ticket type change would break its sold count."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TICKET_TYPE, message=message)


class PermissionDeniedError(DomainError):
    """Raised when the actor may not perform the operation."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.PERMISSION_DENIED, message=message)
