"""Event lifecycle state machine.

DRAFT -> PUBLISHED -> CANCELLED | COMPLETED. CANCELLED and COMPLETED are
terminal. Registration is only legal while PUBLISHED.
"""

from enum import Enum

from events.domain.errors import InvalidStatusTransitionError


class EventStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    @property
    def accepts_registrations(self) -> bool:
        return self is EventStatus.PUBLISHED


TERMINAL_STATUSES = frozenset({EventStatus.CANCELLED, EventStatus.COMPLETED})

ALLOWED_TRANSITIONS: dict[EventStatus, frozenset[EventStatus]] = {
    EventStatus.DRAFT: frozenset({EventStatus.PUBLISHED}),
    EventStatus.PUBLISHED: frozenset({EventStatus.CANCELLED, EventStatus.COMPLETED}),
    EventStatus.CANCELLED: frozenset(),
    EventStatus.COMPLETED: frozenset(),
}


def can_transition(current: EventStatus, target: EventStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def transition(current: EventStatus, target: EventStatus) -> EventStatus:
    """Return ``target`` if the move is allowed.

    Raises:
        InvalidStatusTransitionError: For any move not in ALLOWED_TRANSITIONS,
            including re-entering the current status.
    """
    if not can_transition(current, target):
        raise InvalidStatusTransitionError(current.value, target.value)
    return target
