"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> Event:
        """Insert a new event and return it with its initial version."""
        ...

    @abstractmethod
    def save_event(self, event: Event, expected_version: int) -> Event:
        """Write the whole aggregate back if nobody else wrote it since it was read.

        The write succeeds only when the stored version still equals
        ``expected_version``; the returned event carries the new version.

        Raises:
            ConcurrencyConflictError: If the stored version has moved on.
            EventNotFoundError: If the event was deleted in the meantime.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Delete an event. Deleting a missing event is a no-op."""
        ...

    @abstractmethod
    def list_by_organizer(self, organizer_id: str) -> list[Event]:
        """Return every event owned by an organizer, newest first."""
        ...

    @abstractmethod
    def list_published(
        self,
        category: str | None = None,
        starts_after: datetime | None = None,
        search: str | None = None,
    ) -> list[Event]:
        """Return PUBLISHED events matching all of the given filters.

        ``search`` matches title or description, case-insensitively.
        Results are ordered by start date when ``starts_after`` is given,
        newest first otherwise.
        """
        ...

    @abstractmethod
    def list_for_attendee(self, user_id: str) -> list[Event]:
        """Return events whose ledger holds a registration for ``user_id``."""
        ...
