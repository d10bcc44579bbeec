"""In-memory test doubles and builders shared by the unit tests."""

import copy
import threading
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from accounts.domain import Actor, Notification, Role, UserAccount
from accounts.domain.errors import UserNotFoundError
from accounts.stores.interfaces import UserStore
from events.domain import (
    Capacity,
    Event,
    EventId,
    EventStatus,
    Money,
    TicketType,
    TicketTypeId,
)
from events.domain.errors import ConcurrencyConflictError, EventNotFoundError
from events.stores.interfaces import EventStore

NOW = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return NOW


def make_ticket_type(**overrides) -> TicketType:
    fields = {
        "id": TicketTypeId.new(),
        "name": "General Admission",
        "price": Money(Decimal("10.00")),
        "quantity": Capacity(100),
    }
    fields.update(overrides)
    return TicketType(**fields)


def make_event(**overrides) -> Event:
    fields = {
        "id": EventId.new(),
        "title": "PyCon Local",
        "description": "A day of talks",
        "location": "Main Hall",
        "start_date": NOW + timedelta(days=30),
        "end_date": NOW + timedelta(days=31),
        "organizer_id": "organizer-1",
        "organizer_name": "Olive Organizer",
        "status": EventStatus.PUBLISHED,
        "ticket_types": [make_ticket_type()],
    }
    fields.update(overrides)
    return Event(**fields)


def make_actor(user_id: str = "attendee-1", *roles: Role) -> Actor:
    return Actor(
        user_id=user_id,
        name=f"User {user_id}",
        email=f"{user_id}@example.com",
        roles=frozenset(roles or {Role.ATTENDEE}),
    )


class InMemoryEventStore(EventStore):
    """Thread-safe store with the same conditional-write contract as the ORM store.

    ``after_read`` runs after every get_event outside the lock, which lets
    tests line concurrent readers up before anyone writes.
    """

    def __init__(self, *events: Event, after_read=None) -> None:
        self._lock = threading.Lock()
        self._events: dict[EventId, Event] = {}
        self._after_read = after_read
        self.reads = 0
        self.writes = 0
        for event in events:
            self.add_event(event)

    def list_events(self) -> list[Event]:
        with self._lock:
            return [copy.deepcopy(e) for e in self._events.values()]

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            self.reads += 1
            event = copy.deepcopy(self._events.get(event_id))
        if self._after_read is not None:
            self._after_read()
        return event

    def event_exists(self, event_id: EventId) -> bool:
        with self._lock:
            return event_id in self._events

    def add_event(self, event: Event) -> Event:
        stored = replace(event, version=1, created_at=event.created_at or NOW)
        with self._lock:
            self._events[event.id] = copy.deepcopy(stored)
        return stored

    def save_event(self, event: Event, expected_version: int) -> Event:
        with self._lock:
            current = self._events.get(event.id)
            if current is None:
                raise EventNotFoundError(str(event.id))
            if current.version != expected_version:
                raise ConcurrencyConflictError(str(event.id))
            saved = replace(event, version=expected_version + 1)
            self._events[event.id] = copy.deepcopy(saved)
            self.writes += 1
            return saved

    def delete_event(self, event_id: EventId) -> None:
        with self._lock:
            self._events.pop(event_id, None)

    def list_by_organizer(self, organizer_id: str) -> list[Event]:
        return [e for e in self.list_events() if e.organizer_id == organizer_id]

    def list_published(self, category=None, starts_after=None, search=None) -> list[Event]:
        events = [e for e in self.list_events() if e.status is EventStatus.PUBLISHED]
        if category is not None:
            events = [e for e in events if e.category == category]
        if search:
            term = search.lower()
            events = [
                e for e in events if term in e.title.lower() or term in e.description.lower()
            ]
        if starts_after is not None:
            events = sorted(
                (e for e in events if e.start_date > starts_after), key=lambda e: e.start_date
            )
        return events

    def list_for_attendee(self, user_id: str) -> list[Event]:
        return [
            e for e in self.list_events() if any(r.user_id == user_id for r in e.registrations)
        ]


class AlwaysConflictingEventStore(InMemoryEventStore):
    """Every conditional write loses."""

    def save_event(self, event: Event, expected_version: int) -> Event:
        raise ConcurrencyConflictError(str(event.id))


class FirstReadsRendezvous:
    """Blocks the first ``parties`` readers until all of them have read."""

    def __init__(self, parties: int) -> None:
        self._barrier = threading.Barrier(parties, timeout=5)
        self._remaining = parties
        self._lock = threading.Lock()

    def __call__(self) -> None:
        with self._lock:
            if self._remaining == 0:
                return
            self._remaining -= 1
        self._barrier.wait()


class InMemoryUserStore(UserStore):
    def __init__(self, *users: UserAccount) -> None:
        self._lock = threading.Lock()
        self._users = {u.id: u for u in users}

    def get_user(self, user_id: str) -> UserAccount | None:
        return self._users.get(user_id)

    def update_notifications(self, user_id, change) -> UserAccount:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            updated = replace(user, notifications=tuple(change(list(user.notifications))))
            self._users[user_id] = updated
            return updated


class RecordingNotifier:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    def notify_registration_confirmed(self, user_id: str, event_title: str, event_id: str):
        self.calls.append((user_id, event_title, event_id))


class FailingNotifier:
    def __init__(self) -> None:
        self.attempts = 0

    def notify_registration_confirmed(self, user_id: str, event_title: str, event_id: str):
        self.attempts += 1
        raise RuntimeError("inbox unavailable")


def make_notification(**overrides) -> Notification:
    fields = {
        "id": "n-1",
        "title": "Hello",
        "message": "Welcome",
        "type": "GENERAL",
        "created_at": NOW,
    }
    fields.update(overrides)
    return Notification(**fields)
