"""Domain models for user accounts and their notification inbox."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    ATTENDEE = "ATTENDEE"
    ORGANIZER = "ORGANIZER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Actor:
    """The authenticated caller, passed explicitly into every service call."""

    user_id: str
    name: str
    email: str
    roles: frozenset[Role] = frozenset({Role.ATTENDEE})

    @property
    def is_admin(self) -> bool:
        return Role.ADMIN in self.roles

    @property
    def can_organize(self) -> bool:
        return Role.ORGANIZER in self.roles or self.is_admin


@dataclass(frozen=True)
class Notification:
    """An inbox entry. Embedded in the owning user's account."""

    id: str
    title: str
    message: str
    type: str
    created_at: datetime
    read: bool = False
    related_entity_id: str | None = None


@dataclass(frozen=True)
class UserAccount:
    id: str
    email: str
    first_name: str
    last_name: str
    roles: frozenset[Role] = frozenset({Role.ATTENDEE})
    enabled: bool = True
    notifications: tuple[Notification, ...] = field(default=())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def as_actor(self) -> Actor:
        return Actor(
            user_id=self.id,
            name=self.full_name,
            email=self.email,
            roles=self.roles,
        )
