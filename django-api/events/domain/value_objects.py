"""Domain primitives that enforce validity at creation time."""

import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID

UNLIMITED = -1


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid.uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketTypeId:
    """Unique identifier for a TicketType."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid.uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RegistrationId:
    """Unique identifier for a Registration."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid.uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Ticket capacity. ``UNLIMITED`` (-1) means no upper bound."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0 and self.value != UNLIMITED:
            raise ValueError("Capacity cannot be negative")

    @classmethod
    def unlimited(cls) -> Self:
        return cls(value=UNLIMITED)

    @property
    def is_unlimited(self) -> bool:
        return self.value == UNLIMITED

    def is_exhausted_by(self, sold: int) -> bool:
        return not self.is_unlimited and sold >= self.value


@dataclass(frozen=True)
class ConfirmationCode:
    """Short uppercase token handed to attendees."""

    value: str

    LENGTH = 8

    def __post_init__(self) -> None:
        if len(self.value) != self.LENGTH or self.value != self.value.upper():
            raise ValueError("Confirmation code must be 8 uppercase characters")

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid.uuid4().hex[: cls.LENGTH].upper())

    def __str__(self) -> str:
        return self.value
