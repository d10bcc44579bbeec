"""Registration ledger embedded in an Event."""

from events.domain.models import Event, Registration
from events.domain.value_objects import TicketTypeId


class RegistrationLedger:
    """Append-only view over an event's registrations."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def has_confirmed_registration(self, user_id: str) -> bool:
        return any(
            r.user_id == user_id and r.is_confirmed for r in self._event.registrations
        )

    def append(self, registration: Registration) -> None:
        # Duplicate checks belong to the caller's critical section.
        self._event.registrations = [*self._event.registrations, registration]

    def list_by_user(self, user_id: str) -> list[Registration]:
        return [r for r in self._event.registrations if r.user_id == user_id]

    def list_by_ticket_type(self, ticket_type_id: TicketTypeId) -> list[Registration]:
        return [r for r in self._event.registrations if r.ticket_type_id == ticket_type_id]

    def confirmed_count(self, ticket_type_id: TicketTypeId) -> int:
        return sum(1 for r in self.list_by_ticket_type(ticket_type_id) if r.is_confirmed)

    def confirmation_codes(self) -> set[str]:
        return {r.confirmation_code.value for r in self._event.registrations}

    def __len__(self) -> int:
        return len(self._event.registrations)
