"""Optimistic read-modify-write over a single Event aggregate."""

import logging
from collections.abc import Callable
from typing import TypeVar

from events.domain import Event, EventId
from events.domain.errors import ConcurrencyConflictError, EventNotFoundError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3


def apply_to_event(
    store: EventStore,
    event_id: EventId,
    mutate: Callable[[Event], T],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> tuple[Event, T]:
    """Load the event, run ``mutate`` on it and write it back conditionally.

    Every attempt starts from a fresh load, so ``mutate`` only ever takes
    effect through the one write that succeeds. Domain errors raised by
    ``mutate`` abort without writing.

    Raises:
        EventNotFoundError: If the event does not exist.
        ConcurrencyConflictError: If every attempt lost to a concurrent write.
    """
    for attempt in range(1, max_attempts + 1):
        event = store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(str(event_id))

        expected_version = event.version
        result = mutate(event)
        try:
            return store.save_event(event, expected_version), result
        except ConcurrencyConflictError:
            if attempt == max_attempts:
                logger.warning(
                    "Giving up on event %s after %d conflicting writes", event_id, attempt
                )
                raise
            logger.warning(
                "Write conflict on event %s (attempt %d/%d), retrying",
                event_id,
                attempt,
                max_attempts,
            )

    raise ConcurrencyConflictError(str(event_id))
