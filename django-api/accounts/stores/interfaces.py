"""Store interfaces for user accounts."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from accounts.domain import Notification, UserAccount


class UserStore(ABC):
    """Interface for account persistence operations."""

    @abstractmethod
    def get_user(self, user_id: str) -> UserAccount | None:
        """Return an account by ID, or None if not found."""
        ...

    @abstractmethod
    def update_notifications(
        self,
        user_id: str,
        change: Callable[[list[Notification]], list[Notification]],
    ) -> UserAccount:
        """Apply ``change`` to the user's inbox and persist the result.

        The read and the write happen under a row lock so concurrent inbox
        updates for the same user do not drop each other's entries.

        Raises:
            UserNotFoundError: If the account does not exist.
        """
        ...
