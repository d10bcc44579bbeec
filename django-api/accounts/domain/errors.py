"""Domain errors for accounts and notifications."""

from events.domain.errors import DomainError, ErrorCode


class UserNotFoundError(DomainError):
    """Raised when a user account does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
        )
        self.user_id = user_id


class InvalidUserIdError(DomainError):
    """Raised when a user ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_USER_ID,
            message="Invalid user ID format",
        )


class NotificationNotFoundError(DomainError):
    """Raised when a notification is not in the user's inbox."""

    def __init__(self, notification_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOTIFICATION_NOT_FOUND,
            message="Notification not found",
        )
        self.notification_id = notification_id
