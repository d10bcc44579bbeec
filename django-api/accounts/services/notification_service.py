"""Notification inbox service.

Besides the inbox operations, this is the dispatcher the registration
engine calls after a registration has been committed.
"""

import logging
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime
from uuid import UUID

from django.utils import timezone

from accounts.domain import Actor, Notification, UserAccount
from accounts.domain.errors import InvalidUserIdError, NotificationNotFoundError, UserNotFoundError
from accounts.stores.interfaces import UserStore
from events.domain.errors import PermissionDeniedError

logger = logging.getLogger(__name__)

REGISTRATION_CONFIRMATION = "REGISTRATION_CONFIRMATION"


def _validate_user_id(user_id: str) -> str:
    try:
        return str(UUID(user_id))
    except (ValueError, TypeError, AttributeError):
        raise InvalidUserIdError()


class NotificationService:
    """Service for a user's notification inbox."""

    def __init__(
        self,
        store: UserStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._clock = clock

    def get_user(self, user_id: str) -> UserAccount:
        """Return an account by ID.

        Raises:
            InvalidUserIdError: If the user_id is not a valid UUID.
            UserNotFoundError: If the account does not exist.
        """
        user_id = _validate_user_id(user_id)
        user = self._store.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        type: str,
        related_entity_id: str | None = None,
    ) -> Notification:
        user_id = _validate_user_id(user_id)
        notification = Notification(
            id=str(uuid.uuid4()),
            title=title,
            message=message,
            type=type,
            created_at=self._clock(),
            read=False,
            related_entity_id=related_entity_id,
        )
        self._store.update_notifications(user_id, lambda inbox: [*inbox, notification])
        return notification

    def send_notification(
        self,
        actor: Actor,
        user_id: str,
        title: str,
        message: str,
        type: str,
        related_entity_id: str | None = None,
    ) -> Notification:
        """Admin-only variant of create_notification."""
        if not actor.is_admin:
            raise PermissionDeniedError("Only admins can send notifications")
        return self.create_notification(user_id, title, message, type, related_entity_id)

    def notify_registration_confirmed(
        self, user_id: str, event_title: str, event_id: str
    ) -> Notification:
        notification = self.create_notification(
            user_id,
            title="Registration Confirmation",
            message=f"You have successfully registered for {event_title}",
            type=REGISTRATION_CONFIRMATION,
            related_entity_id=event_id,
        )
        logger.info("Registration confirmation queued for user %s, event %s", user_id, event_id)
        return notification

    def list_notifications(self, actor: Actor) -> list[Notification]:
        return list(self.get_user(actor.user_id).notifications)

    def list_unread(self, actor: Actor) -> list[Notification]:
        return [n for n in self.list_notifications(actor) if not n.read]

    def mark_read(self, actor: Actor, notification_id: str) -> Notification:
        """Mark one notification as read.

        Raises:
            NotificationNotFoundError: If the inbox has no such notification.
        """

        def change(inbox: list[Notification]) -> list[Notification]:
            if not any(n.id == notification_id for n in inbox):
                raise NotificationNotFoundError(notification_id)
            return [replace(n, read=True) if n.id == notification_id else n for n in inbox]

        user = self._store.update_notifications(_validate_user_id(actor.user_id), change)
        return next(n for n in user.notifications if n.id == notification_id)

    def mark_all_read(self, actor: Actor) -> None:
        self._store.update_notifications(
            _validate_user_id(actor.user_id),
            lambda inbox: [replace(n, read=True) for n in inbox],
        )

    def delete_notification(self, actor: Actor, notification_id: str) -> None:
        def change(inbox: list[Notification]) -> list[Notification]:
            remaining = [n for n in inbox if n.id != notification_id]
            if len(remaining) == len(inbox):
                raise NotificationNotFoundError(notification_id)
            return remaining

        self._store.update_notifications(_validate_user_id(actor.user_id), change)
