"""Django ORM implementation of the UserStore."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from django.db import transaction

from accounts import models
from accounts.domain import Notification, Role, UserAccount
from accounts.domain.errors import UserNotFoundError
from accounts.stores.interfaces import UserStore


def notification_to_document(notification: Notification) -> dict[str, Any]:
    return {
        "id": notification.id,
        "title": notification.title,
        "message": notification.message,
        "type": notification.type,
        "created_at": notification.created_at.isoformat(),
        "read": notification.read,
        "related_entity_id": notification.related_entity_id,
    }


def notification_from_document(doc: dict[str, Any]) -> Notification:
    return Notification(
        id=doc["id"],
        title=doc["title"],
        message=doc["message"],
        type=doc["type"],
        created_at=datetime.fromisoformat(doc["created_at"]),
        read=doc.get("read", False),
        related_entity_id=doc.get("related_entity_id"),
    )


def _to_domain(row: models.UserAccount) -> UserAccount:
    return UserAccount(
        id=str(row.id),
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
        roles=frozenset(Role(r) for r in row.roles),
        enabled=row.enabled,
        notifications=tuple(notification_from_document(d) for d in row.notifications),
    )


class DjangoUserStore(UserStore):
    """Relational account store using Django ORM."""

    def get_user(self, user_id: str) -> UserAccount | None:
        row = models.UserAccount.objects.filter(pk=user_id).first()
        return _to_domain(row) if row is not None else None

    def update_notifications(
        self,
        user_id: str,
        change: Callable[[list[Notification]], list[Notification]],
    ) -> UserAccount:
        with transaction.atomic():
            row = models.UserAccount.objects.select_for_update().filter(pk=user_id).first()
            if row is None:
                raise UserNotFoundError(user_id)
            inbox = [notification_from_document(d) for d in row.notifications]
            row.notifications = [notification_to_document(n) for n in change(inbox)]
            row.save(update_fields=["notifications", "updated_at"])
        return _to_domain(row)
