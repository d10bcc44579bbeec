from accounts.domain.models import Actor, Notification, Role, UserAccount

__all__ = [
    "Actor",
    "Notification",
    "Role",
    "UserAccount",
]
