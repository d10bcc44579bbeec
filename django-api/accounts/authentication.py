"""Resolves the acting user from the header set by the authenticating gateway.

Token verification happens upstream; this only maps the forwarded user ID
to an account and its roles.
"""

from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

from accounts.domain import Actor
from accounts.services.factory import build_notification_service
from events.domain.errors import DomainError


class GatewayUser:
    """``request.user`` for requests carrying a known user ID."""

    is_authenticated = True

    def __init__(self, actor: Actor) -> None:
        self.actor = actor

    def __str__(self) -> str:
        return self.actor.email


class GatewayHeaderAuthentication(BaseAuthentication):
    header = "HTTP_X_USER_ID"

    def authenticate(self, request: Request) -> tuple[GatewayUser, None] | None:
        user_id = request.META.get(self.header)
        if not user_id:
            return None
        try:
            account = build_notification_service().get_user(user_id)
        except DomainError:
            raise AuthenticationFailed("Unknown user")
        if not account.enabled:
            raise AuthenticationFailed("User account is disabled")
        return GatewayUser(account.as_actor()), None

    def authenticate_header(self, request: Request) -> str:
        return "X-User-Id"


def actor_of(request: Request) -> Actor:
    return request.user.actor
