"""HTTP handlers for the current user's notification inbox."""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import actor_of
from accounts.handlers.serializers import NotificationRequestSerializer, NotificationSerializer
from accounts.services.factory import build_notification_service


class NotificationListView(APIView):
    """Handler for GET /api/users/me/notifications"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        notifications = build_notification_service().list_notifications(actor_of(request))
        return Response(NotificationSerializer(notifications, many=True).data)


class UnreadNotificationListView(APIView):
    """Handler for GET /api/users/me/notifications/unread"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        notifications = build_notification_service().list_unread(actor_of(request))
        return Response(NotificationSerializer(notifications, many=True).data)


class NotificationReadView(APIView):
    """Handler for PUT /api/users/me/notifications/{notification_id}/read"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request, notification_id: str) -> Response:
        notification = build_notification_service().mark_read(actor_of(request), notification_id)
        return Response(NotificationSerializer(notification).data)


class NotificationReadAllView(APIView):
    """Handler for PUT /api/users/me/notifications/read-all"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request) -> Response:
        build_notification_service().mark_all_read(actor_of(request))
        return Response(status=status.HTTP_204_NO_CONTENT)


class NotificationDetailView(APIView):
    """Handler for DELETE /api/users/me/notifications/{notification_id}"""

    permission_classes = [IsAuthenticated]

    def delete(self, request: Request, notification_id: str) -> Response:
        build_notification_service().delete_notification(actor_of(request), notification_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class UserNotificationCreateView(APIView):
    """Handler for POST /api/users/{user_id}/notifications (admin only)"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, user_id: str) -> Response:
        serializer = NotificationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        notification = build_notification_service().send_notification(
            actor_of(request), user_id, **serializer.validated_data
        )
        return Response(NotificationSerializer(notification).data, status=status.HTTP_201_CREATED)
