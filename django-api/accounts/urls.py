from django.urls import path

from accounts.handlers.views import (
    NotificationDetailView,
    NotificationListView,
    NotificationReadAllView,
    NotificationReadView,
    UnreadNotificationListView,
    UserNotificationCreateView,
)

urlpatterns = [
    path("users/me/notifications", NotificationListView.as_view(), name="notification-list"),
    path(
        "users/me/notifications/unread",
        UnreadNotificationListView.as_view(),
        name="notification-unread",
    ),
    path(
        "users/me/notifications/read-all",
        NotificationReadAllView.as_view(),
        name="notification-read-all",
    ),
    path(
        "users/me/notifications/<str:notification_id>/read",
        NotificationReadView.as_view(),
        name="notification-read",
    ),
    path(
        "users/me/notifications/<str:notification_id>",
        NotificationDetailView.as_view(),
        name="notification-detail",
    ),
    path(
        "users/<str:user_id>/notifications",
        UserNotificationCreateView.as_view(),
        name="user-notification-create",
    ),
]
