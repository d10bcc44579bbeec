from django.urls import path

from events.handlers.views import (
    AttendeeEventListView,
    CategoryEventListView,
    EventCancelView,
    EventCompleteView,
    EventDetailView,
    EventListView,
    EventPublishView,
    EventRegistrationView,
    EventSearchView,
    OrganizerEventListView,
    UpcomingEventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/register", EventRegistrationView.as_view(), name="event-register"),
    path("events/upcoming", UpcomingEventListView.as_view(), name="event-upcoming"),
    path("events/search", EventSearchView.as_view(), name="event-search"),
    path(
        "events/category/<str:category>",
        CategoryEventListView.as_view(),
        name="event-category",
    ),
    path(
        "events/organizer/<str:organizer_id>",
        OrganizerEventListView.as_view(),
        name="event-organizer",
    ),
    path(
        "events/attendee/<str:user_id>",
        AttendeeEventListView.as_view(),
        name="event-attendee",
    ),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/publish", EventPublishView.as_view(), name="event-publish"),
    path("events/<str:event_id>/cancel", EventCancelView.as_view(), name="event-cancel"),
    path(
        "events/<str:event_id>/complete",
        EventCompleteView.as_view(),
        name="event-complete",
    ),
]
