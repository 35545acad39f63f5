"""URL routing configuration for the feed application."""

from django.urls import path

from .views import (
    FeedPageView,
    LivenessCheckView,
    MarkAllReadView,
    NotificationReadView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    # Feed endpoints
    path(
        "users/<str:user_id>/notifications/feed",
        FeedPageView.as_view(),
        name="notification-feed",
    ),
    path(
        "users/<str:user_id>/notifications/read-all",
        MarkAllReadView.as_view(),
        name="notification-read-all",
    ),
    path(
        "users/<str:user_id>/notifications/<str:notification_id>/read",
        NotificationReadView.as_view(),
        name="notification-read",
    ),
]
