"""URL configuration for the activity feed service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/activity/", include("feed.urls")),
]
