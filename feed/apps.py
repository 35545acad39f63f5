"""Django application configuration for feed."""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class FeedConfig(AppConfig):
    """Configuration class for the feed application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "feed"

    def ready(self) -> None:
        """Log the configured store backend once the app registry is ready."""
        from django.conf import settings  # noqa: PLC0415

        logger.info(
            "Feed app ready, store backend: %s",
            getattr(settings, "FEED_STORE_BACKEND", "django"),
        )
