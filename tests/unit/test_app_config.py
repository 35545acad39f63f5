"""Unit tests for the feed app configuration."""

from unittest.mock import patch

from django.apps import apps
from django.conf import settings
from django.test import SimpleTestCase

from feed.apps import FeedConfig


class TestFeedAppConfig(SimpleTestCase):
    """Tests for FeedConfig and its registration."""

    def test_feed_app_is_installed(self):
        self.assertIn("feed", settings.INSTALLED_APPS)
        self.assertTrue(apps.is_installed("feed"))

    def test_registered_config_is_feed_config(self):
        self.assertIsInstance(apps.get_app_config("feed"), FeedConfig)

    @patch("feed.apps.logger")
    def test_ready_logs_store_backend(self, mock_logger):
        apps.get_app_config("feed").ready()

        self.assertIn("django", mock_logger.info.call_args.args)
