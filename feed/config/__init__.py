"""Service configuration for the feed app."""
