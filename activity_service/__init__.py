"""Django project package for the activity feed service."""
