#!/usr/bin/env python
"""Run the activity service with Django's development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Start ``runserver`` on the port given by ``PORT`` (default 8000).

    Models are unmanaged, so there are no migrations to check before startup.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "activity_service.settings")
    port = os.getenv("PORT", "8000")
    execute_from_command_line([sys.argv[0], "runserver", f"127.0.0.1:{port}"])


if __name__ == "__main__":
    main()
