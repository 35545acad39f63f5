"""Production server startup script for the activity service."""

import os
import sys

from gunicorn.app.wsgiapp import run


def build_gunicorn_argv() -> list[str]:
    """Gunicorn command line, tunable through PORT, WEB_WORKERS and WEB_THREADS."""
    return [
        "gunicorn",
        "activity_service.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("WEB_WORKERS", "4"),
        "--threads",
        os.getenv("WEB_THREADS", "2"),
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start the activity service under Gunicorn."""
    sys.argv = build_gunicorn_argv()
    run()


if __name__ == "__main__":
    main()
