"""Notification store clients."""

from django.conf import settings

from feed.services.store.base_store_client import NotificationStoreClient
from feed.services.store.django_store import DjangoNotificationStore
from feed.services.store.document_store_client import DocumentStoreClient

STORE_BACKENDS: dict[str, type[NotificationStoreClient]] = {
    "django": DjangoNotificationStore,
    "document": DocumentStoreClient,
}


def get_store_client(backend: str | None = None) -> NotificationStoreClient:
    """Build the store client selected by ``FEED_STORE_BACKEND``.

    Raises:
        ValueError: If the backend name is not known.
    """
    name = backend or getattr(settings, "FEED_STORE_BACKEND", "django")
    try:
        return STORE_BACKENDS[name]()
    except KeyError as err:
        raise ValueError(
            f"Unknown FEED_STORE_BACKEND {name!r}, "
            f"expected one of {sorted(STORE_BACKENDS)}"
        ) from err


__all__ = [
    "DjangoNotificationStore",
    "DocumentStoreClient",
    "NotificationStoreClient",
    "STORE_BACKENDS",
    "get_store_client",
]
