"""Downstream service URL configuration."""

import os

# Document store gateway used by DocumentStoreClient
DOCUMENT_STORE_BASE_URL = os.getenv(
    "DOCUMENT_STORE_BASE_URL", "http://localhost:8080/api/v1/documents"
)

DOCUMENT_STORE_TIMEOUT_SECONDS = int(os.getenv("DOCUMENT_STORE_TIMEOUT_SECONDS", "10"))
