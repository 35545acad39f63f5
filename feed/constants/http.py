"""HTTP header constants."""

REQUEST_ID_HEADER = "X-Request-ID"
