"""Component tests for the liveness endpoint."""

from django.test import Client, SimpleTestCase


class TestLivenessEndpoint(SimpleTestCase):
    """GET /health/live through the full Django stack."""

    def test_liveness_returns_alive(self):
        response = Client().get("/api/v1/activity/health/live")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "alive", "service": "activity-service"})

    def test_response_carries_request_id(self):
        response = Client().get(
            "/api/v1/activity/health/live", HTTP_X_REQUEST_ID="probe-1"
        )

        self.assertEqual(response["X-Request-ID"], "probe-1")
