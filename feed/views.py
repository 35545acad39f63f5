"""API views for the feed application."""

import structlog
from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from feed.schemas.health import LivenessResponse
from feed.schemas.notification import FeedPageResponse
from feed.services.grouping_engine import group_notifications
from feed.services.message_formatter import render_group
from feed.services.store import get_store_client

logger = structlog.get_logger(__name__)


class LivenessCheckView(APIView):
    """Liveness probe endpoint.

    Returns 200 if the service is alive and running. Does not check the store.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        return Response(LivenessResponse().model_dump(), status=status.HTTP_200_OK)


class FeedPageView(APIView):
    """Grouped feed rows for one page of a user's notifications.

    Query parameters:
    - cursor: ``nextCursor`` from the previous response, omitted for page one
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, request, user_id):
        cursor = request.query_params.get("cursor") or None
        logger.info("Feed page request received", user_id=user_id, cursor=cursor)

        store = get_store_client()
        page = async_to_sync(store.fetch_notifications)(user_id, cursor=cursor)

        groups = group_notifications(page.items)
        response = FeedPageResponse(
            groups=[render_group(group) for group in groups],
            unread_total=sum(1 for record in page.items if not record.read),
            next_cursor=page.next_cursor,
        )
        return Response(
            response.model_dump(mode="json", by_alias=True),
            status=status.HTTP_200_OK,
        )


class NotificationReadView(APIView):
    """Mark one notification read. Idempotent."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def post(self, _request, user_id, notification_id):
        logger.info(
            "Mark read request received",
            user_id=user_id,
            notification_id=notification_id,
        )
        store = get_store_client()
        async_to_sync(store.mark_one_read)(notification_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MarkAllReadView(APIView):
    """Mark every notification of a user read."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def post(self, _request, user_id):
        logger.info("Mark all read request received", user_id=user_id)
        store = get_store_client()
        async_to_sync(store.mark_all_read)(user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
