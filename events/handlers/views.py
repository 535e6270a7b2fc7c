"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import EventSerializer
from events.services import get_event_service

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_SLUG: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_SLUG_CHARACTERS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_REQUEST_PARAMETERS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DATABASE_CONFIGURATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def event_cache_key(slug: str) -> str:
    return f"events:{slug}"


def error_response(error: DomainError) -> Response:
    if error.code not in ERROR_STATUS:
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return Response({"error": error.message}, status=ERROR_STATUS[error.code])


class EventDetailView(APIView):
    """Handler for GET /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        service = get_event_service()
        try:
            event_slug = service.parse_slug(slug)
            timeout = settings.EVENTS_CACHE_TIMEOUT
            key = event_cache_key(event_slug.value)
            data = cache.get(key) if timeout > 0 else None
            if data is None:
                event = service.get_event(event_slug.value)
                data = dict(EventSerializer(event).data)
                if timeout > 0:
                    cache.set(key, data, timeout=timeout)
        except DomainError as exc:
            logger.warning("Error fetching event %r: %s", slug, exc)
            return error_response(exc)
        except Exception:
            logger.exception("Error fetching event %r", slug)
            return Response(
                {"error": INTERNAL_ERROR_MESSAGE},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response({"success": True, "data": data}, status=status.HTTP_200_OK)
