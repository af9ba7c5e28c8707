# common/middleware.py
import logging
import time

from django.core.exceptions import BadRequest, PermissionDenied, ValidationError
from django.http import Http404

from .responses import error_response

logger = logging.getLogger(__name__)


class JsonErrorMiddleware:
    """
    Last-resort error handler: whatever escapes a view comes back as the
    JSON error envelope instead of Django's HTML pages.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, Http404):
            return error_response(str(exception) or "Resource not found", status=404)

        if isinstance(exception, ValidationError):
            return error_response(", ".join(exception.messages), status=400)

        if isinstance(exception, BadRequest):
            return error_response(str(exception) or "Bad request", status=400)

        if isinstance(exception, PermissionDenied):
            return error_response(str(exception) or "Forbidden", status=403)

        logger.exception("Unhandled error on %s %s", request.method, request.path_info)
        return error_response("Internal server error", status=500)


class RequestLogMiddleware:
    """One DEBUG line per request (method, path, status, latency)."""
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        logger.debug(
            "[request] %s %s -> %s (%.1f ms)",
            request.method, request.path_info, response.status_code,
            (time.monotonic() - started) * 1000,
        )
        return response
