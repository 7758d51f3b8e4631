# common/middleware.py
import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """
    Log method, path, status and latency of every request.
    Only the presence of a bearer token is recorded, never its value or the body.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        has_token = request.headers.get("Authorization", "").startswith("Bearer ")

        response = self.get_response(request)

        logger.info(
            "%s %s -> %s (%.1f ms, %s)",
            request.method,
            request.path,
            response.status_code,
            (time.monotonic() - started) * 1000,
            "token present" if has_token else "no token",
        )
        return response
