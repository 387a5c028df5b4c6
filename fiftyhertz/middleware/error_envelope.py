"""
Last-resort error handling
Any exception that escapes the routers is logged and answered with a 500 envelope
"""
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from fiftyhertz.core.responses import failure

logger = logging.getLogger(__name__)


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return failure(500, "Internal server error")
