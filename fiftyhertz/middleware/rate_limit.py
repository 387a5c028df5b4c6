"""
Per-client request limiting
"""
from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from fiftyhertz.core.config import settings
from fiftyhertz.core.responses import failure


def build_limiter(max_requests: int, window: int) -> Limiter:
    """Limiter allowing max_requests per window seconds from each client address"""
    return Limiter(key_func=get_remote_address, default_limits=[f"{max_requests}/{window} seconds"])


limiter = build_limiter(settings.RATE_LIMIT_REQUESTS, settings.RATE_LIMIT_WINDOW)


# SlowAPIMiddleware calls this synchronously, so it must not be a coroutine
def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return failure(429, "Too many requests, please try again later.")
