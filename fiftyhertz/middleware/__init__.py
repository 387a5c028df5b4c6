"""
HTTP middleware
"""
from .error_envelope import ErrorEnvelopeMiddleware
from .rate_limit import limiter, rate_limit_exceeded_handler
from .security_headers import SecurityHeadersMiddleware

__all__ = ["ErrorEnvelopeMiddleware", "SecurityHeadersMiddleware", "limiter", "rate_limit_exceeded_handler"]
