"""
API error taxonomy

Every error carries the HTTP status it is answered with; the handlers in
core.responses turn them into the response envelope.
"""


class ApiError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class ConflictError(ValidationError):
    """The requested state change has already been applied"""


class AuthenticationError(ApiError):
    status_code = 401
    default_message = "Authentication required"


class InvalidOtpError(AuthenticationError):
    # Mobile clients expect 400 for a wrong or expired code
    status_code = 400
    default_message = "Invalid or expired OTP"


class AuthorizationError(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class InternalError(ApiError):
    status_code = 500
    default_message = "Internal server error"
