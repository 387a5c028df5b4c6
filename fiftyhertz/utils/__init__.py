"""
Utility Functions
"""
from .phone_validator import validate_phone
from .otp import generate_otp, get_otp_expiry
from .datetime_utils import utcnow, format_datetime

__all__ = ["validate_phone", "generate_otp", "get_otp_expiry", "utcnow", "format_datetime"]
