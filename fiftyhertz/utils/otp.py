"""
OTP generation and verification utilities
"""
import secrets
from datetime import datetime, timedelta
from fiftyhertz.core.config import settings
from fiftyhertz.utils.datetime_utils import utcnow


def generate_otp() -> str:
    """
    Generate random OTP code

    Returns: OTP_LENGTH-digit code without a leading zero (1000-9999 by default)
    """
    low = 10 ** (settings.OTP_LENGTH - 1)
    high = 10 ** settings.OTP_LENGTH - 1
    return str(low + secrets.randbelow(high - low + 1))


def get_otp_expiry() -> datetime:
    """Get expiry datetime for OTP"""
    return utcnow() + timedelta(seconds=settings.OTP_EXPIRY)
