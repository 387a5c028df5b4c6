"""
Phone number validation utilities
"""
import re
from fiftyhertz.core.config import settings

_SEPARATORS = re.compile(r"[\s\-().]")


def validate_phone(phone) -> tuple[bool, str]:
    """
    Validate a phone number

    Returns: (is_valid, formatted_number)
    Spaces, hyphens, dots and brackets are removed before matching PHONE_REGEX.
    """
    if phone is None:
        return False, ""

    formatted = _SEPARATORS.sub("", str(phone).strip())
    if not formatted:
        return False, ""

    if not re.match(settings.PHONE_REGEX, formatted):
        return False, ""

    return True, formatted
