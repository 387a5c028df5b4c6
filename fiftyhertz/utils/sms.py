"""
SMS utilities for sending one-time codes
"""
import logging
import requests
from fiftyhertz.core.config import settings

logger = logging.getLogger(__name__)


def sms_enabled() -> bool:
    return bool(settings.SMS_API_KEY)


def send_otp_sms(phone: str, otp: str) -> dict:
    """
    Send an OTP via the configured provider

    Returns: {'success': bool, 'message_id': str} or {'success': False, 'error': str}
    """
    if settings.SMS_GATEWAY_DEFAULT == "msg91":
        return send_msg91_otp(phone, otp)

    # Add other providers here
    return {"success": False, "error": "Unknown provider"}


def send_msg91_otp(phone: str, otp: str) -> dict:
    """
    Send OTP via MSG91 API
    """
    api_key = settings.SMS_API_KEY
    if not api_key:
        return {"success": False, "error": "SMS API key not configured"}

    url = f"{settings.SMS_API_URL.rstrip('/')}/otp"

    try:
        response = requests.post(
            url,
            params={"mobile": phone, "otp": otp, "sender": settings.SMS_SENDER_ID},
            headers={"authkey": api_key},
            timeout=settings.SMS_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()

        return {
            "success": data.get("type") == "success",
            "message_id": str(data.get("request_id", "")),
        }
    except requests.RequestException as e:
        logger.warning("SMS delivery to %s failed: %s", phone, e)
        return {"success": False, "error": str(e)}
