"""
Celery Tasks
"""
# Registers the configured app as current before the shared tasks are bound
from fiftyhertz.core.celery_app import celery_app  # noqa: F401
from .sms import send_otp_sms
from .cleanup import purge_expired_otps, purge_expired_tokens

__all__ = [
    "send_otp_sms",
    "purge_expired_otps",
    "purge_expired_tokens",
]
