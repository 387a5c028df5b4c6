"""
Celery tasks for SMS delivery
"""
import logging
from celery import shared_task
from fiftyhertz.utils.sms import send_otp_sms as deliver_otp

logger = logging.getLogger(__name__)


@shared_task(name="fiftyhertz.tasks.sms.send_otp_sms", bind=True, max_retries=3, default_retry_delay=10)
def send_otp_sms(self, phone: str, otp: str):
    """
    Deliver a one-time code, retrying provider failures
    """
    result = deliver_otp(phone, otp)
    if not result.get("success"):
        logger.warning("OTP SMS to %s not delivered: %s", phone, result.get("error"))
        if self.request.retries < self.max_retries:
            raise self.retry()
    return result
