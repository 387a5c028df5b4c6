"""
Cleanup tasks for expired one-time codes and session tokens
"""
import logging
from celery import shared_task
from fiftyhertz.core.database import database
from fiftyhertz.services import account, otp

logger = logging.getLogger(__name__)


def _open_session():
    if database.session_factory is None:
        database.init()
    return database.session()


@shared_task(name="fiftyhertz.tasks.cleanup.purge_expired_otps")
def purge_expired_otps():
    """
    Delete one-time codes past their expiry
    """
    db = _open_session()
    try:
        count = otp.purge_expired_otps(db)
        logger.info("[CLEANUP] Deleted %s expired OTPs", count)
        return {"success": True, "deleted_count": count}
    finally:
        db.close()


@shared_task(name="fiftyhertz.tasks.cleanup.purge_expired_tokens")
def purge_expired_tokens():
    """
    Delete session tokens past their stored expiry
    """
    db = _open_session()
    try:
        count = account.purge_expired_tokens(db)
        logger.info("[CLEANUP] Deleted %s expired session tokens", count)
        return {"success": True, "deleted_count": count}
    finally:
        db.close()
