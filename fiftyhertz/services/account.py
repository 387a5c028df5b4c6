"""
Operations on the authenticated user's own account.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session
from fiftyhertz.core.database import unit_of_work
from fiftyhertz.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from fiftyhertz.core.security import AuthContext
from fiftyhertz.models import OtpCode, User, UserToken
from fiftyhertz.utils.datetime_utils import utcnow

logger = logging.getLogger(__name__)


def select_user_language(
    db: Session,
    auth: AuthContext,
    user_id: Optional[int],
    language_code: Optional[str],
    language_name: Optional[str],
) -> dict:
    if not user_id or not language_code or not language_name:
        raise ValidationError("user id, language code and language name are required")

    if int(user_id) != auth.user_id:
        raise AuthorizationError("Cannot change the language of another user")

    with unit_of_work(db):
        user = db.query(User).filter(User.id == auth.user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        user.language_code = language_code
        user.language_name = language_name
        user.updated_at = utcnow()

    return {"languageCode": language_code, "languageName": language_name}


def logout(db: Session, auth: AuthContext) -> None:
    """Revoke the presented token by deleting its row"""
    with unit_of_work(db):
        db.query(UserToken).filter(UserToken.token == auth.token).delete(synchronize_session=False)
    logger.info("User %s logged out", auth.user_id)


def delete_account(db: Session, auth: AuthContext) -> None:
    """Remove the user together with its tokens and pending codes"""
    with unit_of_work(db):
        user = db.query(User).filter(User.id == auth.user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        db.query(UserToken).filter(UserToken.user_id == user.id).delete(synchronize_session=False)
        db.query(OtpCode).filter(OtpCode.phone == user.phone).delete(synchronize_session=False)
        db.delete(user)
    logger.info("Deleted account %s", auth.user_id)


def purge_expired_tokens(db: Session) -> int:
    """Delete stored tokens past their expiry; returns the number removed"""
    with unit_of_work(db):
        count = (
            db.query(UserToken)
            .filter(UserToken.expires_at.isnot(None), UserToken.expires_at <= utcnow())
            .delete(synchronize_session=False)
        )
    return count
