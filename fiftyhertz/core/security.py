"""
Session tokens, bearer authentication and admin authorization.
"""
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from fastapi import Depends, Header, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from fiftyhertz.core.config import settings
from fiftyhertz.core.database import get_db
from fiftyhertz.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    InternalError,
    NotFoundError,
)
from fiftyhertz.models import User, UserToken
from fiftyhertz.models.enums import AdminFlag
from fiftyhertz.utils.datetime_utils import utcnow

logger = logging.getLogger(__name__)


@dataclass
class AuthContext:
    """Identity attached to an authenticated request"""

    # Plain values copied from the token row, usable after the row is deleted
    claims: dict
    user_id: int
    token: str


def create_access_token(user_id: int, phone: str, expires_delta: Optional[timedelta] = None) -> tuple[str, datetime]:
    """
    Sign a session token for the user.

    Returns the token and its expiry as a naive UTC datetime, the same
    instant that is written to the exp claim.
    """
    expires_delta = expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    issued_at = datetime.now(timezone.utc).replace(microsecond=0)
    expires_at = issued_at + expires_delta
    claims = {
        "user_id": user_id,
        "phone": phone,
        "iat": issued_at,
        "exp": expires_at,
        "jti": uuid.uuid4().hex,
    }
    token = jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token, expires_at.replace(tzinfo=None)


def decode_access_token(token: str) -> dict:
    """
    Verify signature and exp claim.

    Raises AuthenticationError with a message telling the two failures apart.
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token")


def issue_session_token(db: Session, user: User) -> str:
    """
    Replace every stored token of the user with a freshly signed one.

    Runs inside the caller's transaction; the delete is flushed before the
    insert so a user never holds two rows.
    """
    token, expires_at = create_access_token(user.id, user.phone)
    db.query(UserToken).filter(UserToken.user_id == user.id).delete(synchronize_session=False)
    db.flush()
    db.add(UserToken(user_id=user.id, token=token, expires_at=expires_at))
    db.flush()
    return token


def _bearer_token(authorization: Optional[str]) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError("Authorization header missing or malformed")
    token = authorization[len("Bearer "):].strip()
    if not token:
        raise AuthenticationError("Authorization header missing or malformed")
    return token


def authenticate(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> AuthContext:
    """
    Require a valid bearer token that is still present in user_tokens
    """
    token = _bearer_token(authorization)
    claims = decode_access_token(token)

    try:
        record = db.query(UserToken).filter(UserToken.token == token).first()
    except SQLAlchemyError:
        logger.exception("Token lookup failed")
        raise InternalError()

    if record is None:
        logger.info("Rejected token for user %s: not in store", claims.get("user_id"))
        raise AuthenticationError("Token not found (user might be logged out)")

    # Checked apart from the exp claim so a stored expiry can be shortened on its own
    if record.expires_at is not None and utcnow() > record.expires_at:
        raise AuthenticationError("Token expired in database")

    auth = AuthContext(claims=claims, user_id=record.user_id, token=record.token)
    request.state.auth = auth
    return auth


def require_admin(auth: AuthContext = Depends(authenticate), db: Session = Depends(get_db)) -> AuthContext:
    """Require the authenticated user to hold the admin flag"""
    try:
        is_admin = db.query(User.is_admin).filter(User.id == auth.user_id).scalar()
        found = is_admin is not None
    except SQLAlchemyError:
        logger.exception("Admin lookup failed for user %s", auth.user_id)
        raise InternalError()

    if not found:
        raise NotFoundError("User not found")

    if is_admin != AdminFlag.ADMIN:
        raise AuthorizationError("Admin privileges required")

    return auth
