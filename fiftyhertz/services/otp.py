"""
Phone login: one-time code issuance and verification.
"""
import logging
from typing import Optional
from kombu.exceptions import OperationalError
from sqlalchemy.orm import Session
from fiftyhertz.core.config import settings
from fiftyhertz.core.database import unit_of_work
from fiftyhertz.core.exceptions import InvalidOtpError, ValidationError
from fiftyhertz.core.security import issue_session_token
from fiftyhertz.models import OtpCode, User
from fiftyhertz.models.enums import DeviceType
from fiftyhertz.tasks.sms import send_otp_sms
from fiftyhertz.utils.datetime_utils import format_datetime, utcnow
from fiftyhertz.utils.otp import generate_otp, get_otp_expiry
from fiftyhertz.utils.phone_validator import validate_phone
from fiftyhertz.utils.sms import sms_enabled

logger = logging.getLogger(__name__)


def _normalize_phone(phone: Optional[str]) -> str:
    is_valid, formatted = validate_phone(phone)
    if not is_valid:
        raise ValidationError("Invalid phone number")
    return formatted


def _parse_device_type(device_type: Optional[str]) -> DeviceType:
    if not device_type:
        return DeviceType.WEB
    try:
        return DeviceType(device_type.strip().upper())
    except ValueError:
        raise ValidationError("Invalid device type")


def issue_otp(db: Session, phone: Optional[str]) -> dict:
    """
    Replace any code held by the phone with a new one.

    Returns the payload of /generateOtp: id, phone, otp and expiresAt.
    """
    if not phone:
        raise ValidationError("Phone number is required")
    phone = _normalize_phone(phone)

    code = generate_otp()
    expires_at = get_otp_expiry()

    with unit_of_work(db):
        db.query(OtpCode).filter(OtpCode.phone == phone).delete(synchronize_session=False)
        otp = OtpCode(phone=phone, otp_code=code, expires_at=expires_at)
        db.add(otp)
        db.flush()
        otp_id = otp.id

    if sms_enabled():
        try:
            send_otp_sms.delay(phone, code)
        except OperationalError:
            # The code is already stored; the client can ask for a new one
            logger.exception("Could not queue OTP SMS for %s", phone)

    logger.info("Issued OTP %s for %s", otp_id, phone)

    result = {"id": otp_id, "phone": phone, "otp": code, "expiresAt": format_datetime(expires_at)}
    if not settings.OTP_RETURN_IN_RESPONSE:
        del result["otp"]
    return result


def verify_otp(
    db: Session,
    phone: Optional[str],
    otp: Optional[str],
    language_code: Optional[str],
    language_name: Optional[str],
    device_type: Optional[str] = None,
    fcm_token: Optional[str] = None,
) -> dict:
    """
    Exchange a valid code for a session token, creating the user on first login.

    The code is consumed, the user found or created, and the user's previous
    tokens replaced, all in one transaction.
    """
    if not phone or not otp or not language_code or not language_name:
        raise ValidationError("Phone number, OTP, language code and language name are required")
    phone = _normalize_phone(phone)
    device = _parse_device_type(device_type)

    with unit_of_work(db):
        otp_row = (
            db.query(OtpCode)
            .filter(
                OtpCode.phone == phone,
                OtpCode.otp_code == str(otp).strip(),
                OtpCode.expires_at > utcnow(),
            )
            .order_by(OtpCode.id.desc())
            .with_for_update()
            .first()
        )
        if otp_row is None:
            logger.info("OTP verification failed for %s", phone)
            raise InvalidOtpError("Invalid or expired OTP")

        # Single use
        db.delete(otp_row)
        db.flush()

        user = db.query(User).filter(User.phone == phone).first()
        if user is None:
            user = User(
                phone=phone,
                device_type=device,
                language_code=language_code,
                language_name=language_name,
                fcm_token=fcm_token or "",
            )
            db.add(user)
            db.flush()
            logger.info("Created user %s for %s", user.id, phone)

        token = issue_session_token(db, user)

    db.refresh(user)
    return {"token": token, "userProfile": user.to_dict()}


def purge_expired_otps(db: Session) -> int:
    """Delete codes past their expiry; returns the number removed"""
    with unit_of_work(db):
        count = db.query(OtpCode).filter(OtpCode.expires_at <= utcnow()).delete(synchronize_session=False)
    return count
