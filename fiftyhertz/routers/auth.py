"""
Authentication and account endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from fiftyhertz.core.config import settings
from fiftyhertz.core.database import get_db
from fiftyhertz.core.responses import success
from fiftyhertz.core.security import AuthContext, authenticate
from fiftyhertz.schemas import GenerateOtpRequest, SelectLanguageRequest, VerifyOtpRequest
from fiftyhertz.services import account, otp

router = APIRouter(prefix=settings.API_PREFIX, tags=["auth"])


@router.get("/")
def base_api_route():
    """
    API liveness message
    """
    return success("50hertz backend api working properly")


@router.post("/generateOtp")
def generate_otp(body: GenerateOtpRequest, db: Session = Depends(get_db)):
    """
    Issue a one-time code for a phone number
    """
    result = otp.issue_otp(db, body.phone)
    return success("OTP sent successfully", result)


@router.post("/verifyOtp")
def verify_otp(body: VerifyOtpRequest, db: Session = Depends(get_db)):
    """
    Exchange a one-time code for a session token
    """
    result = otp.verify_otp(
        db,
        phone=body.phone,
        otp=body.otp,
        language_code=body.language_code,
        language_name=body.language_name,
        device_type=body.device_type,
        fcm_token=body.fcm_token,
    )
    return success("OTP verified successfully", result)


@router.post("/selectUserLanguage")
def select_user_language(
    body: SelectLanguageRequest,
    auth: AuthContext = Depends(authenticate),
    db: Session = Depends(get_db),
):
    result = account.select_user_language(db, auth, body.user_id, body.language_code, body.language_name)
    return success("Language updated successfully", result)


@router.get("/logout")
def logout(auth: AuthContext = Depends(authenticate), db: Session = Depends(get_db)):
    account.logout(db, auth)
    return success("Logged out successfully")


@router.post("/deleteAccount")
def delete_account(auth: AuthContext = Depends(authenticate), db: Session = Depends(get_db)):
    account.delete_account(db, auth)
    return success("Account deleted successfully")
