"""
Request bodies for the authentication and account endpoints.

Every field is optional at this layer: a missing field is reported by the
service with a message naming what is required.
"""
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RequestBody(BaseModel):
    # Mobile clients send phone numbers and codes as JSON numbers too
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)


class GenerateOtpRequest(RequestBody):
    phone: Optional[str] = None


class VerifyOtpRequest(RequestBody):
    phone: Optional[str] = None
    otp: Optional[str] = None
    device_type: Optional[str] = Field(None, validation_alias=AliasChoices("deviceType", "device_type"))
    fcm_token: Optional[str] = Field(None, validation_alias=AliasChoices("fcmToken", "fcm_token"))
    language_code: Optional[str] = Field(None, validation_alias=AliasChoices("languageCode", "language_code"))
    language_name: Optional[str] = Field(None, validation_alias=AliasChoices("languageName", "language_name"))


class SelectLanguageRequest(RequestBody):
    user_id: Optional[int] = Field(None, validation_alias=AliasChoices("userId", "user_id"))
    language_code: Optional[str] = Field(None, validation_alias=AliasChoices("languageCode", "language_code"))
    language_name: Optional[str] = Field(None, validation_alias=AliasChoices("languageName", "language_name"))
