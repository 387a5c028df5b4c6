"""
Request Schemas
"""
from .auth import GenerateOtpRequest, VerifyOtpRequest, SelectLanguageRequest
from .reference import LookupNamesRequest, RecordIdRequest, LanguageRequest, VideoTutorialRequest

__all__ = [
    "GenerateOtpRequest",
    "VerifyOtpRequest",
    "SelectLanguageRequest",
    "LookupNamesRequest",
    "RecordIdRequest",
    "LanguageRequest",
    "VideoTutorialRequest",
]
