"""
Database Models
"""
from .enums import AccountStatus, AdminFlag, DeviceType, RecordStatus
from .user import User
from .otp import OtpCode
from .token import UserToken
from .reference import CropType, Harvester, LandSizeUnit, TransportArrangement, VideoTutorial

__all__ = [
    "AccountStatus",
    "AdminFlag",
    "DeviceType",
    "RecordStatus",
    "User",
    "OtpCode",
    "UserToken",
    "CropType",
    "Harvester",
    "LandSizeUnit",
    "TransportArrangement",
    "VideoTutorial",
]

# Export Base from database
from fiftyhertz.core.database import Base
