"""
Two-value flags and other enumerations used by the models.

Values are the single-character codes kept in the database columns.
"""
import enum
from sqlalchemy import Enum as SAEnum


class DeviceType(str, enum.Enum):
    IOS = "I"
    ANDROID = "A"
    WEB = "W"


class AccountStatus(str, enum.Enum):
    ACTIVE = "1"
    INACTIVE = "0"


class AdminFlag(str, enum.Enum):
    ADMIN = "1"
    NON_ADMIN = "0"


class RecordStatus(str, enum.Enum):
    ACTIVE = "1"
    DELETED = "0"


def enum_column(enum_cls, length: int = 1):
    """SQLAlchemy Enum type persisting member values instead of names"""
    return SAEnum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        length=length,
        validate_strings=True,
    )
