"""
User Model
"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from fiftyhertz.core.database import Base
from fiftyhertz.models.enums import AccountStatus, AdminFlag, DeviceType, enum_column
from fiftyhertz.utils.datetime_utils import utcnow, format_datetime


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    phone: Mapped[str] = mapped_column(String(20), unique=True, nullable=False, index=True)
    device_type: Mapped[DeviceType] = mapped_column(enum_column(DeviceType), default=DeviceType.WEB)
    status: Mapped[AccountStatus] = mapped_column(enum_column(AccountStatus), default=AccountStatus.ACTIVE)
    language_code: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    language_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_admin: Mapped[AdminFlag] = mapped_column(enum_column(AdminFlag), default=AdminFlag.NON_ADMIN)
    fcm_token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    tokens: Mapped[List["UserToken"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def to_dict(self) -> dict:
        """Profile as returned to the mobile client"""
        return {
            "id": self.id,
            "phone": self.phone,
            "device_type": self.device_type.value if self.device_type else None,
            "status": self.status.value if self.status else None,
            "language_code": self.language_code,
            "language_name": self.language_name,
            "is_admin": self.is_admin.value if self.is_admin else None,
            "fcm_token": self.fcm_token,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at),
        }

    def __repr__(self):
        return f"<User(id={self.id}, phone={self.phone}, is_admin={self.is_admin})>"
