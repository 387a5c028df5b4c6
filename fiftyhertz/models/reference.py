"""
Reference (lookup) data shown in the mobile app.

Every lookup table carries one display name per supported language and is
soft-deleted through its status column.
"""
from datetime import datetime
from typing import Optional
from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from fiftyhertz.core.database import Base
from fiftyhertz.models.enums import RecordStatus, enum_column
from fiftyhertz.utils.datetime_utils import utcnow, format_datetime

NAME_COLUMNS = ("name_en", "name_pa", "name_bgc_in", "name_hi", "name_raj_in")


class SoftDeleteMixin:
    status: Mapped[RecordStatus] = mapped_column(enum_column(RecordStatus), default=RecordStatus.ACTIVE)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    @property
    def is_active(self) -> bool:
        return self.status == RecordStatus.ACTIVE


class MultilingualLookup(SoftDeleteMixin):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name_en: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    name_pa: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    name_bgc_in: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    name_hi: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    name_raj_in: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    def to_dict(self) -> dict:
        data = {"id": self.id}
        for column in NAME_COLUMNS:
            data[column] = getattr(self, column)
        data["status"] = self.status.value
        data["created_at"] = format_datetime(self.created_at)
        data["updated_at"] = format_datetime(self.updated_at)
        return data


class CropType(MultilingualLookup, Base):
    __tablename__ = "crop_types"


class Harvester(MultilingualLookup, Base):
    __tablename__ = "harvesters"


class TransportArrangement(MultilingualLookup, Base):
    __tablename__ = "transport_arrangements"


class LandSizeUnit(MultilingualLookup, Base):
    __tablename__ = "land_size_units"


class VideoTutorial(SoftDeleteMixin, Base):
    __tablename__ = "video_tutorials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    video_url: Mapped[str] = mapped_column(Text)
    language_code: Mapped[str] = mapped_column(String(10), index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "video_url": self.video_url,
            "language_code": self.language_code,
            "status": self.status.value,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at),
        }
