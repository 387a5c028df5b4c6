from datetime import datetime
from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from fiftyhertz.core.database import Base


class OtpCode(Base):
    __tablename__ = "otps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Not unique: one live row per phone is kept by delete-then-insert
    phone: Mapped[str] = mapped_column(String(20), index=True)
    otp_code: Mapped[str] = mapped_column(String(10))
    expires_at: Mapped[datetime] = mapped_column(DateTime)

    def __repr__(self):
        return f"<OtpCode(id={self.id}, phone={self.phone}, expires_at={self.expires_at})>"
