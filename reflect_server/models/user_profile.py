# reflect_server/models/user_profile.py
from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, String, DateTime, Text, Integer, Float, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from reflect_server.db.database import Base

class UserProfile(Base):
    __tablename__ = "user_profiles"

    # one profile per user
    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True,
    )

    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    height: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    health_goals: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    medical_conditions: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    medications: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    emergency_contact: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    doctor_info: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    additional_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now, onupdate=datetime.now
    )

    user = relationship("User", back_populates="profile")
