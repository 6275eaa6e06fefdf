# reflect_server/models/health_entry.py
import enum
from datetime import date, datetime
from typing import Optional

from sqlalchemy import ForeignKey, String, Date, DateTime, Text, Integer, Float, Index, UniqueConstraint, func, Enum as SqlEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from reflect_server.db.database import Base


class Mood(str, enum.Enum):
    excellent = "excellent"
    good = "good"
    neutral = "neutral"
    poor = "poor"
    terrible = "terrible"


class HealthEntry(Base):
    __tablename__ = "health_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    )

    # one entry per user per day (saves for the same day update in place)
    entry_date: Mapped[date] = mapped_column(Date, nullable=False)

    mood: Mapped[Optional[Mood]] = mapped_column(SqlEnum(Mood, name="health_mood"), nullable=True)

    sleep_hours: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    water_intake: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    exercise_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    energy_level: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    stress_level: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    symptoms: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
    )

    __table_args__ = (
        UniqueConstraint("user_id", "entry_date", name="uq_health_entries_user_date"),
        Index("idx_health_entries_user_date", "user_id", "entry_date"),
    )

    user = relationship("User", back_populates="health_entries")
