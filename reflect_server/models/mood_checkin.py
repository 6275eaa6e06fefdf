# reflect_server/models/mood_checkin.py
import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, String, DateTime, Text, Integer, Index, Enum as SqlEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from reflect_server.db.database import Base


class Feeling(str, enum.Enum):
    happy = "happy"
    sad = "sad"
    excited = "excited"
    calm = "calm"
    anxious = "anxious"
    grateful = "grateful"
    frustrated = "frustrated"
    peaceful = "peaceful"


class MoodCheckIn(Base):
    __tablename__ = "mood_checkins"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    )

    mood: Mapped[Feeling] = mapped_column(SqlEnum(Feeling, name="checkin_mood"), nullable=False)
    mood_intensity: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)

    __table_args__ = (
        Index("idx_mood_checkins_user_created", "user_id", "created_at"),
    )

    user = relationship("User", back_populates="mood_checkins")
