# reflect_server/models/journal.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy import ForeignKey, String, DateTime, Text, Integer, Boolean, JSON, Index, func, Enum as SqlEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from reflect_server.db.database import Base
from reflect_server.models.health_entry import Mood

DEFAULT_JOURNAL_COLOR = "#6366f1"


class Journal(Base):
    __tablename__ = "journals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    color: Mapped[str] = mapped_column(String(16), nullable=False, default=DEFAULT_JOURNAL_COLOR)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now, onupdate=datetime.now
    )

    user = relationship("User", back_populates="journals")

    entries: Mapped[List["JournalEntry"]] = relationship(
        "JournalEntry",
        back_populates="journal",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    journal_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("journals.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    )

    title: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    mood: Mapped[Optional[Mood]] = mapped_column(SqlEnum(Mood, name="journal_mood"), nullable=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # derived from content on every write
    word_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reading_time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now, onupdate=datetime.now
    )

    __table_args__ = (
        Index("idx_journal_entries_journal_created", "journal_id", "created_at"),
    )

    journal = relationship("Journal", back_populates="entries")
