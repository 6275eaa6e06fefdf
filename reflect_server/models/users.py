# reflect_server/models/users.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reflect_server.db.database import Base
if TYPE_CHECKING:
    from reflect_server.models.health_entry import HealthEntry
    from reflect_server.models.journal import Journal
    from reflect_server.models.chat_message import ChatMessage
    from reflect_server.models.user_profile import UserProfile


class User(Base):
    __tablename__ = "users"

    # subject (sub) of the identity provider's access token
    user_id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        nullable=False,
    )

    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    username: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    full_name: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
    )

    health_entries: Mapped[List["HealthEntry"]] = relationship(
        "HealthEntry",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    journals: Mapped[List["Journal"]] = relationship(
        "Journal",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    chat_messages: Mapped[List["ChatMessage"]] = relationship(
        "ChatMessage",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    profile: Mapped[Optional["UserProfile"]] = relationship(
        "UserProfile",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        uselist=False,
    )

    mood_checkins = relationship(
        "MoodCheckIn",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
