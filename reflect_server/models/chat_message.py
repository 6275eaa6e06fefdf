# reflect_server/models/chat_message.py
from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, String, DateTime, Text, Integer, Boolean, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from reflect_server.db.database import Base

class ChatMessage(Base):
    __tablename__ = "chats"

    # append-only: rows are never updated or deleted
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    session_id: Mapped[str] = mapped_column(String(64), nullable=False)

    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_user_message: Mapped[bool] = mapped_column(Boolean, nullable=False)
    context_data: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)

    __table_args__ = (
        Index("idx_chats_user_session_created", "user_id", "session_id", "created_at"),
    )

    user = relationship("User", back_populates="chat_messages", uselist=False)
