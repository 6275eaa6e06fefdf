# reflect_server/services/chat_write.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from reflect_server.models.chat_message import ChatMessage


def append_message_row(
    db: Session,
    uid: str,
    session_id: str,
    message: str,
    is_user_message: bool,
    context_data: Optional[dict] = None,
) -> ChatMessage:
    # append only; the caller commits
    row = ChatMessage(
        user_id=uid,
        session_id=session_id,
        message=message,
        is_user_message=is_user_message,
        context_data=context_data,
        created_at=datetime.now(),
    )
    db.add(row)
    db.flush()
    return row


def load_history(db: Session, uid: str, session_id: str) -> List[ChatMessage]:
    """Turns of one session, oldest first."""
    return (
        db.query(ChatMessage)
        .filter(
            ChatMessage.user_id == uid,
            ChatMessage.session_id == session_id,
        )
        .order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc())
        .all()
    )
