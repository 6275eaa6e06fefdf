# reflect_server/routers/chat_message.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reflect_ai.core.chat_service import ChatService, RECENT_WINDOW
from reflect_ai.utils.metrics import MetricSnapshot
from reflect_server.auth.dependencies import get_current_user
from reflect_server.config.settings import settings
from reflect_server.db.database import get_db
from reflect_server.models.health_entry import HealthEntry
from reflect_server.models.users import User
from reflect_server.schemas.schema_chat import (
    CreateMessageReq,
    MessageItem,
    SessionResponse,
    TurnResponse,
)
from reflect_server.services.chat_write import append_message_row, load_history
from reflect_server.services.context import RequestContext, get_request_context
from reflect_server.services.health_entries import list_entries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chats", tags=["chat"])

chat_service = ChatService()


def _save_turn(
    db: Session,
    ctx: RequestContext,
    uid: str,
    session_id: str,
    message: str,
    is_user_message: bool,
    context_data: dict,
) -> None:
    """
    Store one turn. A storage failure does not break the conversation:
    the reply is still returned and the client gets a warning notice.
    """
    try:
        append_message_row(db, uid, session_id, message, is_user_message, context_data)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[chat] failed to save {'user' if is_user_message else 'bot'} turn uid={uid}: {e}")
        if is_user_message:
            description = "Message saved locally but may not be synced to database."
        else:
            description = "Response saved locally but may not be synced to database."
        ctx.notify("Warning", description, "error")


@router.post("/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def start_session(
    current_user: User = Depends(get_current_user),
    ctx: RequestContext = Depends(get_request_context),
):
    """
    Issues a new session id with the greeting and starter suggestions.
    Nothing is stored until the first message is sent.
    """
    greeting = chat_service.greeting()
    return SessionResponse(
        session_id=ctx.new_id(),
        greeting=greeting["response"],
        suggestions=greeting["suggestions"],
    )


@router.post("/messages", response_model=TurnResponse)
def send_message(
    req: CreateMessageReq,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    ctx: RequestContext = Depends(get_request_context),
):
    """
    1) store the user turn
    2) pick the reply (keyword groups, else a summary of the last 7 entries)
    3) store the bot turn
    4) return the reply with its follow-up suggestions

    session_id empty -> a new session is started and returned.
    """
    if len(req.message.encode("utf-8")) > settings.max_text_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message is too long.",
        )

    uid = current_user.user_id
    session_id = req.session_id or ctx.new_id()

    # plain values: a rollback in _save_turn expires ORM rows
    recent_entries = [
        MetricSnapshot.from_record(e) for e in list_entries(db, uid, limit=RECENT_WINDOW)
    ]
    entries_count = (
        db.query(func.count(HealthEntry.id))
        .filter(HealthEntry.user_id == uid)
        .scalar()
    )

    _save_turn(
        db, ctx, uid, session_id, req.message, True,
        {
            "entries_count": entries_count,
            "recent_entry_dates": [e.entry_date.isoformat() for e in recent_entries[:5]],
        },
    )

    reply = chat_service.select_response(req.message, recent_entries)

    _save_turn(
        db, ctx, uid, session_id, reply["response"], False,
        {
            "user_message": req.message,
            "suggestions": reply["suggestions"],
        },
    )

    return TurnResponse(
        session_id=session_id,
        response=reply["response"],
        suggestions=reply["suggestions"],
        topic=reply["topic"],
        notices=ctx.notices,
    )


@router.get("/messages", response_model=List[MessageItem])
def get_session_messages(
    session_id: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    All turns of one session, oldest first.
    ex) /chats/messages?session_id=session_1a2b...
    """
    return load_history(db, current_user.user_id, session_id)
