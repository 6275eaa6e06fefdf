# reflect_server/routers/moods.py
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from reflect_server.auth.dependencies import get_current_user
from reflect_server.db.database import get_db
from reflect_server.models.mood_checkin import MoodCheckIn
from reflect_server.models.users import User
from reflect_server.schemas.schema_profile import CreateMoodCheckIn, MoodCheckInItem

router = APIRouter(prefix="/moods", tags=["moods"])


@router.post("", response_model=MoodCheckInItem, status_code=status.HTTP_201_CREATED)
def create_mood_checkin(
    body: CreateMoodCheckIn,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = MoodCheckIn(
        user_id=current_user.user_id,
        mood=body.mood,
        mood_intensity=body.mood_intensity,
        notes=body.notes,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.get("", response_model=List[MoodCheckInItem])
def get_mood_history(
    limit: int = Query(default=50, ge=1, le=500),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mood check-ins, newest first."""
    return (
        db.query(MoodCheckIn)
        .filter(MoodCheckIn.user_id == current_user.user_id)
        .order_by(MoodCheckIn.created_at.desc(), MoodCheckIn.id.desc())
        .limit(limit)
        .all()
    )
