# reflect_server/routers/stats.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from reflect_server.auth.dependencies import get_current_user
from reflect_server.db.database import get_db
from reflect_server.models.users import User
from reflect_server.schemas.schema_stats import ResponseStats
from reflect_server.services.stats import get_user_stats

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=ResponseStats)
def get_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Health score, streaks, 30-day trends, weekly summary and insight cards.
    Everything is recomputed from the stored entries on every call.
    """
    return get_user_stats(db, current_user.user_id)
