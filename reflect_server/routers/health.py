# reflect_server/routers/health.py
import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from reflect_server.auth.dependencies import get_current_user
from reflect_server.db.database import get_db
from reflect_server.models.users import User
from reflect_server.services.context import RequestContext, get_request_context
from reflect_server.services.health_entries import (
    delete_health_entry,
    get_entry_by_date,
    list_entries,
    to_entry_item,
    upsert_health_entry,
)
from reflect_server.schemas.schema_health import (
    CreateHealthEntry,
    HealthEntryItem,
    ResponseHealthEntry,
    ResponseHealthEntryByDate,
    ResponseDeleteHealthEntry,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.post("/entries", response_model=ResponseHealthEntry)
def save_health_entry(
    body: CreateHealthEntry,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """
    Saves the day's metrics. entry_date defaults to today.

    Response message
    1. an entry already existed for that date: 'Health entry updated.'
    2. first save for that date: 'Health entry saved.'

    The health score in the response is computed from the saved metrics.
    """
    try:
        entry, created = upsert_health_entry(db, current_user.user_id, body)
        db.commit()
    except IntegrityError:
        # a concurrent save inserted the same date first
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An entry for this date was saved at the same time. Please try again.",
        )
    db.refresh(entry)

    item = to_entry_item(entry)
    if created:
        ctx.notify("Saved Successfully", f"Health entry saved. Score: {item.health_score}", "success")
    else:
        ctx.notify("Updated Successfully", f"Health entry updated. Score: {item.health_score}", "success")

    return ResponseHealthEntry(
        response_message="Health entry saved." if created else "Health entry updated.",
        created=created,
        entry=item,
        notices=ctx.notices,
    )


@router.get("/entries", response_model=List[HealthEntryItem])
def get_health_entries(
    limit: int | None = Query(default=None, ge=1, le=366),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    All entries of the user, newest first, each with its health score.

    ex) /health/entries?limit=30
    """
    return [to_entry_item(e) for e in list_entries(db, current_user.user_id, limit)]


@router.get("/entries/date", response_model=ResponseHealthEntryByDate)
def get_health_entry_by_date(
    requested_date: date = Query(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    ex) /health/entries/date?requested_date=2025-11-18

    1. entry exists: entry with its score
    2. no entry: entry is null
    """
    entry = get_entry_by_date(db, current_user.user_id, requested_date)
    return ResponseHealthEntryByDate(
        response_message=(
            f"Health entry for {requested_date}." if entry
            else "No health entry for this date."
        ),
        requested_date=requested_date,
        entry=to_entry_item(entry) if entry else None,
    )


@router.delete("/entries/{entry_id}", response_model=ResponseDeleteHealthEntry)
def remove_health_entry(
    entry_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    entry = delete_health_entry(db, current_user.user_id, entry_id)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Health entry not found.",
        )
    response = ResponseDeleteHealthEntry(
        response_message="Health entry deleted.",
        id=entry.id,
        entry_date=entry.entry_date,
    )
    db.commit()

    return response
