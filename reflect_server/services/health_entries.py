# reflect_server/services/health_entries.py
import logging
from datetime import date, datetime
from typing import List, Optional, Tuple
from zoneinfo import ZoneInfo

from sqlalchemy import and_
from sqlalchemy.orm import Session

from reflect_ai.core.health_score import compute_health_score
from reflect_server.config.settings import settings
from reflect_server.models.health_entry import HealthEntry
from reflect_server.schemas.schema_health import CreateHealthEntry, HealthEntryItem

logger = logging.getLogger(__name__)

ENTRY_FIELDS = (
    "mood",
    "sleep_hours",
    "water_intake",
    "exercise_minutes",
    "energy_level",
    "stress_level",
    "symptoms",
    "notes",
)


def today_local() -> date:
    """Calendar day in the configured app time zone."""
    return datetime.now(ZoneInfo(settings.app_timezone)).date()


def to_entry_item(row: HealthEntry) -> HealthEntryItem:
    # the score is derived from the stored metrics every time, never stored
    return HealthEntryItem(
        id=row.id,
        entry_date=row.entry_date,
        mood=row.mood,
        sleep_hours=row.sleep_hours,
        water_intake=row.water_intake,
        exercise_minutes=row.exercise_minutes,
        energy_level=row.energy_level,
        stress_level=row.stress_level,
        symptoms=row.symptoms,
        notes=row.notes,
        health_score=compute_health_score(row),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def get_entry_by_date(db: Session, user_id: str, entry_date: date) -> Optional[HealthEntry]:
    return db.query(HealthEntry).filter(
        and_(
            HealthEntry.user_id == user_id,
            HealthEntry.entry_date == entry_date,
        )
    ).first()


def list_entries(db: Session, user_id: str, limit: Optional[int] = None) -> List[HealthEntry]:
    """Entries newest first."""
    query = (
        db.query(HealthEntry)
        .filter(HealthEntry.user_id == user_id)
        .order_by(HealthEntry.entry_date.desc())
    )
    if limit:
        query = query.limit(limit)
    return query.all()


def upsert_health_entry(db: Session, user_id: str, body: CreateHealthEntry) -> Tuple[HealthEntry, bool]:
    """
    Save the entry for body.entry_date.

    1. an entry for that date exists: overwrite its fields in place
    2. otherwise: insert a new row

    Returns (row, created). The caller commits.
    """
    entry_date = body.entry_date or today_local()
    values = {name: getattr(body, name) for name in ENTRY_FIELDS}

    entry = get_entry_by_date(db, user_id, entry_date)
    if entry:
        for name, value in values.items():
            setattr(entry, name, value)
        db.flush()
        logger.info(f"health entry updated user={user_id} date={entry_date}")
        return entry, False

    entry = HealthEntry(user_id=user_id, entry_date=entry_date, **values)
    db.add(entry)
    db.flush()
    logger.info(f"health entry created user={user_id} date={entry_date}")
    return entry, True


def delete_health_entry(db: Session, user_id: str, entry_id: int) -> Optional[HealthEntry]:
    entry = db.query(HealthEntry).filter(
        and_(
            HealthEntry.user_id == user_id,
            HealthEntry.id == entry_id,
        )
    ).first()
    if not entry:
        return None

    db.delete(entry)
    db.flush()
    return entry
