# reflect_server/services/journals.py
import logging
import math
import re
from collections import Counter
from typing import List, Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from reflect_server.models.journal import Journal, JournalEntry
from reflect_server.schemas.schema_journal import (
    CreateJournal,
    CreateJournalEntry,
    JournalInsights,
    PatchJournalEntry,
)

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
TOP_TAGS = 5

_TAG_RE = re.compile(r"<[^>]*>")


def count_words(content: str) -> int:
    """Words of the rich-text content, HTML tags stripped."""
    text = _TAG_RE.sub(" ", content or "")
    return len(text.split())


def reading_time_minutes(word_count: int) -> int:
    if word_count <= 0:
        return 0
    return math.ceil(word_count / WORDS_PER_MINUTE)


def _apply_derived_counts(entry: JournalEntry) -> None:
    entry.word_count = count_words(entry.content)
    entry.reading_time = reading_time_minutes(entry.word_count)


def create_journal(db: Session, user_id: str, body: CreateJournal) -> Journal:
    journal = Journal(
        user_id=user_id,
        title=body.title,
        description=body.description,
        color=body.color,
        is_public=body.is_public,
    )
    db.add(journal)
    db.flush()
    logger.info(f"journal created user={user_id} id={journal.id}")
    return journal


def list_journals(db: Session, user_id: str) -> List[Journal]:
    return (
        db.query(Journal)
        .filter(Journal.user_id == user_id)
        .order_by(Journal.created_at.desc(), Journal.id.desc())
        .all()
    )


def get_journal(db: Session, user_id: str, journal_id: int) -> Optional[Journal]:
    return db.query(Journal).filter(
        and_(
            Journal.user_id == user_id,
            Journal.id == journal_id,
        )
    ).first()


def create_journal_entry(db: Session, journal: Journal, body: CreateJournalEntry) -> JournalEntry:
    entry = JournalEntry(
        journal_id=journal.id,
        user_id=journal.user_id,
        title=body.title,
        content=body.content,
        mood=body.mood,
        tags=body.tags,
        is_private=body.is_private,
    )
    _apply_derived_counts(entry)
    db.add(entry)
    db.flush()
    logger.info(f"journal entry created journal={journal.id} words={entry.word_count}")
    return entry


def list_journal_entries(db: Session, journal: Journal) -> List[JournalEntry]:
    return (
        db.query(JournalEntry)
        .filter(
            JournalEntry.journal_id == journal.id,
            JournalEntry.user_id == journal.user_id,
        )
        .order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc())
        .all()
    )


def get_journal_entry(db: Session, user_id: str, entry_id: int) -> Optional[JournalEntry]:
    return db.query(JournalEntry).filter(
        and_(
            JournalEntry.user_id == user_id,
            JournalEntry.id == entry_id,
        )
    ).first()


def update_journal_entry(db: Session, entry: JournalEntry, body: PatchJournalEntry) -> JournalEntry:
    for name in body.model_fields_set:
        value = getattr(body, name)
        if value is None and name in ("content", "tags", "is_private"):
            continue
        setattr(entry, name, value)

    _apply_derived_counts(entry)
    db.flush()
    return entry


def journal_insights(db: Session, journal: Journal) -> JournalInsights:
    entries = list_journal_entries(db, journal)

    moods = Counter(e.mood.value for e in entries if e.mood is not None)
    tags = Counter(tag for e in entries for tag in (e.tags or []))

    return JournalInsights(
        journal_id=journal.id,
        entry_count=len(entries),
        total_words=sum(e.word_count for e in entries),
        total_reading_time=sum(e.reading_time for e in entries),
        mood_distribution=dict(moods),
        top_tags=[tag for tag, _ in tags.most_common(TOP_TAGS)],
    )
