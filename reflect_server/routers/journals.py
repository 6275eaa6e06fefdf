# reflect_server/routers/journals.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from reflect_server.auth.dependencies import get_current_user
from reflect_server.config.settings import settings
from reflect_server.db.database import get_db
from reflect_server.models.users import User
from reflect_server.schemas.schema_journal import (
    CreateJournal,
    CreateJournalEntry,
    JournalEntryItem,
    JournalInsights,
    JournalItem,
    PatchJournalEntry,
)
from reflect_server.services import journals as journal_service

router = APIRouter(prefix="/journals", tags=["journals"])


def _check_length(content: str | None):
    if content is not None and len(content.encode("utf-8")) > settings.max_text_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Entry is too long.",
        )


def _own_journal(db: Session, user: User, journal_id: int):
    journal = journal_service.get_journal(db, user.user_id, journal_id)
    if not journal:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal not found.",
        )
    return journal


@router.post("", response_model=JournalItem, status_code=status.HTTP_201_CREATED)
def create_journal(
    body: CreateJournal,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    journal = journal_service.create_journal(db, current_user.user_id, body)
    db.commit()
    db.refresh(journal)
    return journal


@router.get("", response_model=List[JournalItem])
def get_journals(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Journals of the user, newest first."""
    return journal_service.list_journals(db, current_user.user_id)


@router.post("/{journal_id}/entries", response_model=JournalEntryItem, status_code=status.HTTP_201_CREATED)
def create_journal_entry(
    journal_id: int,
    body: CreateJournalEntry,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    word_count / reading_time are computed from the content
    (HTML tags stripped, 200 words per minute, rounded up).
    """
    _check_length(body.content)
    journal = _own_journal(db, current_user, journal_id)

    entry = journal_service.create_journal_entry(db, journal, body)
    db.commit()
    db.refresh(entry)
    return entry


@router.get("/{journal_id}/entries", response_model=List[JournalEntryItem])
def get_journal_entries(
    journal_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    journal = _own_journal(db, current_user, journal_id)
    return journal_service.list_journal_entries(db, journal)


@router.patch("/entries/{entry_id}", response_model=JournalEntryItem)
def patch_journal_entry(
    entry_id: int,
    body: PatchJournalEntry,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Send only the fields to change, e.g.
    { "content": "<p>new text</p>", "tags": ["gratitude"] }
    """
    _check_length(body.content)
    entry = journal_service.get_journal_entry(db, current_user.user_id, entry_id)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal entry not found.",
        )

    journal_service.update_journal_entry(db, entry, body)
    db.commit()
    db.refresh(entry)
    return entry


@router.get("/{journal_id}/insights", response_model=JournalInsights)
def get_journal_insights(
    journal_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    journal = _own_journal(db, current_user, journal_id)
    return journal_service.journal_insights(db, journal)
