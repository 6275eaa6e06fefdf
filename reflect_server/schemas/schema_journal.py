from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from datetime import datetime
from typing import Dict, List, Optional

from reflect_server.models.health_entry import Mood


class CreateJournal(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    color: str = Field(default="#6366f1", pattern=r"^#[0-9a-fA-F]{6}$")
    is_public: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Journal title is required.")
        return v.strip()


class JournalItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    color: str
    is_public: bool
    created_at: datetime
    updated_at: datetime


def _clean_tags(tags: List[str]) -> List[str]:
    # trimmed, no blanks, first occurrence wins
    seen = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class CreateJournalEntry(BaseModel):
    title: Optional[str] = Field(default=None, max_length=200)
    content: str
    mood: Optional[Mood] = None
    tags: List[str] = []
    is_private: bool = True

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Entry content is required.")
        return v

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v):
        return _clean_tags(v)


class PatchJournalEntry(BaseModel):
    title: Optional[str] = Field(default=None, max_length=200)
    content: Optional[str] = None
    mood: Optional[Mood] = None
    tags: Optional[List[str]] = None
    is_private: Optional[bool] = None

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Entry content cannot be empty.")
        return v

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v):
        return _clean_tags(v) if v is not None else v

    @model_validator(mode="after")
    def validate_at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field is required.")
        return self


class JournalEntryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    journal_id: int
    title: Optional[str] = None
    content: str
    mood: Optional[Mood] = None
    tags: List[str] = []
    is_private: bool
    word_count: int
    reading_time: int
    created_at: datetime
    updated_at: datetime


class JournalInsights(BaseModel):
    journal_id: int
    entry_count: int
    total_words: int
    total_reading_time: int
    mood_distribution: Dict[str, int]
    top_tags: List[str]
