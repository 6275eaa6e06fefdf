from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime
from typing import List, Optional

from reflect_server.models.health_entry import Mood
from reflect_server.services.context import Notice


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class CreateHealthEntry(BaseModel):
    # omitted -> today in the app time zone
    entry_date: Optional[date] = None
    mood: Optional[Mood] = None
    sleep_hours: float = Field(default=0, ge=0, le=24)
    water_intake: float = Field(default=0, ge=0)
    exercise_minutes: int = Field(default=0, ge=0)
    energy_level: Optional[int] = Field(default=None, ge=1, le=10)
    stress_level: Optional[int] = Field(default=None, ge=1, le=10)
    symptoms: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("sleep_hours", "water_intake", "exercise_minutes", mode="before")
    @classmethod
    def blank_metric_is_zero(cls, v):
        # empty form fields are saved as 0
        v = _blank_to_none(v)
        return 0 if v is None else v

    @field_validator("mood", "energy_level", "stress_level", "symptoms", "notes", mode="before")
    @classmethod
    def blank_optional_is_none(cls, v):
        return _blank_to_none(v)


class HealthEntryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    entry_date: date
    mood: Optional[Mood] = None
    sleep_hours: float
    water_intake: float
    exercise_minutes: int
    energy_level: Optional[int] = None
    stress_level: Optional[int] = None
    symptoms: Optional[str] = None
    notes: Optional[str] = None
    health_score: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ResponseHealthEntry(BaseModel):
    response_message: str
    created: bool
    entry: HealthEntryItem
    notices: List[Notice] = []


class ResponseHealthEntryByDate(BaseModel):
    response_message: str
    requested_date: date
    entry: Optional[HealthEntryItem] = None


class ResponseDeleteHealthEntry(BaseModel):
    response_message: str
    id: int
    entry_date: date
