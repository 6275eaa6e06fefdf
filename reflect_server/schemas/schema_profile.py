from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import List, Optional

from reflect_server.models.mood_checkin import Feeling


class ProfileContents(BaseModel):
    age: Optional[int] = Field(default=None, ge=0, le=150)
    height: Optional[float] = Field(default=None, gt=0)
    weight: Optional[float] = Field(default=None, gt=0)
    health_goals: List[str] = []
    medical_conditions: List[str] = []
    medications: List[str] = []
    emergency_contact: Optional[str] = Field(default=None, max_length=255)
    doctor_info: Optional[str] = Field(default=None, max_length=255)
    additional_notes: Optional[str] = None

    @field_validator("health_goals", "medical_conditions", "medications")
    @classmethod
    def strip_items(cls, v):
        return [item.strip() for item in v if item and item.strip()]


class ResponseProfile(ProfileContents):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateMoodCheckIn(BaseModel):
    mood: Feeling
    mood_intensity: int = Field(ge=1, le=10)
    notes: Optional[str] = None


class MoodCheckInItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    mood: Feeling
    mood_intensity: int
    notes: Optional[str] = None
    created_at: datetime
