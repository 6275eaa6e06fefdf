from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List, Optional

from reflect_server.services.context import Notice


class CreateMessageReq(BaseModel):
    message: str = Field(min_length=1)
    session_id: Optional[str] = Field(default=None, max_length=64)  # empty -> new session


class MessageItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: str
    message: str
    is_user_message: bool
    created_at: datetime


class TurnResponse(BaseModel):
    session_id: str
    response: str
    suggestions: List[str]
    topic: str
    notices: List[Notice] = []


class SessionResponse(BaseModel):
    session_id: str
    greeting: str
    suggestions: List[str]
