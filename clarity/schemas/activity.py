from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from clarity.schemas.base import InputModel

ActivityType = Literal["habit", "goal", "task", "event", "auth"]


class ActivityIn(InputModel):
    user_id: str
    type: ActivityType
    description: str = Field(min_length=1)


class ActivityOut(BaseModel):
    id: int
    type: str
    description: str
    created_at: datetime

    class Config:
        from_attributes = True
