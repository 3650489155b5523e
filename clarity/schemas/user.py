from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from clarity.schemas.base import InputModel


class UserSyncIn(InputModel):
    uid: str = Field(min_length=1, max_length=128)
    email: str = Field(min_length=3, max_length=255)
    display_name: Optional[str] = None
    mobile: Optional[str] = None
    timezone: Optional[str] = None


class UserOut(BaseModel):
    id: str
    email: str
    display_name: Optional[str] = None
    mobile: Optional[str] = None
    timezone: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
