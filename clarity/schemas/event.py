import datetime as dt
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from clarity.schemas.base import InputModel

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class EventCreateIn(InputModel):
    user_id: str
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    date: dt.date
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    link: Optional[str] = Field(default=None, max_length=1024)


class EventUpdateIn(InputModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"description", "time", "link"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    link: Optional[str] = Field(default=None, max_length=1024)


class EventOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    date: dt.date
    time: Optional[str] = None
    link: Optional[str] = None

    class Config:
        from_attributes = True
