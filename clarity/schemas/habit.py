import datetime as dt
import re
from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from clarity.schemas.base import InputModel

Frequency = Literal["daily", "weekly", "custom"]
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _check_iso_dates(values: Optional[list[str]]) -> Optional[list[str]]:
    if values is None:
        return None
    for value in values:
        # Log keys are compared as strings; only the canonical spelling may be stored.
        if not ISO_DATE_PATTERN.fullmatch(value):
            raise ValueError(f"date must be YYYY-MM-DD: {value!r}")
        dt.date.fromisoformat(value)
    return values


class HabitCreateIn(InputModel):
    user_id: str
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    frequency: Frequency = "daily"
    color: Optional[str] = Field(default=None, max_length=16)
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    completed_dates: list[str] = []

    @field_validator("completed_dates")
    @classmethod
    def _valid_dates(cls, values: list[str]) -> list[str]:
        return _check_iso_dates(values)


class HabitUpdateIn(InputModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"description", "start_date", "end_date"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    frequency: Optional[Frequency] = None
    color: Optional[str] = Field(default=None, max_length=16)
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    completed_dates: Optional[list[str]] = None

    @field_validator("completed_dates")
    @classmethod
    def _valid_dates(cls, values: Optional[list[str]]) -> Optional[list[str]]:
        return _check_iso_dates(values)


class HabitToggleIn(InputModel):
    user_id: str
    date: Optional[dt.date] = None


class HabitOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    frequency: str
    completed_dates: list[str]
    streak: int
    color: str
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    class Config:
        from_attributes = True
