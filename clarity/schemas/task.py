from datetime import date, datetime
from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import BaseModel, Field

from clarity.schemas.base import InputModel

Priority = Literal["low", "medium", "high"]


class TaskCreateIn(InputModel):
    user_id: str
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    priority: Priority = "medium"
    due_date: Optional[date] = None
    completed: bool = False
    progress: int = Field(default=0, ge=0, le=100)


class TaskUpdateIn(InputModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"description", "due_date"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    priority: Optional[Priority] = None
    due_date: Optional[date] = None
    completed: Optional[bool] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)


class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    priority: str
    due_date: Optional[date] = None
    completed: bool
    completed_at: Optional[datetime] = None
    progress: int

    class Config:
        from_attributes = True
