from datetime import date
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from clarity.schemas.base import InputModel


class Resource(BaseModel):
    title: str
    url: str


class Milestone(BaseModel):
    title: str
    completed: bool = False
    target_date: Optional[date] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    resources: list[Resource] = []


class GoalCreateIn(InputModel):
    JSON_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"resources", "milestones"})

    user_id: str
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    notes: Optional[str] = None
    resources: list[Resource] = []
    start_date: Optional[date] = None
    target_date: Optional[date] = None
    completed: bool = False
    progress: int = Field(default=0, ge=0, le=100)
    milestones: list[Milestone] = []


class GoalUpdateIn(InputModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"description", "notes", "start_date", "target_date"})
    JSON_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"resources", "milestones"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    notes: Optional[str] = None
    resources: Optional[list[Resource]] = None
    start_date: Optional[date] = None
    target_date: Optional[date] = None
    completed: Optional[bool] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    milestones: Optional[list[Milestone]] = None


class GoalOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    notes: Optional[str] = None
    resources: list[Resource]
    start_date: Optional[date] = None
    target_date: Optional[date] = None
    completed: bool
    progress: int
    milestones: list[Milestone]

    class Config:
        from_attributes = True
