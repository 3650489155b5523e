import datetime as dt
from typing import Optional

from pydantic import BaseModel

from clarity.schemas.base import InputModel


class ReportSyncIn(InputModel):
    user_id: str
    date: Optional[dt.date] = None


class ReportWindowOut(BaseModel):
    window_start: dt.date
    window_end: dt.date
    total_habits: int
    total_completed: int
    completion_rate: int
    month: Optional[str] = None


class ReportSyncOut(BaseModel):
    success: bool
    weekly: Optional[ReportWindowOut] = None
    monthly: Optional[ReportWindowOut] = None


class DashboardOut(BaseModel):
    day_label: str
    habits_total: int
    habits_done_today: int
    active_streaks: int
    best_streak: int
    frequency_groups: dict[str, int]
    tasks_open: int
    tasks_completed: int
    goals_completed: int


class WeeklyReportOut(BaseModel):
    week_start: dt.date
    total_habits: int
    total_completed: int
    completion_rate: int
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class MonthlyReportOut(BaseModel):
    month: str
    total_habits: int
    total_completed: int
    completion_rate: int
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class StoredReportsOut(BaseModel):
    weekly: list[WeeklyReportOut]
    monthly: list[MonthlyReportOut]
