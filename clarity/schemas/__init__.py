from clarity.schemas.activity import ActivityIn, ActivityOut
from clarity.schemas.event import EventCreateIn, EventOut, EventUpdateIn
from clarity.schemas.goal import GoalCreateIn, GoalOut, GoalUpdateIn
from clarity.schemas.habit import HabitCreateIn, HabitOut, HabitToggleIn, HabitUpdateIn
from clarity.schemas.report import (
    DashboardOut,
    MonthlyReportOut,
    ReportSyncIn,
    ReportSyncOut,
    ReportWindowOut,
    StoredReportsOut,
    WeeklyReportOut,
)
from clarity.schemas.task import TaskCreateIn, TaskOut, TaskUpdateIn
from clarity.schemas.user import UserOut, UserSyncIn

__all__ = [
    "UserSyncIn",
    "UserOut",
    "HabitCreateIn",
    "HabitUpdateIn",
    "HabitToggleIn",
    "HabitOut",
    "GoalCreateIn",
    "GoalUpdateIn",
    "GoalOut",
    "TaskCreateIn",
    "TaskUpdateIn",
    "TaskOut",
    "EventCreateIn",
    "EventUpdateIn",
    "EventOut",
    "ActivityIn",
    "ActivityOut",
    "ReportSyncIn",
    "ReportSyncOut",
    "ReportWindowOut",
    "DashboardOut",
    "WeeklyReportOut",
    "MonthlyReportOut",
    "StoredReportsOut",
]
