from clarity.models.base import Base
from clarity.models.activity import Activity
from clarity.models.event import Event
from clarity.models.goal import Goal
from clarity.models.habit import Habit, HabitCompletion
from clarity.models.report import MonthlyReport, WeeklyReport
from clarity.models.task import Task
from clarity.models.user import User

__all__ = [
    "Base",
    "Activity",
    "Event",
    "Goal",
    "Habit",
    "HabitCompletion",
    "MonthlyReport",
    "Task",
    "User",
    "WeeklyReport",
]
