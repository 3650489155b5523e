from clarity.crud.activities import list_activities, log_activity
from clarity.crud.events import create_event, delete_event, get_owned_event, list_events, update_event
from clarity.crud.goals import create_goal, delete_goal, get_owned_goal, list_goals, update_goal
from clarity.crud.habits import (
    create_habit,
    delete_habit,
    get_owned_habit,
    list_habits,
    refresh_streaks,
    toggle_habit,
    update_habit,
)
from clarity.crud.reports import (
    generate_monthly_report,
    generate_weekly_report,
    get_stored_reports,
    month_bounds,
    sync_reports,
    week_bounds,
)
from clarity.crud.tasks import create_task, delete_task, get_owned_task, list_tasks, update_task
from clarity.crud.user import get_user, sync_user

__all__ = [
    "sync_user",
    "get_user",
    "list_habits",
    "get_owned_habit",
    "create_habit",
    "update_habit",
    "toggle_habit",
    "delete_habit",
    "refresh_streaks",
    "list_goals",
    "get_owned_goal",
    "create_goal",
    "update_goal",
    "delete_goal",
    "list_tasks",
    "get_owned_task",
    "create_task",
    "update_task",
    "delete_task",
    "list_events",
    "get_owned_event",
    "create_event",
    "update_event",
    "delete_event",
    "log_activity",
    "list_activities",
    "week_bounds",
    "month_bounds",
    "generate_weekly_report",
    "generate_monthly_report",
    "sync_reports",
    "get_stored_reports",
]
