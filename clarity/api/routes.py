from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from clarity.api.deps import get_db
from clarity.config import today as app_today
from clarity.crud import (
    create_event,
    create_goal,
    create_habit,
    create_task,
    delete_event,
    delete_goal,
    delete_habit,
    delete_task,
    get_owned_event,
    get_owned_goal,
    get_owned_habit,
    get_owned_task,
    get_user,
    list_activities,
    list_events,
    list_goals,
    list_tasks,
    log_activity,
    refresh_streaks,
    sync_user,
    toggle_habit,
    update_event,
    update_goal,
    update_habit,
    update_task,
)
from clarity.models import User
from clarity.schemas import (
    ActivityIn,
    ActivityOut,
    DashboardOut,
    EventCreateIn,
    EventOut,
    EventUpdateIn,
    GoalCreateIn,
    GoalOut,
    GoalUpdateIn,
    HabitCreateIn,
    HabitOut,
    HabitToggleIn,
    HabitUpdateIn,
    TaskCreateIn,
    TaskOut,
    TaskUpdateIn,
    UserOut,
    UserSyncIn,
)
from clarity.streak import group_by_frequency

router = APIRouter()


def _get_user_or_404(db: Session, user_id: str) -> User:
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _found_or_404(row: Any, name: str) -> Any:
    if row is None:
        raise HTTPException(status_code=404, detail=f"{name} not found")
    return row


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/v1/users/sync", response_model=UserOut)
def users_sync(payload: UserSyncIn, db: Session = Depends(get_db)) -> User:
    return sync_user(db, payload.uid, payload.email, payload.display_name, payload.mobile, payload.timezone)


@router.get("/v1/users/{user_id}", response_model=UserOut)
def users_get(user_id: str, db: Session = Depends(get_db)) -> User:
    return _get_user_or_404(db, user_id)


@router.get("/v1/habits", response_model=List[HabitOut])
def habits_list(user_id: str, db: Session = Depends(get_db)) -> List[Any]:
    _get_user_or_404(db, user_id)
    return refresh_streaks(db, user_id)


@router.post("/v1/habits", response_model=HabitOut)
def habits_create(payload: HabitCreateIn, db: Session = Depends(get_db)) -> Any:
    _get_user_or_404(db, payload.user_id)
    habit = create_habit(db, payload.user_id, payload.to_row())
    log_activity(db, payload.user_id, "habit", f"Created habit: {habit.title}")
    return habit


@router.patch("/v1/habits/{habit_id}", response_model=HabitOut)
def habits_update(habit_id: int, user_id: str, payload: HabitUpdateIn, db: Session = Depends(get_db)) -> Any:
    habit = _found_or_404(get_owned_habit(db, user_id, habit_id), "Habit")
    return update_habit(db, habit, payload.to_row(partial=True))


@router.post("/v1/habits/{habit_id}/toggle", response_model=HabitOut)
def habits_toggle(habit_id: int, payload: HabitToggleIn, db: Session = Depends(get_db)) -> Any:
    habit = _found_or_404(get_owned_habit(db, payload.user_id, habit_id), "Habit")
    day = payload.date or app_today()
    habit = toggle_habit(db, habit, day)
    if day.isoformat() in habit.completed_dates:
        log_activity(db, payload.user_id, "habit", f"Completed habit: {habit.title}")
    return habit


@router.delete("/v1/habits/{habit_id}")
def habits_delete(habit_id: int, user_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    habit = _found_or_404(get_owned_habit(db, user_id, habit_id), "Habit")
    delete_habit(db, habit)
    return {"success": True}


@router.get("/v1/goals", response_model=List[GoalOut])
def goals_list(user_id: str, db: Session = Depends(get_db)) -> List[Any]:
    _get_user_or_404(db, user_id)
    return list_goals(db, user_id)


@router.post("/v1/goals", response_model=GoalOut)
def goals_create(payload: GoalCreateIn, db: Session = Depends(get_db)) -> Any:
    _get_user_or_404(db, payload.user_id)
    goal = create_goal(db, payload.user_id, payload.to_row())
    log_activity(db, payload.user_id, "goal", f"Created goal: {goal.title}")
    return goal


@router.patch("/v1/goals/{goal_id}", response_model=GoalOut)
def goals_update(goal_id: int, user_id: str, payload: GoalUpdateIn, db: Session = Depends(get_db)) -> Any:
    goal = _found_or_404(get_owned_goal(db, user_id, goal_id), "Goal")
    return update_goal(db, goal, payload.to_row(partial=True))


@router.delete("/v1/goals/{goal_id}")
def goals_delete(goal_id: int, user_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    goal = _found_or_404(get_owned_goal(db, user_id, goal_id), "Goal")
    delete_goal(db, goal)
    return {"success": True}


@router.get("/v1/tasks", response_model=List[TaskOut])
def tasks_list(user_id: str, db: Session = Depends(get_db)) -> List[Any]:
    _get_user_or_404(db, user_id)
    return list_tasks(db, user_id)


@router.post("/v1/tasks", response_model=TaskOut)
def tasks_create(payload: TaskCreateIn, db: Session = Depends(get_db)) -> Any:
    _get_user_or_404(db, payload.user_id)
    task = create_task(db, payload.user_id, payload.to_row())
    log_activity(db, payload.user_id, "task", f"Created task: {task.title}")
    return task


@router.patch("/v1/tasks/{task_id}", response_model=TaskOut)
def tasks_update(task_id: int, user_id: str, payload: TaskUpdateIn, db: Session = Depends(get_db)) -> Any:
    task = _found_or_404(get_owned_task(db, user_id, task_id), "Task")
    was_completed = task.completed
    task = update_task(db, task, payload.to_row(partial=True))
    if task.completed and not was_completed:
        log_activity(db, user_id, "task", f"Completed task: {task.title}")
    return task


@router.delete("/v1/tasks/{task_id}")
def tasks_delete(task_id: int, user_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    task = _found_or_404(get_owned_task(db, user_id, task_id), "Task")
    delete_task(db, task)
    return {"success": True}


@router.get("/v1/events", response_model=List[EventOut])
def events_list(user_id: str, db: Session = Depends(get_db)) -> List[Any]:
    _get_user_or_404(db, user_id)
    return list_events(db, user_id)


@router.post("/v1/events", response_model=EventOut)
def events_create(payload: EventCreateIn, db: Session = Depends(get_db)) -> Any:
    _get_user_or_404(db, payload.user_id)
    return create_event(db, payload.user_id, payload.to_row())


@router.patch("/v1/events/{event_id}", response_model=EventOut)
def events_update(event_id: int, user_id: str, payload: EventUpdateIn, db: Session = Depends(get_db)) -> Any:
    event = _found_or_404(get_owned_event(db, user_id, event_id), "Event")
    return update_event(db, event, payload.to_row(partial=True))


@router.delete("/v1/events/{event_id}")
def events_delete(event_id: int, user_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    event = _found_or_404(get_owned_event(db, user_id, event_id), "Event")
    delete_event(db, event)
    return {"success": True}


@router.get("/v1/activities", response_model=List[ActivityOut])
def activities_list(user_id: str, db: Session = Depends(get_db)) -> List[Any]:
    _get_user_or_404(db, user_id)
    return list_activities(db, user_id)


@router.post("/v1/activities")
def activities_create(payload: ActivityIn, db: Session = Depends(get_db)) -> Dict[str, Any]:
    _get_user_or_404(db, payload.user_id)
    log_activity(db, payload.user_id, payload.type, payload.description)
    return {"success": True}


@router.get("/v1/dashboard/{user_id}", response_model=DashboardOut)
def dashboard(user_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    _get_user_or_404(db, user_id)
    today = app_today()
    habits = refresh_streaks(db, user_id, today)
    tasks = list_tasks(db, user_id)
    goals = list_goals(db, user_id)
    today_key = today.isoformat()

    return {
        "day_label": today_key,
        "habits_total": len(habits),
        "habits_done_today": sum(1 for h in habits if today_key in (h.completed_dates or [])),
        "active_streaks": sum(1 for h in habits if h.streak > 0),
        "best_streak": max((h.streak for h in habits), default=0),
        "frequency_groups": {k: len(v) for k, v in group_by_frequency(habits).items()},
        "tasks_open": sum(1 for t in tasks if not t.completed),
        "tasks_completed": sum(1 for t in tasks if t.completed),
        "goals_completed": sum(1 for g in goals if g.completed),
    }
