from datetime import date
from typing import Any, Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.orm import Session

from clarity.config import today as app_today
from clarity.models import Habit, HabitCompletion
from clarity.streak import calculate_streak, normalize_dates, toggle_completion


def list_habits(db: Session, user_id: str) -> list[Habit]:
    return list(db.scalars(select(Habit).where(Habit.user_id == user_id).order_by(Habit.id)))


def get_owned_habit(db: Session, user_id: str, habit_id: int) -> Optional[Habit]:
    return db.scalar(select(Habit).where(and_(Habit.id == habit_id, Habit.user_id == user_id)))


def _sync_completion_rows(db: Session, habit: Habit, completed_dates: list[str]) -> None:
    db.execute(delete(HabitCompletion).where(HabitCompletion.habit_id == habit.id))
    for day in completed_dates:
        try:
            completion_date = date.fromisoformat(day)
        except ValueError:
            continue
        if completion_date.isoformat() != day:
            continue
        db.add(HabitCompletion(habit_id=habit.id, user_id=habit.user_id, completion_date=completion_date))


def create_habit(db: Session, user_id: str, data: dict[str, Any]) -> Habit:
    completed_dates = normalize_dates(data.pop("completed_dates", None))
    habit = Habit(user_id=user_id, completed_dates=completed_dates, streak=calculate_streak(completed_dates), **data)
    db.add(habit)
    db.flush()
    if completed_dates:
        _sync_completion_rows(db, habit, completed_dates)
    db.commit()
    db.refresh(habit)
    return habit


def update_habit(db: Session, habit: Habit, data: dict[str, Any]) -> Habit:
    if "completed_dates" in data:
        completed_dates = normalize_dates(data.pop("completed_dates"))
        habit.completed_dates = completed_dates
        habit.streak = calculate_streak(completed_dates)
        _sync_completion_rows(db, habit, completed_dates)

    for field, value in data.items():
        setattr(habit, field, value)

    db.add(habit)
    db.commit()
    db.refresh(habit)
    return habit


def toggle_habit(db: Session, habit: Habit, day: Optional[date] = None) -> Habit:
    day = day or app_today()
    completed_dates = toggle_completion(habit.completed_dates, day)

    if day.isoformat() in completed_dates:
        db.add(HabitCompletion(habit_id=habit.id, user_id=habit.user_id, completion_date=day))
    else:
        db.execute(
            delete(HabitCompletion).where(
                and_(HabitCompletion.habit_id == habit.id, HabitCompletion.completion_date == day)
            )
        )

    habit.completed_dates = completed_dates
    habit.streak = calculate_streak(completed_dates)
    db.add(habit)
    db.commit()
    db.refresh(habit)
    return habit


def delete_habit(db: Session, habit: Habit) -> None:
    db.delete(habit)
    db.commit()


def refresh_streaks(db: Session, user_id: str, today: Optional[date] = None) -> list[Habit]:
    """Recompute cached streaks, which go stale as days pass without writes."""
    habits = list_habits(db, user_id)
    changed = False
    for habit in habits:
        streak = calculate_streak(habit.completed_dates, today)
        if habit.streak != streak:
            habit.streak = streak
            db.add(habit)
            changed = True
    if changed:
        db.commit()
    return habits
