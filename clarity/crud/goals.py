from typing import Any, Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from clarity.models import Goal


def list_goals(db: Session, user_id: str) -> list[Goal]:
    return list(db.scalars(select(Goal).where(Goal.user_id == user_id).order_by(Goal.id)))


def get_owned_goal(db: Session, user_id: str, goal_id: int) -> Optional[Goal]:
    return db.scalar(select(Goal).where(and_(Goal.id == goal_id, Goal.user_id == user_id)))


def create_goal(db: Session, user_id: str, data: dict[str, Any]) -> Goal:
    goal = Goal(user_id=user_id, **data)
    db.add(goal)
    db.commit()
    db.refresh(goal)
    return goal


def update_goal(db: Session, goal: Goal, data: dict[str, Any]) -> Goal:
    for field, value in data.items():
        setattr(goal, field, value)
    db.add(goal)
    db.commit()
    db.refresh(goal)
    return goal


def delete_goal(db: Session, goal: Goal) -> None:
    db.delete(goal)
    db.commit()
