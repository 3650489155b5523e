from datetime import datetime
from typing import Any, Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from clarity.models import Task


def list_tasks(db: Session, user_id: str) -> list[Task]:
    return list(db.scalars(select(Task).where(Task.user_id == user_id).order_by(Task.id)))


def get_owned_task(db: Session, user_id: str, task_id: int) -> Optional[Task]:
    return db.scalar(select(Task).where(and_(Task.id == task_id, Task.user_id == user_id)))


def create_task(db: Session, user_id: str, data: dict[str, Any]) -> Task:
    task = Task(user_id=user_id, **data)
    if task.completed:
        task.completed_at = datetime.utcnow()
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def update_task(db: Session, task: Task, data: dict[str, Any]) -> Task:
    if "completed" in data:
        completed = bool(data["completed"])
        if completed and not task.completed:
            task.completed_at = datetime.utcnow()
        elif not completed:
            task.completed_at = None

    for field, value in data.items():
        setattr(task, field, value)

    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, task: Task) -> None:
    db.delete(task)
    db.commit()
