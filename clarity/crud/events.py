from typing import Any, Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from clarity.models import Event


def list_events(db: Session, user_id: str) -> list[Event]:
    return list(db.scalars(select(Event).where(Event.user_id == user_id).order_by(Event.date.desc(), Event.id.desc())))


def get_owned_event(db: Session, user_id: str, event_id: int) -> Optional[Event]:
    return db.scalar(select(Event).where(and_(Event.id == event_id, Event.user_id == user_id)))


def create_event(db: Session, user_id: str, data: dict[str, Any]) -> Event:
    event = Event(user_id=user_id, **data)
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def update_event(db: Session, event: Event, data: dict[str, Any]) -> Event:
    for field, value in data.items():
        setattr(event, field, value)
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def delete_event(db: Session, event: Event) -> None:
    db.delete(event)
    db.commit()
