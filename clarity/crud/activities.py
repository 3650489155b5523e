from sqlalchemy import select
from sqlalchemy.orm import Session

from clarity.models import Activity

FEED_LIMIT = 50


def log_activity(db: Session, user_id: str, activity_type: str, description: str) -> Activity:
    activity = Activity(user_id=user_id, type=activity_type, description=description)
    db.add(activity)
    db.commit()
    db.refresh(activity)
    return activity


def list_activities(db: Session, user_id: str, limit: int = FEED_LIMIT) -> list[Activity]:
    return list(
        db.scalars(
            select(Activity)
            .where(Activity.user_id == user_id)
            .order_by(Activity.created_at.desc(), Activity.id.desc())
            .limit(limit)
        )
    )
