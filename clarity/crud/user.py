from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from clarity.models import User


def sync_user(
    db: Session,
    user_id: str,
    email: str,
    display_name: Optional[str] = None,
    mobile: Optional[str] = None,
    timezone: Optional[str] = None,
) -> User:
    user = db.scalar(select(User).where(User.id == user_id))
    if user:
        user.email = email
        if display_name:
            user.display_name = display_name
        if mobile:
            user.mobile = mobile
        if timezone:
            user.timezone = timezone
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    user = User(
        id=user_id,
        email=email,
        display_name=display_name or email.split("@")[0],
        mobile=mobile,
        timezone=timezone,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.scalar(select(User).where(User.id == user_id))
