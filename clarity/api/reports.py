import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clarity.api.deps import get_db
from clarity.config import settings
from clarity.crud import get_stored_reports, get_user, sync_reports
from clarity.models import Event, User
from clarity.reminders import find_due_reminders
from clarity.schemas import ReportSyncIn, ReportSyncOut, StoredReportsOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["reports"])


def _require_cron(authorization: Optional[str] = Header(default=None)) -> None:
    if not settings.CRON_SECRET:
        return
    if authorization != f"Bearer {settings.CRON_SECRET}":
        raise HTTPException(status_code=401, detail="Unauthorized")


@router.post("/reports/sync", response_model=ReportSyncOut)
def reports_sync(payload: ReportSyncIn, db: Session = Depends(get_db)) -> Dict[str, Any]:
    if not get_user(db, payload.user_id):
        raise HTTPException(status_code=404, detail="User not found")
    try:
        result = sync_reports(db, payload.user_id, payload.date)
    except SQLAlchemyError as exc:
        logger.exception("report sync failed for user=%s", payload.user_id)
        raise HTTPException(status_code=500, detail="Failed to sync reports") from exc
    return {"success": True, **result}


@router.get("/reports/{user_id}", response_model=StoredReportsOut)
def reports_list(user_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    if not get_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return get_stored_reports(db, user_id)


@router.get("/cron/reminders")
def cron_reminders(
    now: Optional[datetime] = None,
    _: None = Depends(_require_cron),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    # Any event within the reminder window falls on one of these dates in every timezone.
    first_day = (now - timedelta(days=1)).date()
    last_day = (now + timedelta(days=1)).date()
    rows = db.execute(
        select(Event, User.timezone)
        .join(User, User.id == Event.user_id)
        .where(and_(Event.date >= first_day, Event.date <= last_day, Event.time.is_not(None)))
        .order_by(Event.user_id, Event.id)
    ).all()

    by_user: Dict[str, Dict[str, Any]] = {}
    for event, tz_name in rows:
        entry = by_user.setdefault(event.user_id, {"tz": tz_name, "events": []})
        entry["events"].append(event)

    items: List[Dict[str, Any]] = []
    for user_id, entry in by_user.items():
        for reminder in find_due_reminders(entry["events"], now, entry["tz"]):
            items.append({"user_id": user_id, **reminder})

    logger.info("reminder sweep at %s matched %d events", now.isoformat(), len(items))
    return {"success": True, "sent": len(items), "items": items}
