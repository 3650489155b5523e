import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from sqlalchemy import and_, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clarity.config import today as app_today
from clarity.models import Habit, HabitCompletion, MonthlyReport, WeeklyReport
from clarity.streak import MONTH, WEEK, completion_rate, max_possible_completions

logger = logging.getLogger(__name__)


def week_bounds(ref: date) -> Tuple[date, date]:
    start = ref - timedelta(days=ref.weekday())
    return start, start + timedelta(days=6)


def month_bounds(ref: date) -> Tuple[date, date]:
    days_in_month = calendar.monthrange(ref.year, ref.month)[1]
    return ref.replace(day=1), ref.replace(day=days_in_month)


def _count_completions(db: Session, user_id: str, start: date, end: date) -> int:
    return db.scalar(
        select(func.count()).select_from(HabitCompletion).where(
            and_(
                HabitCompletion.user_id == user_id,
                HabitCompletion.completion_date >= start,
                HabitCompletion.completion_date <= end,
            )
        )
    ) or 0


def _compute_window(db: Session, user_id: str, kind: str, start: date, end: date) -> Optional[Dict[str, Any]]:
    frequencies = list(db.scalars(select(Habit.frequency).where(Habit.user_id == user_id)))
    if not frequencies:
        return None

    total_completed = _count_completions(db, user_id, start, end)
    max_possible = max_possible_completions(frequencies, kind, (end - start).days + 1)
    return {
        "window_start": start,
        "window_end": end,
        "total_habits": len(frequencies),
        "total_completed": total_completed,
        "completion_rate": completion_rate(total_completed, max_possible),
    }


def _upsert(db: Session, row: Any, lookup, values: Dict[str, Any]) -> None:
    try:
        existing = db.scalar(lookup)
        if existing:
            existing.total_habits = values["total_habits"]
            existing.total_completed = values["total_completed"]
            existing.completion_rate = values["completion_rate"]
            existing.updated_at = datetime.utcnow()
            db.add(existing)
        else:
            db.add(row)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def generate_weekly_report(db: Session, user_id: str, ref: Optional[date] = None) -> Optional[Dict[str, Any]]:
    start, end = week_bounds(ref or app_today())
    report = _compute_window(db, user_id, WEEK, start, end)
    if report is None:
        return None

    _upsert(
        db,
        WeeklyReport(
            user_id=user_id,
            week_start=start,
            total_habits=report["total_habits"],
            total_completed=report["total_completed"],
            completion_rate=report["completion_rate"],
        ),
        select(WeeklyReport).where(and_(WeeklyReport.user_id == user_id, WeeklyReport.week_start == start)),
        report,
    )
    logger.info("weekly report user=%s week=%s rate=%s", user_id, start.isoformat(), report["completion_rate"])
    return report


def generate_monthly_report(db: Session, user_id: str, ref: Optional[date] = None) -> Optional[Dict[str, Any]]:
    start, end = month_bounds(ref or app_today())
    report = _compute_window(db, user_id, MONTH, start, end)
    if report is None:
        return None

    month = start.strftime("%Y-%m")
    report["month"] = month
    _upsert(
        db,
        MonthlyReport(
            user_id=user_id,
            month=month,
            total_habits=report["total_habits"],
            total_completed=report["total_completed"],
            completion_rate=report["completion_rate"],
        ),
        select(MonthlyReport).where(and_(MonthlyReport.user_id == user_id, MonthlyReport.month == month)),
        report,
    )
    logger.info("monthly report user=%s month=%s rate=%s", user_id, month, report["completion_rate"])
    return report


def sync_reports(db: Session, user_id: str, ref: Optional[date] = None) -> Dict[str, Optional[Dict[str, Any]]]:
    ref = ref or app_today()
    return {
        "weekly": generate_weekly_report(db, user_id, ref),
        "monthly": generate_monthly_report(db, user_id, ref),
    }


def get_stored_reports(db: Session, user_id: str) -> Dict[str, list]:
    weekly = db.scalars(
        select(WeeklyReport).where(WeeklyReport.user_id == user_id).order_by(WeeklyReport.week_start.desc())
    ).all()
    monthly = db.scalars(
        select(MonthlyReport).where(MonthlyReport.user_id == user_id).order_by(MonthlyReport.month.desc())
    ).all()
    return {"weekly": list(weekly), "monthly": list(monthly)}
