from datetime import date, timedelta

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from clarity.crud import (
    create_habit,
    generate_monthly_report,
    generate_weekly_report,
    month_bounds,
    sync_reports,
    toggle_habit,
    week_bounds,
)
from clarity.models import MonthlyReport, WeeklyReport

# 2024-01-01 is a Monday.
WEEK_START = date(2024, 1, 1)


def _week_dates(days: int = 7) -> list[str]:
    return [(WEEK_START + timedelta(days=n)).isoformat() for n in range(days)]


def _count(db, model) -> int:
    return db.scalar(select(func.count()).select_from(model))


def test_week_bounds_start_on_monday():
    assert week_bounds(date(2024, 1, 3)) == (date(2024, 1, 1), date(2024, 1, 7))
    assert week_bounds(date(2024, 1, 7)) == (date(2024, 1, 1), date(2024, 1, 7))
    assert week_bounds(date(2024, 1, 8)) == (date(2024, 1, 8), date(2024, 1, 14))


def test_month_bounds():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(date(2023, 12, 31)) == (date(2023, 12, 1), date(2023, 12, 31))


def test_full_week_of_daily_habit_is_100(db, user):
    create_habit(db, user.id, {"title": "Read", "frequency": "daily", "completed_dates": _week_dates()})

    report = generate_weekly_report(db, user.id, date(2024, 1, 4))

    assert report["window_start"] == WEEK_START
    assert report["window_end"] == date(2024, 1, 7)
    assert report["total_habits"] == 1
    assert report["total_completed"] == 7
    assert report["completion_rate"] == 100


def test_completions_outside_window_are_not_counted(db, user):
    dates = _week_dates(3) + ["2023-12-31", "2024-01-08"]
    create_habit(db, user.id, {"title": "Read", "completed_dates": dates})

    report = generate_weekly_report(db, user.id, WEEK_START)

    assert report["total_completed"] == 3
    assert report["completion_rate"] == 43


def test_weekly_habit_counts_once_per_week(db, user):
    create_habit(db, user.id, {"title": "Read", "frequency": "daily", "completed_dates": _week_dates()})
    create_habit(db, user.id, {"title": "Long run", "frequency": "weekly", "completed_dates": ["2024-01-06"]})

    report = generate_weekly_report(db, user.id, WEEK_START)

    assert report["total_habits"] == 2
    assert report["total_completed"] == 8
    assert report["completion_rate"] == 100


def test_over_completion_is_not_clamped(db, user):
    create_habit(db, user.id, {"title": "Long run", "frequency": "weekly", "completed_dates": _week_dates(3)})

    report = generate_weekly_report(db, user.id, WEEK_START)

    assert report["completion_rate"] == 300


def test_zero_habits_returns_none_and_writes_nothing(db, user):
    assert generate_weekly_report(db, user.id, WEEK_START) is None
    assert generate_monthly_report(db, user.id, WEEK_START) is None
    assert _count(db, WeeklyReport) == 0
    assert _count(db, MonthlyReport) == 0


def test_rerun_updates_single_row(db, user):
    habit = create_habit(db, user.id, {"title": "Read", "completed_dates": _week_dates(2)})

    first = generate_weekly_report(db, user.id, WEEK_START)
    toggle_habit(db, habit, date(2024, 1, 3))
    second = generate_weekly_report(db, user.id, WEEK_START)

    assert first["total_completed"] == 2
    assert second["total_completed"] == 3
    assert _count(db, WeeklyReport) == 1
    row = db.scalar(select(WeeklyReport))
    assert row.week_start == WEEK_START
    assert row.total_completed == 3
    assert row.completion_rate == 43


def test_monthly_report_uses_month_length_and_four_weeks(db, user):
    create_habit(db, user.id, {"title": "Read", "frequency": "daily", "completed_dates": _week_dates()})
    create_habit(db, user.id, {"title": "Long run", "frequency": "weekly", "completed_dates": ["2024-01-06", "2024-01-13"]})

    report = generate_monthly_report(db, user.id, date(2024, 1, 20))

    # 31 daily opportunities + 4 weekly ones.
    assert report["month"] == "2024-01"
    assert report["total_completed"] == 9
    assert report["completion_rate"] == 26
    row = db.scalar(select(MonthlyReport))
    assert row.month == "2024-01"
    assert row.completion_rate == 26


def test_other_users_completions_are_ignored(db, user, other_user):
    create_habit(db, user.id, {"title": "Read", "completed_dates": _week_dates(1)})
    create_habit(db, other_user.id, {"title": "Read", "completed_dates": _week_dates()})

    report = generate_weekly_report(db, user.id, WEEK_START)

    assert report["total_completed"] == 1


def test_sync_reports_runs_both_windows(db, user):
    create_habit(db, user.id, {"title": "Read", "completed_dates": _week_dates()})

    result = sync_reports(db, user.id, WEEK_START)

    assert result["weekly"]["completion_rate"] == 100
    assert result["monthly"]["completion_rate"] == 23
    assert _count(db, WeeklyReport) == 1
    assert _count(db, MonthlyReport) == 1


def test_persistence_failure_propagates(db, user, monkeypatch):
    create_habit(db, user.id, {"title": "Read", "completed_dates": _week_dates()})

    def _boom():
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(db, "commit", _boom)
    with pytest.raises(SQLAlchemyError):
        generate_weekly_report(db, user.id, WEEK_START)


def test_non_canonical_dates_get_no_completion_rows(db, user):
    habit = create_habit(db, user.id, {"title": "Read", "completed_dates": ["2024-01-01", "20240101", "2024-W01-2"]})

    report = generate_weekly_report(db, user.id, WEEK_START)
    assert report["total_completed"] == 1

    toggle_habit(db, habit, date(2024, 1, 2))
    report = generate_weekly_report(db, user.id, WEEK_START)
    assert report["total_completed"] == 2
