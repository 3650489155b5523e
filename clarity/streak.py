"""Streak and completion-rate arithmetic over habit completion logs.

A completion log is a list of ``YYYY-MM-DD`` strings, one per day a habit was
checked off. ISO dates sort lexicographically in chronological order, so the
functions here compare strings directly and never parse the log.
"""

from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from clarity.config import today as app_today

DAILY = "daily"
WEEKLY = "weekly"

WEEK = "week"
MONTH = "month"
# Weekly habits in a month window are approximated as four weeks.
WEEKS_PER_MONTH = 4


def normalize_dates(completed_dates: Optional[Iterable[Any]]) -> List[str]:
    if not completed_dates:
        return []
    return sorted({d for d in completed_dates if d and isinstance(d, str)})


def calculate_streak(completed_dates: Optional[Iterable[Any]], today: Optional[date] = None) -> int:
    """Length of the run of consecutive days ending today or yesterday.

    A missing entry for today does not break the streak yet: counting starts
    from yesterday instead. A last completion older than yesterday resets the
    streak to zero regardless of how long the earlier run was.
    """
    log = set(normalize_dates(completed_dates))
    if not log:
        return 0

    today = today or app_today()
    today_key = today.isoformat()
    yesterday = today - timedelta(days=1)

    last = max(log)
    if last != today_key and last != yesterday.isoformat():
        return 0

    cursor = today if today_key in log else yesterday
    streak = 0
    while cursor.isoformat() in log:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def toggle_completion(completed_dates: Optional[Iterable[Any]], day: date) -> List[str]:
    log = set(normalize_dates(completed_dates))
    key = day.isoformat()
    if key in log:
        log.discard(key)
    else:
        log.add(key)
    return sorted(log)


def frequency_bucket(frequency: Optional[str]) -> str:
    if (frequency or "").strip().lower() == WEEKLY:
        return WEEKLY
    return DAILY


def group_by_frequency(habits: Iterable[Any]) -> Dict[str, List[Any]]:
    groups: Dict[str, List[Any]] = {DAILY: [], WEEKLY: []}
    for habit in habits:
        groups[frequency_bucket(getattr(habit, "frequency", None))].append(habit)
    return groups


def max_possible_completions(frequencies: Iterable[Optional[str]], window_kind: str, days_in_window: int) -> int:
    weekly_share = 1 if window_kind == WEEK else WEEKS_PER_MONTH
    total = 0
    for frequency in frequencies:
        if frequency_bucket(frequency) == DAILY:
            total += days_in_window
        else:
            total += weekly_share
    return total


def completion_rate(total_completed: int, max_possible: int) -> int:
    # Half-up rounding; can exceed 100 when a habit is over-completed.
    if max_possible <= 0:
        return 0
    return (total_completed * 200 + max_possible) // (max_possible * 2)
