from datetime import date, datetime, timezone
from types import SimpleNamespace

from clarity.reminders import event_start, find_due_reminders, is_due


def _event(event_id=1, title="Standup", day=date(2024, 6, 1), time="12:30", link=None):
    return SimpleNamespace(id=event_id, title=title, date=day, time=time, link=link)


NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_event_start_uses_owner_timezone():
    start = event_start(_event(time="18:00"), "Asia/Kolkata")
    assert start.astimezone(timezone.utc) == datetime(2024, 6, 1, 12, 30, tzinfo=timezone.utc)


def test_event_without_time_or_bad_time_is_skipped():
    assert event_start(_event(time=None)) is None
    assert event_start(_event(time="25:00")) is None
    assert event_start(_event(time="noon")) is None


def test_window_bounds():
    assert is_due(datetime(2024, 6, 1, 12, 25, tzinfo=timezone.utc), NOW)
    assert is_due(datetime(2024, 6, 1, 12, 34, tzinfo=timezone.utc), NOW)
    assert not is_due(datetime(2024, 6, 1, 12, 35, tzinfo=timezone.utc), NOW)
    assert not is_due(datetime(2024, 6, 1, 12, 24, tzinfo=timezone.utc), NOW)


def test_find_due_reminders_payload():
    events = [
        _event(1, "Standup", time="12:30"),
        _event(2, "Lunch", time="13:30", link="https://example.com/lunch"),
        _event(3, "Review", time="12:28", link="https://example.com/review"),
    ]
    due = find_due_reminders(events, NOW, "UTC")
    assert [d["event_id"] for d in due] == [1, 3]
    assert due[0]["body"] == '"Standup" is starting in 30 minutes!'
    assert due[0]["url"] == "/dashboard"
    assert due[1]["url"] == "https://example.com/review"


def test_unknown_timezone_falls_back_to_utc():
    due = find_due_reminders([_event(time="12:30")], NOW, "Mars/Olympus")
    assert len(due) == 1
