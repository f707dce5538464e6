from datetime import date, datetime, timedelta, timezone

import pytest

from src.time_bank.time_bank.core.enums import PunchKind
from src.time_bank.time_bank.core.exceptions import MalformedPunchError
from src.time_bank.time_bank.punches.memory_repository import InMemoryPunchRepository, InMemoryRosterRepository
from src.time_bank.time_bank.punches.model import Employee, PunchRecord
from src.time_bank.time_bank.punches.parser import parse_punch, parse_punches


def test_parse_store_row():
    punch = parse_punch({"user_id": "u1", "clock_type": "break_start", "timestamp": "2026-10-19T12:00:00-03:00"})

    assert punch.employee_id == "u1"
    assert punch.kind == PunchKind.BREAK_START
    assert punch.timestamp == datetime(2026, 10, 19, 12, 0, tzinfo=timezone(timedelta(hours=-3)))


def test_parse_accepts_employee_id_and_datetime():
    ts = datetime(2026, 10, 19, 8, 0)

    punch = parse_punch({"employee_id": 7, "clock_type": "ENTRY", "timestamp": ts})

    assert punch == PunchRecord("7", PunchKind.ENTRY, ts)


@pytest.mark.parametrize(
    "row",
    [
        {"user_id": "u1", "clock_type": "entry", "timestamp": "2026-13-40T08:00:00"},
        {"user_id": "u1", "clock_type": "entry", "timestamp": "yesterday"},
        {"user_id": "u1", "clock_type": "entry", "timestamp": "2026-10-19"},
        {"user_id": "u1", "clock_type": "entry", "timestamp": None},
        {"user_id": "u1", "clock_type": "entry", "timestamp": 1760868000},
        {"user_id": "u1", "clock_type": "lunch", "timestamp": "2026-10-19T08:00:00"},
        {"clock_type": "entry", "timestamp": "2026-10-19T08:00:00"},
    ],
)
def test_parse_rejects_malformed_rows(row):
    with pytest.raises(MalformedPunchError):
        parse_punch(row)


def test_parse_punches_fails_on_first_bad_row():
    rows = [
        {"user_id": "u1", "clock_type": "entry", "timestamp": "2026-10-19T08:00:00"},
        {"user_id": "u1", "clock_type": "exit", "timestamp": "not-a-date"},
    ]

    with pytest.raises(MalformedPunchError):
        parse_punches(rows)


def test_memory_repository_filters_range_and_employee(punch):
    repo = InMemoryPunchRepository(
        [
            punch("u1", "entry", "2026-10-18 08:00"),
            punch("u1", "entry", "2026-10-19 08:00"),
            punch("u2", "entry", "2026-10-19 08:00"),
            punch("u1", "exit", "2026-10-20 17:00"),
        ]
    )

    got = repo.get_punches(start_date=date(2026, 10, 19), end_date=date(2026, 10, 20), employee_id="u1")

    assert [p.timestamp.day for p in got] == [19, 20]


def test_memory_repository_raises_on_malformed_record():
    repo = InMemoryPunchRepository([PunchRecord("u1", PunchKind.ENTRY, "garbage")])

    with pytest.raises(MalformedPunchError):
        repo.get_punches(start_date=date(2026, 10, 1), end_date=date(2026, 10, 31))


def test_roster_lists_by_name():
    roster = InMemoryRosterRepository([Employee("u2", "Zelia"), Employee("u1", "Ana")])

    assert [e.display_name for e in roster.list_employees()] == ["Ana", "Zelia"]
    assert roster.get_by_id("u2").display_name == "Zelia"
    assert roster.get_by_id("nope") is None


def test_date_only_timestamp_is_not_taken_as_midnight():
    with pytest.raises(MalformedPunchError) as exc:
        parse_punch({"user_id": "u1", "clock_type": "exit", "timestamp": "2026-10-19"})

    assert "time of day" in str(exc.value)


def test_repository_from_store_rows(settings):
    rows = [
        {"user_id": "u1", "clock_type": "entry", "timestamp": "2026-10-19T08:00:00-03:00"},
        {"user_id": "u1", "clock_type": "exit", "timestamp": "2026-10-19T17:00:00-03:00"},
        {"user_id": "u2", "clock_type": "entry", "timestamp": "2026-10-20T08:00:00-03:00"},
    ]
    repo = InMemoryPunchRepository.from_rows(rows, tz=settings.tzinfo)

    got = repo.get_punches(start_date=date(2026, 10, 19), end_date=date(2026, 10, 19))

    assert [(p.employee_id, p.kind) for p in got] == [("u1", PunchKind.ENTRY), ("u1", PunchKind.EXIT)]


def test_repository_from_store_rows_rejects_whole_snapshot():
    rows = [
        {"user_id": "u1", "clock_type": "entry", "timestamp": "2026-10-19T08:00:00"},
        {"user_id": "u1", "clock_type": "exit", "timestamp": "2026-10-19"},
    ]

    with pytest.raises(MalformedPunchError):
        InMemoryPunchRepository.from_rows(rows)
