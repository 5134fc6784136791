from datetime import datetime

import pytest

from services.booking_service import InvalidPreferredTime, parse_preferred_time


@pytest.mark.parametrize(
    "raw",
    ["2025-06-01T10:00:00Z", "2025-06-01T12:00:00+02:00", "2025-06-01T10:00", " 2025-06-01T10:00:00z "],
)
def test_parses_to_naive_utc(raw):
    assert parse_preferred_time(raw) == datetime(2025, 6, 1, 10, 0)


def test_date_only_is_midnight():
    assert parse_preferred_time("2025-06-01") == datetime(2025, 6, 1)


@pytest.mark.parametrize(
    "raw",
    [
        "not-a-date",
        "",
        None,
        "2025-13-01",
        "tomorrow at 5",
        "0001-01-01T00:30:00+01:00",
        "9999-12-31T23:30:00-01:00",
    ],
)
def test_rejects_unparseable(raw):
    with pytest.raises(InvalidPreferredTime):
        parse_preferred_time(raw)
