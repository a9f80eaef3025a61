import math
from datetime import datetime, timedelta, timezone

import pytest

from hello_server.services.uptime import ProcessUptime, format_uptime, utc_timestamp


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (45, "45s"),
        (59.9, "59s"),
        (60, "1m 0s"),
        (125, "2m 5s"),
        (3600, "1h 0m 0s"),
        (3725, "1h 2m 5s"),
        (90061, "25h 1m 1s"),
    ],
)
def test_format_uptime(seconds, expected):
    assert format_uptime(seconds) == expected


def test_format_uptime_is_pure():
    assert format_uptime(3725.4) == format_uptime(3725.4)


@pytest.mark.parametrize("seconds", [-1, -3725, float("-inf"), math.nan])
def test_format_uptime_clamps_negative_and_nan_to_zero(seconds):
    assert format_uptime(seconds) == "0s"


def test_format_uptime_rejects_infinity():
    with pytest.raises(ValueError):
        format_uptime(float("inf"))


def test_process_uptime_counts_from_start():
    now = [10.0]
    uptime = ProcessUptime(clock=lambda: now[0])
    assert uptime.seconds() == 0.0

    now[0] = 52.5
    assert uptime.seconds() == 42.5


def test_process_uptime_never_negative():
    uptime = ProcessUptime(started_at=100.0, clock=lambda: 50.0)
    assert uptime.seconds() == 0.0


def test_utc_timestamp_format():
    moment = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
    assert utc_timestamp(moment) == "2024-01-02T03:04:05.678Z"


def test_utc_timestamp_converts_other_offsets():
    moment = datetime(2024, 1, 2, 5, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert utc_timestamp(moment) == "2024-01-02T03:00:00.000Z"


def test_utc_timestamp_defaults_to_now():
    stamp = utc_timestamp()
    assert stamp.endswith("Z")
    parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
    assert abs((datetime.now(timezone.utc) - parsed).total_seconds()) < 5
