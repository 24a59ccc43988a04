"""Tests for resolving free-text dates."""

import pendulum
import pytest

from moonphase.errors import InvalidInput
from moonphase.when import parse_when, timesince, timeuntil

TZ = 'Europe/Paris'
# A Wednesday afternoon.
NOW = pendulum.datetime(2024, 4, 10, 15, 30, tz=TZ)


def when(text):
    return parse_when(text, tz=TZ, now=NOW)


@pytest.mark.parametrize("text", [None, '', 'now', '  NOW '])
def test_now(text) -> None:
    assert when(text) == NOW


@pytest.mark.parametrize("text, expected", [
    ('today', pendulum.datetime(2024, 4, 10, tz=TZ)),
    ('tomorrow', pendulum.datetime(2024, 4, 11, tz=TZ)),
    ('yesterday', pendulum.datetime(2024, 4, 9, tz=TZ)),
    ('Friday', pendulum.datetime(2024, 4, 12, tz=TZ)),
    ('next wednesday', pendulum.datetime(2024, 4, 17, tz=TZ)),
    ('last Monday', pendulum.datetime(2024, 4, 8, tz=TZ)),
    ('in 3 days', pendulum.datetime(2024, 4, 13, 15, 30, tz=TZ)),
    ('in 1 month', pendulum.datetime(2024, 5, 10, 15, 30, tz=TZ)),
    ('in 90 mins', pendulum.datetime(2024, 4, 10, 17, 0, tz=TZ)),
    ('2 weeks ago', pendulum.datetime(2024, 3, 27, 15, 30, tz=TZ)),
    ('1 year ago', pendulum.datetime(2023, 4, 10, 15, 30, tz=TZ)),
])
def test_relative(text, expected) -> None:
    assert when(text) == expected


def test_date_is_local_midnight() -> None:
    result = when('2024-04-08')
    assert result == pendulum.datetime(2024, 4, 8, tz=TZ)
    assert result.in_tz('UTC') == pendulum.datetime(2024, 4, 7, 22)


def test_datetime_without_offset_is_local() -> None:
    assert when('2024-04-08 20:21') == pendulum.datetime(2024, 4, 8, 18, 21)


def test_datetime_with_offset() -> None:
    assert when('2024-04-08T18:21:00Z') == pendulum.datetime(2024, 4, 8, 18, 21)
    assert when('2024-04-08T13:21:00-05:00') == pendulum.datetime(2024, 4, 8, 18, 21)


@pytest.mark.parametrize("text, tz, now", [
    # Clocks jump from 02:00 to 03:00.
    ('2024-03-31 02:30', TZ, NOW),
    ('02:30', TZ, pendulum.datetime(2024, 3, 31, 12, tz=TZ)),
    # 02:30 happens twice when clocks go back.
    ('2024-10-27 02:30', TZ, NOW),
    # Sao Paulo skipped midnight.
    ('2018-11-04', 'America/Sao_Paulo', NOW),
    ('tomorrow', 'America/Sao_Paulo', pendulum.datetime(2018, 11, 3, 12, tz='America/Sao_Paulo')),
])
def test_daylight_saving_gaps_and_repeats(text, tz, now) -> None:
    with pytest.raises(InvalidInput):
        parse_when(text, tz=tz, now=now)


def test_around_daylight_saving_changes() -> None:
    assert when('2024-10-27 04:30') == pendulum.datetime(2024, 10, 27, 3, 30)
    assert when('2024-03-31 03:30') == pendulum.datetime(2024, 3, 31, 1, 30)
    assert when('2024-03-31') == pendulum.datetime(2024, 3, 30, 23)


@pytest.mark.parametrize("text", [
    'not a date',
    'someday',
    'in 3 fortnights',
    '2024-13-45',
    '10000-01-01',
])
def test_invalid(text) -> None:
    with pytest.raises(InvalidInput):
        when(text)


def test_timesince() -> None:
    start = pendulum.datetime(2024, 4, 1)
    assert timesince(start, pendulum.datetime(2024, 4, 4, 5)) == '3 days, 5 hours'
    assert timesince(start, pendulum.datetime(2024, 4, 2)) == '1 day'
    assert timesince(start, pendulum.datetime(2024, 4, 1, 0, 5, 30)) == '5 minutes, 30 seconds'
    assert timesince(start, start) == 'now'


def test_timeuntil() -> None:
    now = pendulum.datetime(2024, 4, 1)
    assert timeuntil(pendulum.datetime(2024, 4, 16, 2), now) == '2 weeks, 1 day'
