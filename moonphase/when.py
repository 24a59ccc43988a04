""" Resolve a free-text date or time to an instant, and describe the
    interval between two instants. Based on pendulum.

    Understands "now", "today", "tomorrow", "yesterday", weekday names
    with an optional "next" or "last", "in 3 days", "2 weeks ago", and
    anything `pendulum.parse` accepts (ISO 8601 dates, times, datetimes
    and durations).
"""
import datetime
import logging
import re

import pendulum
import tzlocal

from .errors import InvalidInput

__all__ = ['parse_when', 'local_timezone', 'timesince', 'timeuntil']

logger = logging.getLogger(__name__)

ATTRIBUTES = ['years', 'months', 'weeks', 'remaining_days',
              'hours', 'minutes', 'remaining_seconds']
UNITS = ('years', 'months', 'weeks', 'days', 'hours', 'minutes', 'seconds')
WEEKDAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')
DAY_WORDS = {'today': 0, 'tomorrow': 1, 'yesterday': -1}

RELATIVE_IN = re.compile(r'^in\s+(\d+)\s+([a-z]+?)s?$')
RELATIVE_AGO = re.compile(r'^(\d+)\s+([a-z]+?)s?\s+ago$')
WEEKDAY = re.compile(r'^(?:(next|last|this)\s+)?([a-z]+)$')
EXPLICIT_OFFSET = re.compile(r"(?:z|[+-]\d{2}(?::?\d{2})?)$", re.IGNORECASE)


def local_timezone():
    name = tzlocal.get_localzone_name()
    if not name:
        logger.warning("No local timezone configured, using UTC")
        return pendulum.UTC
    return pendulum.timezone(name)


def parse_when(text=None, tz=None, now=None):
    """ Resolve `text` to an aware `pendulum.DateTime`.

        Dates without a time are midnight in the local timezone (or `tz`),
        times without a date are today. Raises `InvalidInput` for anything
        we can't resolve.
    """
    if tz is None:
        tz = local_timezone()
    elif isinstance(tz, str):
        tz = pendulum.timezone(tz)
    if now is None:
        now = pendulum.now(tz)
    else:
        now = pendulum.instance(now).in_tz(tz)

    words = ' '.join((text or '').lower().split())
    try:
        when = _resolve(words, text, tz, now)
    except (OverflowError, ValueError) as e:
        raise InvalidInput(f"Invalid date {text!r}: {e}") from e
    logger.debug("%r resolved to %s", text, when)
    return when


def _resolve(words, text, tz, now):
    if words in ('', 'now'):
        return now

    if words in DAY_WORDS:
        day = now.add(days=DAY_WORDS[words])
        return local_datetime(tz, day.year, day.month, day.day)

    match = RELATIVE_IN.match(words) or RELATIVE_AGO.match(words)
    if match:
        count, unit = int(match.group(1)), _unit(match.group(2))
        if match.re is RELATIVE_AGO:
            return now.subtract(**{unit: count})
        return now.add(**{unit: count})

    match = WEEKDAY.match(words)
    if match and match.group(2) in WEEKDAYS:
        which, name = match.groups()
        weekday = pendulum.WeekDay[name.upper()]
        day = now.previous(weekday) if which == 'last' else now.next(weekday)
        return local_datetime(tz, day.year, day.month, day.day)

    # Parse in UTC so the wall clock fields come back untouched by DST rules.
    text = text.strip()
    parsed = pendulum.parse(text, exact=True, tz=pendulum.UTC)
    if isinstance(parsed, pendulum.DateTime):
        if EXPLICIT_OFFSET.search(text):
            return parsed
        return local_datetime(tz, parsed.year, parsed.month, parsed.day, parsed.hour,
                              parsed.minute, parsed.second, parsed.microsecond)
    if isinstance(parsed, pendulum.Date):
        return local_datetime(tz, parsed.year, parsed.month, parsed.day)
    if isinstance(parsed, pendulum.Time):
        return local_datetime(tz, now.year, now.month, now.day, parsed.hour,
                              parsed.minute, parsed.second, parsed.microsecond)
    if isinstance(parsed, pendulum.Duration):
        return now + parsed
    raise InvalidInput(f"Invalid date {text!r}")


def local_datetime(tz, year, month, day, hour=0, minute=0, second=0, microsecond=0):
    """ A wall clock time in `tz`, which must happen exactly once.

        Times skipped or repeated by a daylight saving change have
        different offsets for fold=0 and fold=1.
    """
    wall = datetime.datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)
    if wall.utcoffset() != wall.replace(fold=1).utcoffset():
        raise InvalidInput(f"{wall:%Y-%m-%d %H:%M:%S} does not exist or is ambiguous in {tz.name}")
    return pendulum.instance(wall)


def _unit(word):
    for unit in UNITS:
        if unit.startswith(word) and len(word) >= 3 or word == unit[:-1]:
            return unit
    raise InvalidInput(f"Unknown unit of time {word!r}")


def timesince(when, other=None, reversed=False):
    if other is None:
        other = pendulum.now()
    diff = when - other if reversed else other - when
    values = [getattr(diff, a) for a in ATTRIBUTES]
    pairs = [
        plurals(value, a)
        for value, a in zip(values, ATTRIBUTES)
        if value > 0
    ]
    if not pairs:
        return 'now'
    # Only the first two non-zero values,
    # and seconds only if the interval is less than one hour.
    if len(pairs) > 2:
        pairs = pairs[:2]
    if diff.total_hours() > 1 and pairs[-1][1].startswith('second'):
        pairs = pairs[:1]
    return ', '.join(f"{value} {a}" for value, a in pairs)


def timeuntil(when, other=None, reversed=True):
    return timesince(when, other, reversed)


def plurals(value, a):
    a = a.replace('remaining_', '')
    a = a[:-1] if value == 1 else a
    return (value, a)
