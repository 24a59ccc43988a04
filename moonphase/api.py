""" The phase of the Moon from a low-order periodic model.

    Every quantity is a sinusoid (or sawtooth) of the julian date with a
    fixed period and a reference date at which its cycle starts. The
    constants below are the usual Schaefer/Conway style values; the
    results are good to a few hours, which is plenty for a status bar.
"""
import datetime
import logging
import math
from collections import namedtuple
from math import pi

import numpy as np
import pendulum

from .distance import Distance
from .errors import InternalCalculationError, InvalidInput
from .names import PRINCIPAL_PHASES, Motions, PhaseName, ZodiacSign
from .render import PHASE_OFFSET, classify, render

__all__ = ['MoonPhase', 'MotionEvent', 'to_instant', 'julian_date',
           'moon_age', 'phase_fraction', 'sign_for_longitude',
           'find_moon_phase', 'calc_all_moon_phases', 'daily_phases']

logger = logging.getLogger(__name__)

twopi = pi * 2

hour = 1 / 24
second = hour / 3600
SECONDS_PER_DAY = 86400

UNIX_EPOCH_JD = 2440587.5  # 1970-01-01 00:00 UTC

# Illumination (synodic) cycle, from the new moon of 2000-01-06 18:14 UTC.
SYNODIC_MONTH = 29.530588853
REFERENCE_NEW_MOON_JD = 2451550.26
REFERENCE_NEW_MOON = pendulum.datetime(2000, 1, 6, 18, 14, 24)

# Distance (anomalistic) cycle.
ANOMALISTIC_MONTH = 27.55454988
ANOMALISTIC_OFFSET_JD = 2451562.2

# Latitude (nodal, draconic) cycle.
DRACONIC_MONTH = 27.212220817
DRACONIC_OFFSET_JD = 2451565.2

# Longitude (sidereal) cycle.
SIDEREAL_MONTH = 27.321582241
SIDEREAL_OFFSET_JD = 2451555.8

EARTH_RADII_MEAN_DISTANCE = 60.4
MAX_LATITUDE = 5.1
DEGREES_PER_SIGN = 30

MotionEvent = namedtuple('MotionEvent', 'motion which when')


def to_instant(when=None):
    """ Normalise `when` to an immutable UTC `pendulum.DateTime`.

        Accepts an aware datetime, a POSIX timestamp, or None for now.
        Naive datetimes and bare dates are ambiguous and rejected.
    """
    if when is None:
        return pendulum.now('UTC')

    if isinstance(when, datetime.datetime):
        if when.utcoffset() is None:
            raise InvalidInput(f"{when!r} has no timezone")
        try:
            return pendulum.instance(when).in_tz('UTC')
        except (OverflowError, ValueError) as e:
            raise InvalidInput(f"{when!r} cannot be converted to UTC: {e}") from e

    if isinstance(when, datetime.date):
        raise InvalidInput(f"{when!r} is a date without a time or timezone")

    if isinstance(when, (int, float)) and not isinstance(when, bool):
        if not math.isfinite(when):
            raise InvalidInput(f"Timestamp {when!r} is not finite")
        try:
            return pendulum.from_timestamp(when, tz='UTC')
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInput(f"Timestamp {when!r} is out of range: {e}") from e

    raise InvalidInput(f"Cannot use {type(when).__name__} {when!r} as a point in time")


def julian_date(instant):
    """Julian date (days, fractional) of a UTC instant."""
    return instant.timestamp() / SECONDS_PER_DAY + UNIX_EPOCH_JD


def cycle(jd, period, offset_jd):
    """Fraction [0, 1) of the way through a cycle of `period` days."""
    value = ((jd - offset_jd) / period) % 1.0
    return 0.0 if value >= 1.0 else value


def moon_age(when=None):
    """Days since the last new moon, in [0, SYNODIC_MONTH)."""
    return _age(julian_date(to_instant(when)))


def _age(jd):
    elapsed = jd - REFERENCE_NEW_MOON_JD
    age = ((elapsed % SYNODIC_MONTH) + SYNODIC_MONTH) % SYNODIC_MONTH
    # A tiny negative `elapsed` rounds up to a whole period.
    if age >= SYNODIC_MONTH:
        age = 0.0
    if not (0.0 <= age < SYNODIC_MONTH):
        raise InternalCalculationError(f"Moon age {age!r} for JD {jd!r} is outside [0, {SYNODIC_MONTH})")
    return age


def _fraction(age):
    fraction = age / SYNODIC_MONTH
    if fraction >= 1.0:
        fraction = 0.0
    if not (0.0 <= fraction < 1.0):
        raise InternalCalculationError(f"Phase fraction {fraction!r} is outside [0, 1)")
    return fraction


def phase_fraction(when=None):
    """Where we are in the current lunation, 0.0 (new) through 0.5 (full) up to 1.0."""
    return _fraction(moon_age(when))


def sign_for_longitude(longitude):
    """The zodiac sign whose 30 degree sector contains `longitude`."""
    if not math.isfinite(longitude):
        raise InvalidInput(f"Longitude {longitude!r} is not finite")
    longitude %= 360
    index = int(longitude // DEGREES_PER_SIGN) % len(ZodiacSign)
    return ZodiacSign(index)


class MoonPhase:
    """
    `MoonPhase` is everything we know about the Moon at one instant:
    - instant, jd (julian date)
    - age (days) and fraction of the lunation
    - phase (one of the eight `PhaseName`s)
    - illumination, distance, latitude, longitude
    - sign, only when created with `zodiac=True`

    """

    def __init__(self, when=None, zodiac=False):
        self.instant = to_instant(when)
        self.jd = jd = julian_date(self.instant)
        self.age = _age(jd)
        self.fraction = _fraction(self.age)
        self.phase = classify(self.fraction)
        logger.debug("%s: JD %.6f, age %.4f days, fraction %.6f, %s",
                     self.instant, jd, self.age, self.fraction, self.phase.name)

        phase_tau = 2 * twopi * self.fraction
        distance_tau = twopi * cycle(jd, ANOMALISTIC_MONTH, ANOMALISTIC_OFFSET_JD)
        difference_tau = phase_tau - distance_tau

        self.illumination = (1 - math.cos(twopi * self.fraction)) / 2
        self.distance = Distance(earth_radii=EARTH_RADII_MEAN_DISTANCE
                                 - 3.3 * math.cos(distance_tau)
                                 - 0.6 * math.cos(difference_tau)
                                 - 0.5 * math.cos(phase_tau))
        self.latitude = MAX_LATITUDE * math.sin(twopi * cycle(jd, DRACONIC_MONTH, DRACONIC_OFFSET_JD))
        longitude = (360 * cycle(jd, SIDEREAL_MONTH, SIDEREAL_OFFSET_JD)
                     + 6.3 * math.sin(distance_tau)
                     + 1.3 * math.sin(difference_tau)
                     + 0.7 * math.sin(phase_tau))
        longitude %= 360
        self.longitude = 0.0 if longitude >= 360 else longitude
        self.sign = sign_for_longitude(self.longitude) if zodiac else None

    def __repr__(self):
        return f"<{type(self).__name__} {self.instant} {self.phase} {self.fraction:.2f}>"

    def render(self, options=None):
        return render(self.fraction, options, self.sign)


def find_moon_phase(when, motion, target):
    """
    Find the next or previous time the mean Moon reaches phase `target`.

    When we are already within a second of the target the search moves on
    to the following (or preceding) lunation.
    """
    instant = to_instant(when)
    fraction = phase_fraction(instant)
    to_cover = (motion.value * (target.fraction - fraction)) % 1.0
    if to_cover * SYNODIC_MONTH < second:
        to_cover = 1.0
    days = motion.value * to_cover * SYNODIC_MONTH
    try:
        return instant + datetime.timedelta(days=days)
    except OverflowError as e:
        raise InvalidInput(f"No {target} {motion.name.lower()} of {instant} in range") from e


def calc_all_moon_phases(when=None, phases=PRINCIPAL_PHASES):
    """ Generate each of the previous and next moon phases from the specified time.
    """
    instant = to_instant(when)
    for motion in Motions:
        for phase in phases:
            yield MotionEvent(motion, phase, find_moon_phase(instant, motion, phase))


def daily_phases(when=None, days=7):
    """ The phase for each of `days` days, starting at `when`, one step per day."""
    if days < 0:
        raise InvalidInput(f"Cannot list {days} days")
    start = julian_date(to_instant(when))
    jd = start + np.arange(days, dtype=float)
    fractions = np.mod(jd - REFERENCE_NEW_MOON_JD, SYNODIC_MONTH) / SYNODIC_MONTH
    fractions[fractions >= 1.0] = 0.0
    indices = np.floor((fractions + PHASE_OFFSET) * len(PhaseName)).astype(int) % len(PhaseName)
    return [PhaseName(int(i)) for i in indices]


if __name__ == '__main__':
    moon = MoonPhase(zodiac=True)
    print(f"{moon.instant:%a %-d %b %Y %H:%M %Z}: {moon.phase} {moon.phase.glyph} in {moon.sign}")
    print(f"Age {moon.age:.1f} days, {moon.illumination:.0%} lit, {moon.distance.km:,.0f} km")
    for event in sorted(calc_all_moon_phases(moon.instant), key=lambda e: e.when):
        print(f"{event.which!s:18} {event.when:%a %-d %b %Y %H:%M}")
