""" The closed sets of names we work with: the eight phases, the twelve
    signs, the two variation selectors and the direction of a search.
"""
import re
from enum import Enum

UNICODE_MOON_PHASES = 0x1f311  # NEW MOON SYMBOL, the other seven follow it
UNICODE_ZODIAC = 0x2648  # ARIES, through PISCES at 0x2653


def _spaced(name):
    return re.sub(r'(?<!^)(?=[A-Z])', ' ', name)


class PhaseName(Enum):
    New = 0
    WaxingCrescent = 1
    FirstQuarter = 2
    WaxingGibbous = 3
    Full = 4
    WaningGibbous = 5
    LastQuarter = 6
    WaningCrescent = 7

    def __str__(self):
        return self.title

    @property
    def title(self):
        return _spaced(self.name)

    @property
    def index(self):
        return self.value

    @property
    def glyph(self):
        return chr(UNICODE_MOON_PHASES + self.value)

    @property
    def south_glyph(self):
        """Seen from the Southern hemisphere the lit side is reversed."""
        return chr(UNICODE_MOON_PHASES + (-self.value % 8))

    @property
    def fraction(self):
        """Nominal phase fraction at the centre of this phase."""
        return self.value / 8


PRINCIPAL_PHASES = (PhaseName.New, PhaseName.FirstQuarter,
                    PhaseName.Full, PhaseName.LastQuarter)


class ZodiacSign(Enum):
    Aries = 0
    Taurus = 1
    Gemini = 2
    Cancer = 3
    Leo = 4
    Virgo = 5
    Libra = 6
    Scorpio = 7
    Sagittarius = 8
    Capricorn = 9
    Aquarius = 10
    Pisces = 11

    def __str__(self):
        return self.title

    @property
    def title(self):
        return self.name

    @property
    def index(self):
        return self.value

    @property
    def glyph(self):
        return chr(UNICODE_ZODIAC + self.value)

    @property
    def start(self):
        """Ecliptic longitude (degrees) where this sector begins."""
        return self.value * 30


class Variation(Enum):
    Text = '\ufe0e'  # VS15, monochrome
    Color = '\ufe0f'  # VS16, colour emoji


class Motions(Enum):
    Previous = -1
    Next = 1
