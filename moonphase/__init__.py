__version__ = '2024.4.8'

from .errors import MoonPhaseError, InvalidInput, ConfigurationError, InternalCalculationError
from .names import PhaseName, ZodiacSign, Variation, Motions
from .render import RenderOptions, classify, render
from .api import (MoonPhase, to_instant, moon_age, phase_fraction, sign_for_longitude,
                  find_moon_phase, calc_all_moon_phases, daily_phases)
from .when import parse_when, timesince, timeuntil
