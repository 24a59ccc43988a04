""" Everything we raise derives from `MoonPhaseError`, so the command line
    can turn any of them into a message and an exit code.
"""

__all__ = ['MoonPhaseError', 'InvalidInput', 'ConfigurationError',
           'InternalCalculationError']


class MoonPhaseError(Exception):
    """Base class for moonphase errors."""


class InvalidInput(MoonPhaseError, ValueError):
    """A date/time could not be resolved or lies outside the representable range."""


class ConfigurationError(MoonPhaseError):
    """Render options are incomplete or mutually exclusive."""


class InternalCalculationError(MoonPhaseError, ArithmeticError):
    """An arithmetic invariant was violated. Should be unreachable."""
