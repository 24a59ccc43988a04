""" Turn a phase fraction into one of the eight named phases and then into
    a short string: a name, an emoji, or a number.
"""
import logging
import math

from .errors import ConfigurationError, InvalidInput
from .names import PhaseName, Variation
from .structure import Structure

__all__ = ['PHASE_OFFSET', 'MODES', 'classify', 'RenderOptions', 'render']

logger = logging.getLogger(__name__)

PHASE_COUNT = len(PhaseName)
# Buckets are centred on k/8, so each phase spans [k/8 - 1/16, k/8 + 1/16).
PHASE_OFFSET = 1 / 16
DEFAULT_PRECISION = 2

MODES = ('text', 'emoji', 'numeric')
MODE_ALIASES = {'name': 'text'}
HEMISPHERES = ('north', 'south')
NUMERIC_KINDS = ('fraction', 'index')


def classify(fraction, offset=PHASE_OFFSET):
    """ Which of the eight phases a fraction in [0, 1) belongs to.

        The low edge of each bucket is closed and the last bucket wraps
        around to New. With `offset=0` the buckets start at k/8 instead.
    """
    if not (0.0 <= fraction < 1.0):
        raise InvalidInput(f"Phase fraction {fraction!r} is outside [0, 1)")
    index = math.floor((fraction + offset) * PHASE_COUNT) % PHASE_COUNT
    return PhaseName(index)


class RenderOptions(Structure):
    """ How to display a phase.

        mode        text, emoji or numeric ('name' means text)
        variation   a `Variation` appended to each emoji, or None
        show_sign   also show the zodiac sign
        hemisphere  north or south, picks the emoji set
        numeric     fraction or index, what numeric mode prints
        precision   decimals for the numeric fraction
    """
    _fields = ['mode', 'variation', 'show_sign', 'hemisphere', 'numeric', 'precision']
    _defaults = {
        'mode': 'text',
        'variation': None,
        'show_sign': False,
        'hemisphere': 'north',
        'numeric': 'fraction',
        'precision': DEFAULT_PRECISION,
    }

    def validate(self, values):
        mode = MODE_ALIASES.get(values['mode'], values['mode'])
        if mode not in MODES:
            raise ConfigurationError(f"Unknown mode {values['mode']!r}, expected one of {', '.join(MODES)}")
        values['mode'] = mode

        variation = values['variation']
        if variation is not None and not isinstance(variation, Variation):
            try:
                variation = Variation[str(variation).title()]
            except KeyError:
                raise ConfigurationError(f"Unknown variation selector {variation!r}") from None
        values['variation'] = variation

        if values['hemisphere'] not in HEMISPHERES:
            raise ConfigurationError(f"Unknown hemisphere {values['hemisphere']!r}")
        if values['numeric'] not in NUMERIC_KINDS:
            raise ConfigurationError(f"Unknown numeric kind {values['numeric']!r}")

        precision = values['precision']
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ConfigurationError(f"Precision must be a non-negative integer, not {precision!r}")

        values['show_sign'] = bool(values['show_sign'])
        return values


def render(fraction, options=None, sign=None):
    """ Display a phase fraction (and optionally a zodiac sign) as one line of text.

        Raises `ConfigurationError` when the options ask for a sign and
        none was computed.
    """
    if options is None:
        options = RenderOptions()
    if options.show_sign and sign is None:
        raise ConfigurationError("A zodiac sign was requested but none was computed")

    phase = classify(fraction)
    logger.debug("fraction %.6f classified as %s", fraction, phase.name)

    if options.mode == 'text':
        text = phase.title
        if options.show_sign:
            text = f"{text} in {sign.title}"
        return text

    if options.mode == 'emoji':
        vs = '' if options.variation is None else options.variation.value
        glyph = phase.south_glyph if options.hemisphere == 'south' else phase.glyph
        text = glyph + vs
        if options.show_sign:
            text += sign.glyph + vs
        return text

    if options.numeric == 'index':
        text = f"{phase.index}"
    else:
        text = f"{fraction:.{options.precision}f}"
        # Rounding up to a whole lunation wraps to the new moon.
        if float(text) >= 1.0:
            text = f"{0.0:.{options.precision}f}"
    if options.show_sign:
        text = f"{text} {sign.index}"
    return text
