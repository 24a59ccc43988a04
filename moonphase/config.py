""" Defaults for the render options, read from an INI file.

    The file is `~/.moonphase.ini`, or wherever $MOONPHASE_CONFIG points:

        [moonphase]
        mode = emoji
        variation = color
        hemisphere = north
        sign = no
        numeric = fraction
        precision = 2
"""
import logging
import os
from configparser import ConfigParser, Error
from pathlib import Path

from .errors import ConfigurationError
from .render import RenderOptions

__all__ = ['CONFIG_ENV', 'default_config_path', 'load_options']

logger = logging.getLogger(__name__)

CONFIG_ENV = 'MOONPHASE_CONFIG'
MOONPHASE_CONFIG = Path.home() / '.moonphase.ini'
SECTION = 'moonphase'


def default_config_path():
    if os.environ.get(CONFIG_ENV):
        return Path(os.environ[CONFIG_ENV]).expanduser()
    return MOONPHASE_CONFIG


def load_variation(value):
    if value is None:
        return None
    value = value.strip().lower()
    return None if value in ('', 'none') else value


def load_options(path=None):
    """ Read the `[moonphase]` section into a `RenderOptions`.

        A missing file (or section) gives the defaults.
    """
    if path is None:
        path = default_config_path()
    path = Path(path)

    parser = ConfigParser(
        allow_no_value=True,
        converters={'variation': load_variation}
    )
    try:
        found = parser.read(path, encoding='utf-8')
    except (Error, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e
    if not found or not parser.has_section(SECTION):
        logger.debug("No [%s] section in %s, using defaults", SECTION, path)
        return RenderOptions()
    logger.debug("Reading defaults from %s", path)

    section = parser[SECTION]
    values = {}
    try:
        for key in ('mode', 'hemisphere', 'numeric'):
            if section.get(key):
                values[key] = section.get(key).strip().lower()
        if 'variation' in section:
            values['variation'] = section.getvariation('variation', fallback=None)
        if 'sign' in section:
            # A bare `sign` line turns it on.
            values['show_sign'] = section['sign'] is None or section.getboolean('sign')
        if 'precision' in section:
            values['precision'] = section.getint('precision')
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Bad value in {path}: {e}") from e
    return RenderOptions(**values)
