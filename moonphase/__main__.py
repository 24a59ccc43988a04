""" Show the moon phase as an emoji, number, or name.

    moonphase                     # Waxing Gibbous
    moonphase -e -c next friday   # colour emoji for next Friday
    moonphase -n 2024-04-08       # 0.99
"""
import logging
from operator import attrgetter

import click

from . import __version__
from .api import MoonPhase, calc_all_moon_phases, daily_phases
from .config import CONFIG_ENV, load_options
from .errors import ConfigurationError, InvalidInput, MoonPhaseError
from .logs import configure_logging
from .names import Variation
from .when import parse_when, timesince, timeuntil

logger = logging.getLogger(__name__)

MODE_CHOICES = ('text', 'name', 'emoji', 'numeric')


def pick_one(**flags):
    """The name of the one flag that is set, None when none is, an error when several are."""
    chosen = [name for name, value in flags.items() if value]
    if len(chosen) > 1:
        options = ' and '.join('--' + name.replace('_', '-') for name in chosen)
        raise ConfigurationError(f"{options} are mutually exclusive")
    return chosen[0] if chosen else None


def build_options(defaults, mode, numeric, emoji, index, precision,
                  south_hemisphere, color_emoji, text_emoji, sign):
    """Apply the command line flags on top of the configured defaults."""
    changes = {}
    shortcut = pick_one(numeric=numeric, emoji=emoji)
    if shortcut is not None:
        changes['mode'] = shortcut
    elif mode is not None:
        changes['mode'] = mode

    variation = pick_one(color_emoji=color_emoji, text_emoji=text_emoji)
    if variation == 'color_emoji':
        changes['variation'] = Variation.Color
    elif variation == 'text_emoji':
        changes['variation'] = Variation.Text

    if index:
        changes['numeric'] = 'index'
    if precision is not None:
        changes['precision'] = precision
    if south_hemisphere:
        changes['hemisphere'] = 'south'
    if sign:
        changes['show_sign'] = True
    return defaults.replace(**changes)


def check_listing(phases, days, numeric, index, precision, sign):
    """Which listing was asked for, if any. Listings print glyphs, so numeric and sign flags are refused."""
    listing = pick_one(phases=phases, days=days is not None)
    if listing is not None:
        refused = [flag for flag, value in (('--numeric', numeric), ('--index', index),
                                            ('--precision', precision is not None), ('--sign', sign))
                   if value]
        if refused:
            raise ConfigurationError(f"--{listing} cannot be combined with {', '.join(refused)}")
    return listing


def show_phases(instant):
    fmt = '%a %-d %b %Y %H:%M %Z'
    for event in sorted(calc_all_moon_phases(instant), key=attrgetter('when')):
        local = event.when.in_tz(instant.timezone)
        if event.when < instant:
            relative = f"{timesince(event.when, instant)} ago"
        else:
            relative = f"in {timeuntil(event.when, instant)}"
        click.echo(f"{event.which.glyph} {event.which!s:15} {local:{fmt}} ({relative})")


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('-m', '--mode', type=click.Choice(MODE_CHOICES), default=None,
              help='How to show the moon phase.')
@click.option('-n', '--numeric', is_flag=True, help='Equivalent to --mode numeric.')
@click.option('-e', '--emoji', is_flag=True, help='Equivalent to --mode emoji.')
@click.option('-i', '--index', is_flag=True, help='Numeric mode shows the phase index (0-7).')
@click.option('-p', '--precision', type=click.IntRange(min=0), default=None,
              help='Decimals for numeric mode.')
@click.option('-s', '--south-hemisphere', is_flag=True,
              help='Use emojis for the Southern hemisphere (waxing crescent is \U0001f318).')
@click.option('-c', '--color-emoji', is_flag=True,
              help='Use variation selectors to prefer colour emoji (support depends on terminal).')
@click.option('-t', '--text-emoji', is_flag=True,
              help='Use variation selectors to prefer text emoji (monochrome).')
@click.option('-z', '--sign', is_flag=True, help='Also show the zodiac sign of the Moon.')
@click.option('--phases', is_flag=True, help='List the previous and next principal phases (not with --days).')
@click.option('--days', type=click.IntRange(min=1), default=None,
              help='Show one emoji per day for this many days.')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), envvar=CONFIG_ENV,
              default=None, help='INI file with default options.')
@click.option('--debug', is_flag=True, help='Enable debug logging.')
@click.version_option(__version__, '-V', '--version')
@click.argument('date', nargs=-1)
def main(mode, numeric, emoji, index, precision, south_hemisphere, color_emoji,
         text_emoji, sign, phases, days, config_path, debug, date):
    """Show the moon phase for DATE (default: now).

    DATE may be "2023-10-31", "2023-10-31 23:59:59", "friday", "in 2 weeks", ...
    """
    configure_logging(debug)
    text = ' '.join(date)
    try:
        options = build_options(load_options(config_path), mode, numeric, emoji, index,
                                precision, south_hemisphere, color_emoji, text_emoji, sign)
        listing = check_listing(phases, days, numeric, index, precision, sign)
        logger.debug("Render options: %r", options)
        instant = parse_when(text)

        if listing == 'phases':
            show_phases(instant)
        elif listing == 'days':
            vs = '' if options.variation is None else options.variation.value
            south = options.hemisphere == 'south'
            click.echo(''.join((p.south_glyph if south else p.glyph) + vs
                               for p in daily_phases(instant, days)))
        else:
            moon = MoonPhase(instant, zodiac=options.show_sign)
            click.echo(moon.render(options))
    except InvalidInput as e:
        raise click.BadParameter(str(e), param_hint='DATE') from e
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    except MoonPhaseError as e:
        raise click.ClickException(str(e)) from e


if __name__ == '__main__':
    main(prog_name='moonphase')
