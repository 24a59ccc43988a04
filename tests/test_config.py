"""Tests for reading default options from an INI file."""

import pytest

from moonphase.config import CONFIG_ENV, default_config_path, load_options
from moonphase.errors import ConfigurationError
from moonphase.names import Variation
from moonphase.render import RenderOptions


def test_missing_file_gives_defaults(no_user_config) -> None:
    assert not no_user_config.exists()
    assert load_options() == RenderOptions()


def test_env_points_at_config(monkeypatch, write_config) -> None:
    path = write_config("[moonphase]\nmode = emoji\n")
    monkeypatch.setenv(CONFIG_ENV, str(path))
    assert default_config_path() == path
    assert load_options().mode == 'emoji'


def test_all_keys(write_config) -> None:
    path = write_config(
        "[moonphase]\n"
        "mode = Numeric\n"
        "variation = color\n"
        "hemisphere = south\n"
        "sign = yes\n"
        "numeric = index\n"
        "precision = 3\n"
    )
    assert load_options(path) == RenderOptions(
        mode='numeric', variation=Variation.Color, hemisphere='south',
        show_sign=True, numeric='index', precision=3)


def test_bare_sign_and_no_variation(write_config) -> None:
    options = load_options(write_config("[moonphase]\nsign\nvariation = none\n"))
    assert options.show_sign is True
    assert options.variation is None


def test_other_sections_are_ignored(write_config) -> None:
    assert load_options(write_config("[elsewhere]\nmode = emoji\n")) == RenderOptions()


@pytest.mark.parametrize("text", [
    "[moonphase]\nmode = sideways\n",
    "[moonphase]\nprecision = lots\n",
    "[moonphase]\nsign = perhaps\n",
    "[moonphase]\nvariation = sparkly\n",
    "[moonphase\nmode = emoji\n",
])
def test_bad_values(write_config, text) -> None:
    with pytest.raises(ConfigurationError):
        load_options(write_config(text))


def test_file_that_is_not_utf8(tmp_path) -> None:
    path = tmp_path / 'moonphase.ini'
    path.write_bytes(b'[moonphase]\nmode = \xff\xfe\n')
    with pytest.raises(ConfigurationError, match='Cannot read'):
        load_options(path)
