import logging
from pathlib import Path

import pytest

from moonphase.config import CONFIG_ENV


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep a real ~/.moonphase.ini out of the tests."""
    path = tmp_path / 'missing.ini'
    monkeypatch.setenv(CONFIG_ENV, str(path))
    return path


@pytest.fixture
def write_config(tmp_path: Path):
    """Write an INI file and return its path."""
    def write(text: str) -> Path:
        path = tmp_path / 'moonphase.ini'
        path.write_text(text, encoding='utf-8')
        return path
    return write


@pytest.fixture(autouse=True)
def quiet_logging():
    """`--debug` turns the root logger up; put it back for the next test."""
    yield
    logging.getLogger().setLevel(logging.WARNING)
