import logging

import pytest

from rhyme_scout.utils import logging_config
from rhyme_scout.utils.logging_config import configure_logging


@pytest.fixture
def basic_config_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    logger = logging.getLogger("rhyme_scout")
    previous = logger.level
    yield calls
    logger.setLevel(previous)


def test_configure_logging_sets_package_level(basic_config_calls):
    assert configure_logging("debug") == logging.DEBUG

    assert basic_config_calls[0]["level"] == logging.DEBUG
    assert basic_config_calls[0]["format"] == "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    assert logging.getLogger("rhyme_scout").level == logging.DEBUG


def test_configure_logging_is_idempotent_unless_forced(basic_config_calls):
    configure_logging("WARNING")

    assert configure_logging("DEBUG") == logging.WARNING
    assert len(basic_config_calls) == 1

    assert configure_logging("ERROR", force=True) == logging.ERROR
    assert basic_config_calls[-1]["force"] is True


def test_configure_logging_reads_environment(basic_config_calls, monkeypatch):
    monkeypatch.setenv("RHYMES_LOG_LEVEL", "warning")
    assert configure_logging() == logging.WARNING


@pytest.mark.parametrize("level,expected", [("loud", logging.INFO), ("15", 15), (logging.ERROR, logging.ERROR)])
def test_configure_logging_level_resolution(basic_config_calls, level, expected):
    assert configure_logging(level) == expected
