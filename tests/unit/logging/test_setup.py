import logging

import pytest

from awsclients import config
from awsclients.logging.setup import get_log_level_from_config, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "log_setting, debug, level",
    [
        (False, False, logging.INFO),
        (False, True, logging.DEBUG),
        ("trace", True, logging.DEBUG),
        ("warn", False, logging.WARNING),
        ("error", False, logging.ERROR),
    ],
)
def test_get_log_level_from_config(monkeypatch, log_setting, debug, level):
    monkeypatch.setattr(config, "AWSCLIENTS_LOG", log_setting)
    monkeypatch.setattr(config, "DEBUG", debug)

    assert get_log_level_from_config() == level


def test_setup_logging():
    setup_logging(logging.DEBUG)

    assert logging.getLogger("awsclients").level == logging.DEBUG
    assert logging.getLogger("botocore").level == logging.ERROR
    assert logging.getLogger("awsclients.request").level == logging.INFO
