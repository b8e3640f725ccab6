import logging

import pytest

from bmr_calculator.app_logging import configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("bmr_calculator")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_repeated_setup_keeps_single_handler(package_logger: logging.Logger) -> None:
    configure_logging()
    configure_logging()
    configure_logging()

    assert len(package_logger.handlers) == 1
    assert package_logger.propagate is False


def test_later_call_updates_level(package_logger: logging.Logger) -> None:
    configure_logging("info")
    assert package_logger.level == logging.INFO

    configure_logging("debug")
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1


def test_child_loggers_inherit_level(package_logger: logging.Logger) -> None:
    configure_logging("info")
    child = logging.getLogger("bmr_calculator.form")
    assert child.getEffectiveLevel() == logging.INFO
    assert not logging.getLogger("bmr_calculator.energy").isEnabledFor(logging.DEBUG)
