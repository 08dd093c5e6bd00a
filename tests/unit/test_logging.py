"""
Тесты для utils.logging
"""

import logging

import pytest

from numeral_systems.utils.logging import ROOT_LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def restore_level():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logger.level
    yield
    logger.setLevel(level)


class TestLogging:
    """Тесты get_logger и setup_logging."""

    def test_logger_namespace(self):
        assert get_logger("converter").name == "numeral_systems.converter"

    def test_child_of_package_logger(self):
        assert get_logger("registry").parent is logging.getLogger(ROOT_LOGGER_NAME)

    def test_setup_logging_debug(self, restore_level):
        setup_logging(debug=True)
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG

    def test_setup_logging_default(self, restore_level):
        setup_logging()
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO
