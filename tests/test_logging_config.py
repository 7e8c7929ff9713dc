"""
Tests for logging setup helpers
"""

import logging

import pytest

from api_builder.logging_config import ApiBuilderLogger, get_module_logger, setup_cli_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logging.getLogger("api_builder").handlers = []


class TestApiBuilderLogger:
    def test_console_handler_only(self):
        logger = ApiBuilderLogger(name="api_builder").get_logger()

        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.INFO

    def test_file_handler_created(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"

        logger = ApiBuilderLogger(
            name="api_builder", log_file=log_file, console_output=False
        ).get_logger()
        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_handlers_not_duplicated(self):
        ApiBuilderLogger(name="api_builder")
        logger = ApiBuilderLogger(name="api_builder").get_logger()

        assert len(logger.handlers) == 1


class TestSetupCliLogging:
    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [(False, False, logging.INFO), (True, False, logging.DEBUG), (False, True, logging.ERROR)],
    )
    def test_console_level(self, verbose, quiet, level):
        logger = setup_cli_logging(verbose=verbose, quiet=quiet)

        assert logger.handlers[0].level == level


def test_module_logger_is_child_of_package_logger():
    assert get_module_logger("builder").name == "api_builder.builder"
