"""
Logging configuration for api-builder

Provides structured logging with optional file output and console output.
Console output goes to stderr so that stdout only carries response data.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path


class ApiBuilderLogger:
    """Centralized logger for the package"""

    def __init__(
        self,
        name: str = "api_builder",
        log_file: Path | None = None,
        console_output: bool = True,
        console_level: int = logging.INFO,
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "api_builder" for the package logger)
            log_file: Path to log file (optional)
            console_output: Whether to print to console
            console_level: Minimum level shown on the console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        self.logger.handlers = []

        # Format: timestamp - module - level - message
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(console_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_cli_logging(
    log_file: Path | None = None, verbose: bool = False, quiet: bool = False
) -> logging.Logger:
    """
    Setup logging for a command line run

    Args:
        log_file: Optional file that receives DEBUG output
        verbose: Show DEBUG messages on the console
        quiet: Only show errors on the console

    Returns:
        Configured logger instance
    """
    if quiet:
        console_level = logging.ERROR
    elif verbose:
        console_level = logging.DEBUG
    else:
        console_level = logging.INFO

    logger = ApiBuilderLogger(
        name="api_builder", log_file=log_file, console_level=console_level
    ).get_logger()

    if log_file:
        logger.debug(f"api-builder run started: {datetime.now().isoformat()}")

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'builder', 'profiles')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"api_builder.{module_name}")
