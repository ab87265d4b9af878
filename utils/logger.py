# utils/logger.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Logging utility for sentence processing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the CNF toolkit."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class CNFLogger:
    """Centralized logger for parsing, generation and file handling."""

    def __init__(self, name: str = "cnf_tools", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        # Diagnostics go to stderr so generated sentences on stdout stay clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(CNFFormatter())

        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for sentence processing events
    def sentence_parsed(self, node_type: str, source: str):
        """Log a successful parse."""
        preview = source if len(source) <= 60 else source[:57] + "..."
        self.debug(f"Parsed {preview!r} into {node_type}")

    def instance_generated(self, clause_count: int, clause_width: int, num_variables: int):
        """Log generation of a random instance."""
        self.debug(
            f"Generated {clause_count} clauses of width {clause_width} "
            f"over {num_variables} variables"
        )

    def file_read(self, path: str, size: int):
        """Log a completed whole-file read."""
        self.debug(f"Read {size} characters from {path}")

    def file_written(self, path: str, size: int):
        """Log a completed whole-file write."""
        self.debug(f"Wrote {size} characters to {path}")


class CNFFormatter(logging.Formatter):
    """Custom formatter with clean output for INFO and above."""

    def format(self, record):
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"
        if record.levelno >= logging.ERROR:
            return f"[{record.levelname}] {record.getMessage()}"
        return record.getMessage()


# Global logger instance
_global_logger: Optional[CNFLogger] = None


def get_logger(name: str = "cnf_tools") -> CNFLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "cnf_tools")

    Returns:
        CNFLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = CNFLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
