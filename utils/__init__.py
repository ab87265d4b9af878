# utils/__init__.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Utility module exports

from .logger import LogLevel, get_logger, set_log_level, configure_logging
from .sentence_io import read_sentence_file, write_sentence_file, SentenceIOError

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "read_sentence_file",
    "write_sentence_file",
    "SentenceIOError",
]
