# utils/sentence_io.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Whole-file reading and writing of sentence text

"""Flat text file access for sentences.

A sentence file holds one sentence in the textual grammar, with no header
or metadata. Both operations open the file once inside a ``with`` block
and report any operating-system failure as SentenceIOError, which keeps
"could not read" apart from "could not parse".
"""

from pathlib import Path
from typing import Union

from utils.logger import get_logger

PathLike = Union[str, Path]


class SentenceIOError(OSError):
    """Exception raised when a sentence file cannot be read or written.

    Attributes:
        path: The file that failed
        cause: The underlying OSError
    """

    def __init__(self, message: str, path: PathLike, cause: OSError):
        super().__init__(message)
        self.path = str(path)
        self.cause = cause


def read_sentence_file(path: PathLike) -> str:
    """Read the full contents of a sentence file.

    Args:
        path: File to read

    Returns:
        The file contents as one string

    Raises:
        SentenceIOError: If the file cannot be opened or read
    """
    logger = get_logger()
    logger.debug(f"Reading sentence file: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise SentenceIOError(f"Error reading file {path}: {e}", path, e) from e

    logger.file_read(str(path), len(content))
    return content


def write_sentence_file(path: PathLike, text: str) -> None:
    """Write sentence text to a file, replacing any existing contents.

    Args:
        path: Destination file
        text: Sentence text to write

    Raises:
        SentenceIOError: If the file cannot be opened or written
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise SentenceIOError(f"IO Error writing file {path}: {e}", path, e) from e

    get_logger().file_written(str(path), len(text))
