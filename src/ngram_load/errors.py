"""Exception hierarchy for corpus ingestion."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

__all__ = [
    "NgramReadError",
    "MissingVocabularyFileError",
    "CorpusIOError",
    "NgramParseError",
    "MalformedCountError",
    "MalformedNgramError",
]


class NgramReadError(RuntimeError):
    """Base class for every fatal ingestion failure."""


class MissingVocabularyFileError(NgramReadError):
    """Order 0 does not hold exactly one vocabulary file."""


class CorpusIOError(NgramReadError):
    """A corpus file or directory could not be read."""


class NgramParseError(NgramReadError, ValueError):
    """
    A line could not be parsed.

    The file task fills in ``path`` and ``line_number`` before re-raising so
    the message points at the offending line.
    """

    def __init__(
            self,
            message: str,
            *,
            path: Optional[Union[str, Path]] = None,
            line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.line_number = line_number

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        if self.line_number is None:
            return f"{self.path}: {self.message}"
        return f"{self.path}:{self.line_number}: {self.message}"


class MalformedCountError(NgramParseError):
    """Count field is not a signed 64-bit integer."""


class MalformedNgramError(NgramParseError):
    """Word sequence does not match the expected n-gram order."""
