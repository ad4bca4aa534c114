"""Run statistics returned by the reader."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

__all__ = ["OrderStats", "ReadStats"]


@dataclass
class OrderStats:
    """What was delivered for one n-gram order."""

    order: int
    """Zero-based order"""

    directory: Path
    """Order directory the files came from"""

    files: int = 0
    """Number of files parsed"""

    ngrams: int = 0
    """Number of n-grams handed to the callback"""

    elapsed_s: float = 0.0
    """Wall time from first submission to the order barrier"""


@dataclass
class ReadStats:
    """Summary of a complete corpus read."""

    root: Path
    num_load_threads: int
    vocab_entries: int = 0
    vocab_size: int = 0  # Word index size after the whole read
    orders: List[OrderStats] = field(default_factory=list)
    elapsed_s: float = 0.0

    @property
    def total_ngrams(self) -> int:
        return sum(o.ngrams for o in self.orders)

    @property
    def total_files(self) -> int:
        return sum(o.files for o in self.orders)
