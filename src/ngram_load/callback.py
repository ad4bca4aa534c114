"""Consumer interface for n-grams streamed by the reader."""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

__all__ = ["NgramOrderedCallback", "CollectingCallback"]


class NgramOrderedCallback(ABC):
    """
    Receives n-grams one order at a time.

    ``call`` may be invoked concurrently from several loader threads while an
    order is being read; implementations must do their own locking. Every
    ``call`` for order k happens before ``handle_ngram_order_finished(k + 1)``.
    """

    @abstractmethod
    def call(
            self,
            ngram: Sequence[int],
            start: int,
            end: int,
            count: int,
            words: str,
    ) -> None:
        """Consume ``ngram[start:end]`` with its count and raw word text."""

    @abstractmethod
    def handle_ngram_order_finished(self, next_order: int) -> None:
        """All n-grams of order ``next_order - 1`` have been delivered."""

    @abstractmethod
    def cleanup(self) -> None:
        """Called once after the last order."""


class CollectingCallback(NgramOrderedCallback):
    """
    Keeps everything it receives in memory.

    Records are grouped by the order being read (the number of
    ``handle_ngram_order_finished`` calls seen so far), and ``events`` keeps
    the sequence of calls, order boundaries and cleanup. Meant for
    diagnostics and small corpora.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current_order = 0
        self.records: Dict[int, List[Tuple[Tuple[int, ...], int, str]]] = defaultdict(list)
        self.events: List[Tuple[str, int]] = []
        self.cleaned_up = 0

    def call(self, ngram, start, end, count, words) -> None:
        rec = (tuple(ngram[start:end]), count, words)
        with self._lock:
            self.records[self._current_order].append(rec)
            self.events.append(("call", self._current_order))

    def handle_ngram_order_finished(self, next_order: int) -> None:
        with self._lock:
            self.events.append(("order_finished", next_order))
            self._current_order = next_order

    def cleanup(self) -> None:
        with self._lock:
            self.events.append(("cleanup", self._current_order))
            self.cleaned_up += 1

    def total_count(self, order: int) -> int:
        """Sum of counts received for ``order``."""
        with self._lock:
            return sum(count for _ngram, count, _words in self.records.get(order, ()))
