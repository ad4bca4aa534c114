"""Thread-safe word <-> integer id registry shared by all parsing tasks."""
from __future__ import annotations

import threading
from typing import Dict, Iterator, List, Optional

__all__ = ["WordIndexer"]


class WordIndexer:
    """
    Bidirectional mapping between word strings and dense integer ids.

    Ids start at 0 and are handed out in first-registration order. The
    registry is shared by every file task of a run, so ``get_or_add_index``
    may be called concurrently; all callers racing on the same unseen word
    observe the same id and no id is ever issued twice.

    Three reserved symbols (start, end, unknown) are installed after the
    corpus has been read.

    Examples:
        >>> idx = WordIndexer()
        >>> idx.get_or_add_index("the"), idx.get_or_add_index("cat")
        (0, 1)
        >>> idx.get_word(1)
        'cat'
    """

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._words: List[str] = []
        self._lock = threading.Lock()

        self._start_symbol: Optional[str] = None
        self._end_symbol: Optional[str] = None
        self._unk_symbol: Optional[str] = None

    def get_or_add_index(self, word: str) -> int:
        """Return the id of ``word``, registering it first if unseen."""
        idx = self._ids.get(word)
        if idx is not None:
            return idx

        with self._lock:
            # Another thread may have won the race since the unlocked read
            idx = self._ids.get(word)
            if idx is None:
                idx = len(self._words)
                self._words.append(word)
                self._ids[word] = idx
            return idx

    def get_index(self, word: str) -> int:
        """Return the id of ``word``; raises KeyError if it was never registered."""
        return self._ids[word]

    def get_index_possibly_unk(self, word: str) -> int:
        """
        Return the id of ``word``, or of the unknown symbol when unseen.

        Raises:
            KeyError: If the word is unseen and no unknown symbol is installed
        """
        idx = self._ids.get(word)
        if idx is not None:
            return idx
        if self._unk_symbol is None:
            raise KeyError(word)
        return self._ids[self._unk_symbol]

    def get_word(self, idx: int) -> str:
        """Return the word registered under ``idx``; raises IndexError when out of range."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"word id {idx} out of range (0..{len(self._words) - 1})")
        return self._words[idx]

    def words(self) -> Iterator[str]:
        """Iterate registered words in id order."""
        return iter(list(self._words))

    def num_words(self) -> int:
        return len(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._ids

    # --- Reserved symbols ----------------------------------------------------

    @property
    def start_symbol(self) -> Optional[str]:
        return self._start_symbol

    @property
    def end_symbol(self) -> Optional[str]:
        return self._end_symbol

    @property
    def unk_symbol(self) -> Optional[str]:
        return self._unk_symbol

    def set_start_symbol(self, word: str) -> None:
        self._start_symbol = word

    def set_end_symbol(self, word: str) -> None:
        self._end_symbol = word

    def set_unk_symbol(self, word: str) -> None:
        self._unk_symbol = word

    def __repr__(self) -> str:
        return f"WordIndexer(num_words={len(self._words)})"
