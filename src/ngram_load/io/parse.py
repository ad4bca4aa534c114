# ngram_load/io/parse.py
from __future__ import annotations

import re
from typing import List, NamedTuple

from ngram_load.errors import MalformedCountError, MalformedNgramError
from ngram_load.word_index import WordIndexer

__all__ = ["NgramRecord", "parse_count", "parse_ngram_line"]

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_COUNT_RX = re.compile(r"[+-]?[0-9]+")


class NgramRecord(NamedTuple):
    """One parsed count-file line."""
    ngram: List[int]
    count: int
    words: str


def parse_count(text: str) -> int:
    """
    Parse a signed 64-bit decimal count.

    Stricter than ``int()``: no surrounding whitespace, no digit separators,
    no non-ASCII digits.

    Raises:
        MalformedCountError: If ``text`` is not an integer or overflows int64
    """
    if not _COUNT_RX.fullmatch(text):
        raise MalformedCountError(f"Non-numeric count {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedCountError(f"Count {text!r} out of 64-bit range")
    return value


def parse_ngram_line(line: str, order: int, indexer: WordIndexer) -> NgramRecord:
    """
    Parse ``"w1 w2 ... wk\\tCOUNT"`` into integer ids and a count.

    Args:
        line: One count-file line (surrounding whitespace is stripped)
        order: N-gram order, i.e. n-gram length minus one
        indexer: Shared word registry; unseen words are added to it

    Returns:
        NgramRecord of ``order + 1`` word ids, the count and the raw word text

    Raises:
        MalformedNgramError: Missing tab, or not exactly ``order + 1`` words
        MalformedCountError: Count is not a 64-bit integer

    Examples:
        >>> idx = WordIndexer()
        >>> parse_ngram_line("the cat\\t42", 1, idx)
        NgramRecord(ngram=[0, 1], count=42, words='the cat')
    """
    s = line.strip()

    # Words and count are separated by the first tab only
    words, sep, count_text = s.partition("\t")
    if not sep:
        raise MalformedNgramError(f"Missing tab-separated count in line {s!r}")

    tokens = words.split(" ")
    if len(tokens) != order + 1:
        raise MalformedNgramError(
            f"Expected {order + 1} words for order {order}, got {len(tokens)} in {words!r}"
        )
    if "" in tokens:
        raise MalformedNgramError(f"Empty word in {words!r}")

    count = parse_count(count_text)
    ngram = [indexer.get_or_add_index(tok) for tok in tokens]
    return NgramRecord(ngram, count, words)
