"""Vocabulary loading into the shared word registry."""
from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Optional, Tuple, Union

from ngram_load.errors import MalformedCountError
from ngram_load.io.lines import iter_lines
from ngram_load.io.parse import parse_count
from ngram_load.word_index import WordIndexer

logger = logging.getLogger(__name__)

__all__ = ["load_vocabulary"]


def _split_vocab_line(line: str) -> Tuple[str, Optional[int]]:
    """Split ``word`` or ``word<TAB>count`` into (word, count or None)."""
    word, sep, rest = line.partition("\t")
    if not sep:
        return word, None
    # Any further tab-separated columns are ignored
    count_text = rest.split("\t", 1)[0]
    return word, parse_count(count_text)


def load_vocabulary(
        path: Union[str, Path],
        indexer: WordIndexer,
        *,
        sort_by_count: bool = False,
) -> int:
    """
    Register every word of a vocabulary file with ``indexer``.

    Each line is ``word`` or ``word<TAB>count``. In the default mode words
    are registered in file order, which is assumed to be sorted already.

    With ``sort_by_count`` the counts are also accumulated and the words
    re-registered by descending count afterwards. Ids are fixed at first
    registration, so this does not change the resulting ids.

    ``word``-only lines are accepted here, but the reader parses the same
    file again as the order-0 count file, where every line needs a count;
    a vocabulary without counts therefore aborts that pass with
    MalformedNgramError.

    Args:
        path: Vocabulary file (plain or gzip)
        indexer: Registry to populate
        sort_by_count: Accumulate counts and re-register by frequency

    Returns:
        Number of vocabulary entries read

    Raises:
        MalformedCountError: Count field present but not an integer, or
            missing while ``sort_by_count`` is set
        CorpusIOError: File unreadable
    """
    counts: Counter = Counter()
    n = 0

    for line_number, line in enumerate(iter_lines(path), start=1):
        if not line:
            continue
        try:
            word, count = _split_vocab_line(line)
            if sort_by_count and count is None:
                raise MalformedCountError(f"Missing count for vocabulary word {word!r}")
        except MalformedCountError as exc:
            exc.path = path
            exc.line_number = line_number
            raise

        indexer.get_or_add_index(word)
        if sort_by_count:
            counts[word] = count
        n += 1

    if sort_by_count:
        for word, _count in counts.most_common():
            indexer.get_or_add_index(word)

    logger.info("Loaded %d vocabulary entries from %s", n, path)
    return n
