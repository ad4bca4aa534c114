"""
Streaming reader for Web1T-style n-gram count corpora.

Reads a corpus directory (one subdirectory per n-gram order, gzip count
files inside) order by order, maps words to dense integer ids, and hands
every n-gram with its count to a callback.

Main entry points:
    read_corpus() - Read a corpus with a fresh or supplied word index
    Web1TReader - The order-driven reader itself

Key components:
    - word_index: Thread-safe word <-> id registry
    - io: Layout discovery, vocabulary loading, line parsing
    - pipeline: Work queues, per-file tasks, logging and reporting
    - callback: Consumer interface
"""

from ngram_load.callback import CollectingCallback, NgramOrderedCallback
from ngram_load.config import ReaderConfig
from ngram_load.core import END_SYMBOL, START_SYMBOL, UNK_SYMBOL, Web1TReader, read_corpus
from ngram_load.errors import (
    CorpusIOError,
    MalformedCountError,
    MalformedNgramError,
    MissingVocabularyFileError,
    NgramParseError,
    NgramReadError,
)
from ngram_load.types import OrderStats, ReadStats
from ngram_load.word_index import WordIndexer

__all__ = [
    "read_corpus",
    "Web1TReader",
    "WordIndexer",
    "ReaderConfig",
    "NgramOrderedCallback",
    "CollectingCallback",
    "ReadStats",
    "OrderStats",
    "START_SYMBOL",
    "END_SYMBOL",
    "UNK_SYMBOL",
    "NgramReadError",
    "MissingVocabularyFileError",
    "CorpusIOError",
    "NgramParseError",
    "MalformedCountError",
    "MalformedNgramError",
]
