# ngram_load/pipeline/worker.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ngram_load.callback import NgramOrderedCallback
from ngram_load.errors import NgramParseError
from ngram_load.io.lines import iter_lines
from ngram_load.io.parse import parse_ngram_line
from ngram_load.word_index import WordIndexer

logger = logging.getLogger(__name__)

__all__ = ["FileParseTask", "LINE_TRACE_EVERY"]

LINE_TRACE_EVERY = 1000


@dataclass
class FileParseTask:
    """
    Parse one count file of a given order and forward every line.

    Built once per file by the reader and handed to a work queue; calling
    the task runs it.
    """

    path: Path
    order: int
    callback: NgramOrderedCallback
    indexer: WordIndexer
    verbose: bool = False
    """Trace progress line by line (single-threaded runs)"""

    on_complete: Optional[Callable[["FileParseTask", int], None]] = None
    """Invoked with (task, lines) after the whole file was delivered"""

    def __call__(self) -> int:
        return self.run()

    def run(self) -> int:
        """
        Stream the file through the line parser into the callback.

        Returns:
            Number of n-grams delivered

        Raises:
            MalformedNgramError, MalformedCountError: With path and line set
            CorpusIOError: If the file cannot be read
        """
        if self.verbose:
            logger.info("Reading ngrams from file %s", self.path)

        lines = 0
        line_number = 0
        for line_number, line in enumerate(iter_lines(self.path), start=1):
            if self.verbose and (line_number - 1) % LINE_TRACE_EVERY == 0:
                logger.debug("Line %d", line_number - 1)

            if not line.strip():
                continue
            try:
                ngram, count, words = parse_ngram_line(line, self.order, self.indexer)
            except NgramParseError as exc:
                exc.path = self.path
                exc.line_number = line_number
                raise

            self.callback.call(ngram, 0, len(ngram), count, words)
            lines += 1

        if self.verbose:
            logger.info("Finished reading %s (%d lines)", self.path, line_number)
        else:
            logger.info("Finished file %s", self.path)

        if self.on_complete is not None:
            self.on_complete(self, lines)
        return lines
