"""Order-by-order reader for Web1T-style n-gram count corpora."""
from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Optional, Tuple, Union

from tqdm import tqdm

from ngram_load.callback import NgramOrderedCallback
from ngram_load.config import ReaderConfig
from ngram_load.io.layout import OrderDirectory, discover_layout
from ngram_load.io.vocab import load_vocabulary
from ngram_load.pipeline.logger import setup_logger
from ngram_load.pipeline.reporter import print_read_summary
from ngram_load.pipeline.work_queue import make_work_queue
from ngram_load.pipeline.worker import FileParseTask
from ngram_load.types import OrderStats, ReadStats
from ngram_load.word_index import WordIndexer

logger = logging.getLogger(__name__)

__all__ = ["Web1TReader", "read_corpus", "START_SYMBOL", "END_SYMBOL", "UNK_SYMBOL"]

try:
    import setproctitle as _setproctitle
except ImportError:
    _setproctitle = None

START_SYMBOL = "<S>"
END_SYMBOL = "</S>"
UNK_SYMBOL = "<UNK>"


class Web1TReader:
    """
    Reads an n-gram count corpus laid out like the Google Web1T release.

    The root directory holds one subdirectory per order (``1gms``, ``2gms``,
    ...). ``1gms`` holds the vocabulary file, which is loaded into the word
    index first and then read as the unigram counts; the other directories
    hold gzip count files with lines ``w1 w2 ... wk<TAB>count``.

    Orders are read strictly one after another. The files of one order are
    parsed concurrently when ``config.num_load_threads > 0``, and every
    n-gram is passed to the callback as soon as its line is parsed.

    Args:
        root_dir: Corpus root directory
        indexer: Word index shared by every file task; populated in place
        config: Reader options (default: ReaderConfig())
    """

    def __init__(
            self,
            root_dir: Union[str, Path],
            indexer: WordIndexer,
            config: Optional[ReaderConfig] = None,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.indexer = indexer
        self.config = config or ReaderConfig()

    def parse(self, callback: NgramOrderedCallback) -> ReadStats:
        """
        Stream the whole corpus into ``callback``.

        Sequence: discover orders, load the vocabulary, then for each order
        parse all of its files and call
        ``callback.handle_ngram_order_finished(order + 1)``; finally call
        ``callback.cleanup()`` and install ``<S>``, ``</S>`` and ``<UNK>`` as
        the indexer's reserved symbols.

        Returns:
            ReadStats for the run

        Raises:
            MissingVocabularyFileError: No order directories, or no vocab file
            MalformedNgramError, MalformedCountError: A line failed to parse
            CorpusIOError: A file or directory could not be read
        """
        start = time.perf_counter()
        cfg = self.config

        layout = discover_layout(self.root_dir, cfg)
        stats = ReadStats(root=layout.root, num_load_threads=cfg.num_load_threads)

        logger.info("Loading vocabulary from %s", layout.vocab_path)
        stats.vocab_entries = load_vocabulary(
            layout.vocab_path, self.indexer, sort_by_count=cfg.sort_vocab_by_count
        )

        for order_dir in layout.orders:
            stats.orders.append(self._read_order(order_dir, callback))
            callback.handle_ngram_order_finished(order_dir.order + 1)

        callback.cleanup()
        self._resolve_reserved_symbols()

        stats.vocab_size = len(self.indexer)
        stats.elapsed_s = time.perf_counter() - start
        logger.info(
            "Finished reading %d orders: %d n-grams, %d words",
            len(stats.orders), stats.total_ngrams, stats.vocab_size,
        )
        return stats

    def _read_order(self, order_dir: OrderDirectory, callback: NgramOrderedCallback) -> OrderStats:
        """Parse every file of one order and wait at the barrier."""
        cfg = self.config
        order_stats = OrderStats(order=order_dir.order, directory=order_dir.path)
        lock = threading.Lock()
        start = time.perf_counter()

        logger.info("Reading ngrams of order %d", order_dir.order + 1)

        with tqdm(
                total=len(order_dir.files),
                desc=f"Order {order_dir.order + 1}",
                unit="files",
                ncols=100,
                disable=not cfg.show_progress,
        ) as pbar:

            def file_done(task: FileParseTask, lines: int) -> None:
                with lock:
                    order_stats.files += 1
                    order_stats.ngrams += lines
                pbar.update(1)

            queue = make_work_queue(cfg.num_load_threads)
            for path in order_dir.files:
                queue.execute(FileParseTask(
                    path=path,
                    order=order_dir.order,
                    callback=callback,
                    indexer=self.indexer,
                    verbose=cfg.num_load_threads == 0,
                    on_complete=file_done,
                ))
            queue.finish_work()

        order_stats.elapsed_s = time.perf_counter() - start
        logger.info(
            "Finished order %d: %d files, %d ngrams",
            order_dir.order + 1, order_stats.files, order_stats.ngrams,
        )
        return order_stats

    def _resolve_reserved_symbols(self) -> None:
        idx = self.indexer
        idx.set_start_symbol(idx.get_word(idx.get_or_add_index(START_SYMBOL)))
        idx.set_end_symbol(idx.get_word(idx.get_or_add_index(END_SYMBOL)))
        idx.set_unk_symbol(idx.get_word(idx.get_or_add_index(UNK_SYMBOL)))


def read_corpus(
        root_dir: Union[str, Path],
        callback: NgramOrderedCallback,
        *,
        indexer: Optional[WordIndexer] = None,
        config: Optional[ReaderConfig] = None,
) -> Tuple[WordIndexer, ReadStats]:
    """
    Read a corpus into ``callback`` with a fresh or supplied word index.

    Args:
        root_dir: Corpus root directory
        callback: Consumer of the n-grams
        indexer: Word index to populate (default: a new WordIndexer)
        config: Reader options (default: ReaderConfig()); ``log_dir`` routes
            root logging to a file via setup_logger before reading

    Returns:
        (indexer, stats)

    Examples:
        >>> cb = CollectingCallback()
        >>> indexer, stats = read_corpus("/data/web1t/data", cb,
        ...                              config=ReaderConfig(num_load_threads=8))
    """
    config = config or ReaderConfig()
    indexer = indexer if indexer is not None else WordIndexer()

    if config.log_dir is not None:
        log_path = setup_logger(config.log_dir, level=config.log_level)
        logger.info("Reading corpus %s (log: %s)", root_dir, log_path)

    if _setproctitle is not None:
        try:
            _setproctitle.setproctitle("ngl:main")
        except Exception:
            pass

    stats = Web1TReader(root_dir, indexer, config).parse(callback)

    if config.print_summary:
        print_read_summary(stats)
    return indexer, stats
