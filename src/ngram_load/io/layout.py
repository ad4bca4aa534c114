"""Discovery of order directories and their files in a Web1T-style corpus."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ngram_load.config import ReaderConfig
from ngram_load.errors import CorpusIOError, MissingVocabularyFileError

logger = logging.getLogger(__name__)

__all__ = ["OrderDirectory", "CorpusLayout", "discover_layout"]


@dataclass
class OrderDirectory:
    """Files holding the n-grams of a single order."""

    order: int
    """Zero-based order: 0 for unigrams, k for (k+1)-grams"""

    path: Path
    """Directory containing the files"""

    files: List[Path] = field(default_factory=list)
    """Files to parse for this order, sorted by name"""


@dataclass
class CorpusLayout:
    """Discovered structure of a corpus root directory."""

    root: Path
    orders: List[OrderDirectory]

    @property
    def vocab_path(self) -> Path:
        """The single vocabulary file of order 0."""
        return self.orders[0].files[0]

    @property
    def max_order(self) -> int:
        return len(self.orders) - 1


def _list_order_dirs(root: Path, suffix: str) -> List[Path]:
    # Lexicographic by name: "10gms" sorts before "2gms"
    return sorted(
        (p for p in root.iterdir() if p.is_dir() and p.name.endswith(suffix)),
        key=lambda p: p.name,
    )


def _list_order_files(order_dir: Path, order: int, config: ReaderConfig) -> List[Path]:
    if order == 0:
        matches = [p for p in order_dir.iterdir() if p.name == config.vocab_filename]
    else:
        matches = [
            p for p in order_dir.iterdir()
            if p.is_file() and p.name.endswith(config.count_file_suffix)
        ]
    return sorted(matches, key=lambda p: p.name)


def discover_layout(root_dir: Union[str, Path], config: ReaderConfig) -> CorpusLayout:
    """
    Discover the order directories of a corpus.

    Order directories are the subdirectories of ``root_dir`` whose names end
    with ``config.order_dir_suffix``, sorted by name; the first is order 0.
    Order 0 must contain exactly one ``config.vocab_filename``, which doubles
    as its unigram count file. Every other order lists all files ending with
    ``config.count_file_suffix``.

    Args:
        root_dir: Corpus root
        config: Reader configuration (naming conventions)

    Returns:
        CorpusLayout with one OrderDirectory per order

    Raises:
        CorpusIOError: If ``root_dir`` is missing or not a directory
        MissingVocabularyFileError: If there are no order directories or
            order 0 does not hold exactly one vocabulary file

    Example:
        >>> layout = discover_layout("/data/web1t/data", ReaderConfig())
        >>> [d.path.name for d in layout.orders]
        ['1gms', '2gms', '3gms', '4gms', '5gms']
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise CorpusIOError(f"Corpus root is not a directory: {root}")

    try:
        order_dirs = _list_order_dirs(root, config.order_dir_suffix)
        orders = [
            OrderDirectory(order, d, _list_order_files(d, order, config))
            for order, d in enumerate(order_dirs)
        ]
    except OSError as exc:
        raise CorpusIOError(f"Failed listing corpus directory {root}: {exc}") from exc

    if not orders:
        raise MissingVocabularyFileError(
            f"No order directories matching '*{config.order_dir_suffix}' in {root}; "
            f"could not find expected vocab file {config.vocab_filename}"
        )
    if len(orders[0].files) != 1:
        raise MissingVocabularyFileError(
            f"Could not find expected vocab file {config.vocab_filename} in {orders[0].path}"
        )

    for od in orders:
        logger.info("Order %d: %s (%d files)", od.order + 1, od.path.name, len(od.files))
    return CorpusLayout(root, orders)
