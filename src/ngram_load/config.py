# ngram_load/config.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


# Reader options
@dataclass(frozen=True)
class ReaderConfig:
    """Options for reading a Web1T-style n-gram corpus.

    Parallelism:
        num_load_threads = 0 runs every file on the calling thread, in order,
        with per-line trace logging. Any positive value parses that many
        files concurrently and logs once per finished file.
    """
    # Parallelism
    num_load_threads: int = 0

    # Corpus layout
    vocab_filename: str = "vocab_cs.gz"  # Only file read from the order-0 directory
    order_dir_suffix: str = "gms"  # e.g. 1gms, 2gms, ...
    count_file_suffix: str = ".gz"

    # Vocabulary
    sort_vocab_by_count: bool = False  # Re-registers by frequency; ids are unaffected

    # Progress reporting
    show_progress: bool = True
    print_summary: bool = False

    # Logging (read_corpus only)
    log_dir: Optional[Union[str, Path]] = None  # Write a timestamped log file here when set
    log_level: Union[int, str] = "INFO"

    def __post_init__(self) -> None:
        if self.num_load_threads < 0:
            raise ValueError(
                f"num_load_threads must be non-negative, got {self.num_load_threads}"
            )
