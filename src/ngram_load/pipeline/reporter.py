"""Summary display for completed corpus reads."""
from __future__ import annotations

from ngram_load.types import ReadStats
from ngram_load.utilities.display import format_banner, format_duration, truncate_path_to_fit

__all__ = ["print_read_summary"]


def print_read_summary(stats: ReadStats) -> None:
    """
    Print per-order file and n-gram counts for a finished read.

    Args:
        stats: Statistics returned by ``Web1TReader.parse``
    """
    mode = "synchronous" if stats.num_load_threads == 0 else f"{stats.num_load_threads} threads"

    print()
    print(format_banner("N-GRAM CORPUS READ", style="━"))
    print(f"Corpus root:          {truncate_path_to_fit(stats.root, 'Corpus root:          ')}")
    print(f"Load mode:            {mode}")
    print(f"Vocabulary entries:   {stats.vocab_entries:,}")
    print(f"Word index size:      {stats.vocab_size:,}")
    print()
    print(format_banner("Orders"))
    print(f"{'Order':<8}{'Directory':<20}{'Files':>10}{'N-grams':>18}{'Elapsed':>14}")
    for o in stats.orders:
        print(
            f"{o.order + 1:<8}{o.directory.name:<20}{o.files:>10,}"
            f"{o.ngrams:>18,}{format_duration(o.elapsed_s):>14}"
        )
    print()
    print(f"Total files:          {stats.total_files:,}")
    print(f"Total n-grams:        {stats.total_ngrams:,}")
    print(f"Total runtime:        {format_duration(stats.elapsed_s)}")
