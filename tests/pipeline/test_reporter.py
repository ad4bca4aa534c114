# tests/pipeline/test_reporter.py
from pathlib import Path

from ngram_load.pipeline.reporter import print_read_summary
from ngram_load.types import OrderStats, ReadStats
from ngram_load.utilities.display import format_banner, format_duration, truncate_path_to_fit


def test_summary_lists_each_order(capsys):
    stats = ReadStats(
        root=Path("/data/web1t"),
        num_load_threads=4,
        vocab_entries=3,
        vocab_size=8,
        orders=[
            OrderStats(0, Path("/data/web1t/1gms"), files=1, ngrams=3, elapsed_s=0.5),
            OrderStats(1, Path("/data/web1t/2gms"), files=2, ngrams=12345, elapsed_s=75),
        ],
        elapsed_s=80.0,
    )
    print_read_summary(stats)
    out = capsys.readouterr().out

    assert "N-GRAM CORPUS READ" in out
    assert "4 threads" in out
    assert "2gms" in out
    assert "12,345" in out
    assert "Total n-grams:        12,348" in out
    assert "Total files:          3" in out


def test_synchronous_mode_label(capsys):
    print_read_summary(ReadStats(root=Path("/c"), num_load_threads=0))
    assert "synchronous" in capsys.readouterr().out


def test_display_helpers():
    assert format_banner("T", width=3, style="-") == "T\n---"
    assert format_duration(3.0) == "3.0s"
    assert format_duration(3725) == "1:02:05"
    assert truncate_path_to_fit("/a/b", "P: ", 50) == "/a/b"
    assert truncate_path_to_fit("/very/long/path/to/file.db", "Very long prefix: ", 30) == "...o/file.db"
