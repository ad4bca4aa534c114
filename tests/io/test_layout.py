# tests/io/test_layout.py
from pathlib import Path

import pytest

from ngram_load.config import ReaderConfig
from ngram_load.errors import CorpusIOError, MissingVocabularyFileError
from ngram_load.io.layout import discover_layout


def test_discovers_orders_and_files(make_corpus):
    root = make_corpus()
    # noise that must be ignored
    (root / "README").write_text("x")
    (root / "docs").mkdir()
    (root / "2gms" / "2gm.idx").write_text("index")

    layout = discover_layout(root, ReaderConfig())
    assert [o.path.name for o in layout.orders] == ["1gms", "2gms", "3gms"]
    assert [o.order for o in layout.orders] == [0, 1, 2]
    assert layout.max_order == 2
    assert layout.vocab_path.name == "vocab_cs.gz"
    assert [p.name for p in layout.orders[0].files] == ["vocab_cs.gz"]
    assert [p.name for p in layout.orders[1].files] == [
        "2gm-0000.gz", "2gm-0001.gz", "2gm-0002.gz",
    ]


def test_order_zero_lists_only_the_vocab_file(make_corpus):
    root = make_corpus({
        "1gms": {"vocab_cs.gz": ["a\t1"], "vocab.gz": ["a\t1"], "other.gz": ["b\t1"]},
    })
    layout = discover_layout(root, ReaderConfig())
    assert [p.name for p in layout.orders[0].files] == ["vocab_cs.gz"]


def test_order_dirs_sort_lexicographically(make_corpus):
    root = make_corpus({
        "10gms": {"vocab_cs.gz": ["a\t1"]},
        "1gms": {"x.gz": ["a a\t1"]},
        "2gms": {"y.gz": ["a a a\t1"]},
    })
    layout = discover_layout(root, ReaderConfig())
    # "10gms" sorts first by name, so it is order 0 and must hold the vocab
    assert [o.path.name for o in layout.orders] == ["10gms", "1gms", "2gms"]
    assert layout.vocab_path.parent.name == "10gms"


def test_vocab_outside_first_sorted_dir_is_missing(make_corpus):
    root = make_corpus({
        "1gms": {"vocab_cs.gz": ["a\t1"]},
        "2gms": {"x.gz": ["a a\t1"]},
        "10gms": {"y.gz": ["a\t1"]},
    })
    with pytest.raises(MissingVocabularyFileError):
        discover_layout(root, ReaderConfig())


def test_missing_vocab_file(make_corpus):
    root = make_corpus({
        "1gms": {"vocab.gz": ["a\t1"]},
        "2gms": {"x.gz": ["a a\t1"]},
    })
    with pytest.raises(MissingVocabularyFileError):
        discover_layout(root, ReaderConfig())


def test_no_order_directories(tmp_path: Path):
    with pytest.raises(MissingVocabularyFileError):
        discover_layout(tmp_path, ReaderConfig())


def test_missing_root(tmp_path: Path):
    with pytest.raises(CorpusIOError):
        discover_layout(tmp_path / "absent", ReaderConfig())


def test_custom_naming_conventions(make_corpus):
    root = make_corpus({
        "order1": {"vocab.txt.gz": ["a\t1"]},
        "order2": {"part.bz": ["a a\t1"], "part.gz": ["a a\t1"]},
    })
    cfg = ReaderConfig(vocab_filename="vocab.txt.gz", order_dir_suffix="", count_file_suffix=".bz")
    layout = discover_layout(root, cfg)
    assert [p.name for p in layout.orders[1].files] == ["part.bz"]
