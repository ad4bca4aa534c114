# tests/io/test_vocab_loader.py
from pathlib import Path

import pytest

from ngram_load.errors import CorpusIOError, MalformedCountError
from ngram_load.io.vocab import load_vocabulary
from ngram_load.word_index import WordIndexer


def test_direct_mode_assigns_ids_in_file_order(tmp_path: Path, gz_writer):
    vocab = gz_writer(tmp_path / "vocab_cs.gz", ["the\t100", "cat\t50", "zoo\t200"])
    idx = WordIndexer()
    n = load_vocabulary(vocab, idx)
    assert n == 3
    assert [idx.get_index(w) for w in ("the", "cat", "zoo")] == [0, 1, 2]


def test_word_only_lines_and_blank_lines(tmp_path: Path, gz_writer):
    vocab = gz_writer(tmp_path / "vocab_cs.gz", ["alpha", "", "beta\t3"])
    idx = WordIndexer()
    assert load_vocabulary(vocab, idx) == 2
    assert list(idx.words()) == ["alpha", "beta"]


def test_frequency_resort_mode_leaves_ids_unchanged(tmp_path: Path, gz_writer):
    vocab = gz_writer(tmp_path / "vocab_cs.gz", ["the\t100", "cat\t50", "zoo\t200"])
    idx = WordIndexer()
    load_vocabulary(vocab, idx, sort_by_count=True)
    assert list(idx.words()) == ["the", "cat", "zoo"]


def test_frequency_resort_mode_requires_counts(tmp_path: Path, gz_writer):
    vocab = gz_writer(tmp_path / "vocab_cs.gz", ["the\t100", "cat"])
    with pytest.raises(MalformedCountError) as ei:
        load_vocabulary(vocab, WordIndexer(), sort_by_count=True)
    assert ei.value.line_number == 2


def test_malformed_count_is_fatal_with_location(tmp_path: Path, gz_writer):
    vocab = gz_writer(tmp_path / "vocab_cs.gz", ["the\t100", "cat\tlots", "zoo\t1"])
    idx = WordIndexer()
    with pytest.raises(MalformedCountError) as ei:
        load_vocabulary(vocab, idx)
    assert ei.value.line_number == 2
    assert str(vocab) in str(ei.value)
    # nothing after the bad line was registered
    assert "zoo" not in idx


def test_plain_text_vocab_is_accepted(tmp_path: Path):
    vocab = tmp_path / "vocab.txt"
    vocab.write_text("a\t1\nb\t2\n", encoding="utf-8")
    idx = WordIndexer()
    assert load_vocabulary(vocab, idx) == 2


def test_missing_file_is_io_error(tmp_path: Path):
    with pytest.raises(CorpusIOError):
        load_vocabulary(tmp_path / "nope.gz", WordIndexer())
