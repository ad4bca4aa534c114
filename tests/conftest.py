# tests/conftest.py
from __future__ import annotations

import gzip
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import pytest

from ngram_load.callback import NgramOrderedCallback


def write_gz(path: Path, lines: Iterable[str]) -> Path:
    """Write lines to a gzip text file, one per line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with gzip.open(path, "wt", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    return path


class RecordingCallback(NgramOrderedCallback):
    """Thread-safe callback that logs every event in arrival order."""

    def __init__(self, indexer=None):
        self.indexer = indexer
        self.lock = threading.Lock()
        self.events: List[Tuple] = []
        self.calls: List[Tuple[Tuple[int, ...], int, str]] = []
        self.start_symbol_at_cleanup = "unset"

    def call(self, ngram, start, end, count, words):
        rec = (tuple(ngram[start:end]), count, words)
        with self.lock:
            self.calls.append(rec)
            self.events.append(("call", end - start))

    def handle_ngram_order_finished(self, next_order):
        with self.lock:
            self.events.append(("order_finished", next_order))

    def cleanup(self):
        with self.lock:
            self.events.append(("cleanup",))
            if self.indexer is not None:
                self.start_symbol_at_cleanup = self.indexer.start_symbol


SMALL_CORPUS: Dict[str, Dict[str, List[str]]] = {
    "1gms": {
        "vocab_cs.gz": ["the\t100", "cat\t50", "sat\t30", "mat\t20"],
    },
    "2gms": {
        "2gm-0000.gz": ["the cat\t10", "cat sat\t5", "sat on\t4"],
        "2gm-0001.gz": ["the mat\t3", "on the\t2"],
        "2gm-0002.gz": ["mat the\t1"],
    },
    "3gms": {
        "3gm-0000.gz": ["the cat sat\t4", "cat sat on\t3"],
        "3gm-0001.gz": ["sat on the\t2", "on the mat\t2"],
    },
}


@pytest.fixture
def make_corpus(tmp_path: Path):
    """Return a factory that lays out {order_dir: {filename: lines}} under a root."""

    def _make(spec: Dict[str, Dict[str, List[str]]] = SMALL_CORPUS, root_name: str = "data") -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for dirname, files in spec.items():
            (root / dirname).mkdir(parents=True, exist_ok=True)
            for fname, lines in files.items():
                write_gz(root / dirname / fname, lines)
        return root

    return _make


@pytest.fixture
def gz_writer():
    return write_gz


@pytest.fixture
def recorder_cls():
    return RecordingCallback
