"""Line iteration over plain or gzip-compressed corpus files."""
from __future__ import annotations

import gzip
from pathlib import Path
from typing import IO, Iterator, Union

from ngram_load.errors import CorpusIOError

__all__ = ["open_text", "iter_lines"]

ENCODING = "utf-8"
GZIP_MAGIC = b"\x1f\x8b"


def open_text(path: Union[str, Path]) -> IO[str]:
    """
    Open a corpus file for text reading, decompressing gzip transparently.

    Compression is detected from the file's magic bytes rather than its
    suffix, so uncompressed files named ``*.gz`` are also accepted.
    """
    path = Path(path)
    with path.open("rb") as fh:
        magic = fh.read(2)
    if magic == GZIP_MAGIC:
        return gzip.open(path, "rt", encoding=ENCODING, newline="")
    return path.open("rt", encoding=ENCODING, newline="")


def iter_lines(path: Union[str, Path]) -> Iterator[str]:
    """
    Yield each line of ``path`` with the trailing newline removed.

    Raises:
        CorpusIOError: If the file is missing, unreadable, truncated or not
            valid UTF-8
    """
    try:
        with open_text(path) as fh:
            for line in fh:
                yield line.rstrip("\r\n")
    except (OSError, EOFError, UnicodeDecodeError) as exc:
        raise CorpusIOError(f"Failed reading {path}: {exc}") from exc
