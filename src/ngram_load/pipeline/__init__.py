"""
Execution side of the reader.

Key components:
    - work_queue: Inline and pooled task execution with a completion barrier
    - worker: Per-file parsing task
    - logger: Log file configuration
    - reporter: End-of-run summary display
"""

from ngram_load.pipeline.work_queue import (
    InlineWorkQueue,
    PooledWorkQueue,
    WorkQueue,
    make_work_queue,
)
from ngram_load.pipeline.worker import FileParseTask

__all__ = [
    "WorkQueue",
    "InlineWorkQueue",
    "PooledWorkQueue",
    "make_work_queue",
    "FileParseTask",
]
