"""Single-pass scan of a scored line file into its top-N records."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from topn.errors import NOT_FOUND, NOT_READABLE, AccessError
from topn.heap import MinHeap
from topn.models import Record, ScanStats
from topn.parse import parse_line


class TopNSelector:
    """Keep the N highest-scoring records offered so far."""

    def __init__(self, n: int, stats: ScanStats | None = None):
        if n < 1:
            raise ValueError(f"n must be a positive integer, got {n}")
        self.n = n
        self.stats = stats if stats is not None else ScanStats()
        self._heap: MinHeap[Record] = MinHeap()

    def offer(self, record: Record) -> bool:
        """Admit *record* if there is room or it beats the current minimum.

        A full selector only takes records scoring strictly above its
        minimum; ties with the minimum are rejected.
        """
        if self._heap.size() < self.n:
            self._heap.insert(record.score, record)
        elif record.score > self._heap.peek().score:
            self._heap.extract_min()
            self._heap.insert(record.score, record)
            self.stats.evicted += 1
        else:
            return False
        self.stats.admitted += 1
        return True

    def results(self) -> list[Record]:
        """Kept records, highest score first; equal scores in arrival order."""
        kept = [entry.item for entry in self._heap]
        return sorted(kept, key=lambda r: (-r.score, r.line))

    def __len__(self) -> int:
        return len(self._heap)


def scan_lines(lines: Iterable[str], n: int, stats: ScanStats | None = None) -> list[Record]:
    """Select the top *n* records from *lines*.

    Line numbers are 1-based and include blank lines. The first malformed
    line raises FormatError and nothing is returned.
    """
    selector = TopNSelector(n, stats)
    stats = selector.stats
    for line_number, line in enumerate(lines, 1):
        stats.lines = line_number
        record = parse_line(line.rstrip("\r\n"), line_number)
        if record is None:
            stats.blank_lines += 1
            continue
        stats.records += 1
        selector.offer(record)
    return selector.results()


def check_access(path: Path) -> None:
    """Raise AccessError unless *path* exists and is readable."""
    if not path.exists():
        raise AccessError(path, NOT_FOUND)
    if not os.access(path, os.R_OK):
        raise AccessError(path, NOT_READABLE)


def find_top_n_records(path: str | Path, n: int, stats: ScanStats | None = None) -> list[Record]:
    """Check *path*, then stream it line by line and return its top *n* records."""
    path = Path(path)
    check_access(path)
    with open(path, encoding="utf-8") as f:
        return scan_lines(f, n, stats)
