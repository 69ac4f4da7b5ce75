"""Top-N selection over line streams and files."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from topn.errors import NOT_FOUND, NOT_READABLE, AccessError, FormatError
from topn.models import Record, ScanStats
from topn.scan import TopNSelector, check_access, find_top_n_records, scan_lines


def _line(score: int, rid: str) -> str:
    return f'{score}: {{"id": "{rid}"}}'


def test_keeps_two_highest_in_descending_order() -> None:
    lines = ['5: {"id":"a"}', '9: {"id":"b"}', '3: {"id":"c"}']
    result = scan_lines(lines, 2)
    assert [r.model_dump() for r in result] == [
        {"score": 9, "id": "b"},
        {"score": 5, "id": "a"},
    ]


def test_fewer_records_than_n_returns_all() -> None:
    lines = [_line(1, "a"), "", _line(4, "b"), _line(2, "c")]
    result = scan_lines(lines, 10)
    assert [r.id for r in result] == ["b", "c", "a"]


def test_n_of_one_returns_single_best() -> None:
    lines = [_line(s, f"r{s}") for s in (3, 17, -4, 8)]
    assert [r.id for r in scan_lines(lines, 1)] == ["r17"]


def test_empty_input_returns_empty() -> None:
    assert scan_lines([], 3) == []
    assert scan_lines(["", "  "], 1) == []


def test_matches_full_sort_on_random_input() -> None:
    rng = random.Random(42)
    scores = [rng.randint(0, 1000) for _ in range(500)]
    lines = [_line(s, f"r{i}") for i, s in enumerate(scores)]

    result = scan_lines(lines, 25)

    assert len(result) == 25
    assert [r.score for r in result] == sorted(scores, reverse=True)[:25]
    kept = {r.id for r in result}
    worst_kept = min(r.score for r in result)
    for i, s in enumerate(scores):
        if f"r{i}" not in kept:
            assert s <= worst_kept


def test_equal_to_minimum_is_rejected_when_full() -> None:
    lines = [_line(5, "first"), _line(5, "second"), _line(5, "third")]
    stats = ScanStats()
    result = scan_lines(lines, 1, stats)
    assert [r.id for r in result] == ["first"]
    assert stats.admitted == 1
    assert stats.rejected == 2
    assert stats.evicted == 0


def test_ties_are_ordered_by_arrival() -> None:
    lines = [_line(1, "a"), _line(7, "b"), _line(7, "c"), _line(9, "d"), _line(7, "e")]
    result = scan_lines(lines, 4)
    assert [r.id for r in result] == ["d", "b", "c", "e"]


def test_blank_lines_do_not_change_result_but_count_as_lines() -> None:
    plain = [_line(3, "a"), _line(6, "b")]
    spaced = [_line(3, "a"), "", "   ", _line(6, "b")]
    stats = ScanStats()
    assert scan_lines(spaced, 2, stats) == scan_lines(plain, 2)
    assert stats.lines == 4
    assert stats.blank_lines == 2
    assert stats.records == 2


def test_first_bad_line_aborts_with_its_number() -> None:
    lines = [_line(1, "a"), "", 'abc: {"id":"x"}', "not even close"]
    with pytest.raises(FormatError) as excinfo:
        scan_lines(lines, 2)
    assert excinfo.value.line_number == 3
    assert "Invalid score format" in str(excinfo.value)


def test_missing_id_aborts() -> None:
    with pytest.raises(FormatError, match="Missing or invalid 'id' field at line 2"):
        scan_lines([_line(1, "a"), '7: {"name":"x"}'], 5)


def test_selector_rejects_non_positive_n() -> None:
    with pytest.raises(ValueError):
        TopNSelector(0)


def test_selector_offer_reports_admission() -> None:
    selector = TopNSelector(2)
    assert selector.offer(Record(score=1, id="a", line=1))
    assert selector.offer(Record(score=2, id="b", line=2))
    assert not selector.offer(Record(score=1, id="c", line=3))
    assert selector.offer(Record(score=3, id="d", line=4))
    assert len(selector) == 2
    assert [r.id for r in selector.results()] == ["d", "b"]
    assert selector.stats.evicted == 1


def test_find_top_n_records_reads_file(write_lines) -> None:
    path = write_lines([_line(5, "a"), "", _line(9, "b"), _line(3, "c")])
    assert [r.id for r in find_top_n_records(path, 2)] == ["b", "a"]


def test_find_top_n_records_handles_crlf(tmp_path: Path) -> None:
    path = tmp_path / "crlf.txt"
    path.write_bytes(b'2: {"id":"a"}\r\n\r\n8: {"id":"b"}\r\n')
    assert [r.id for r in find_top_n_records(path, 5)] == ["b", "a"]


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(AccessError) as excinfo:
        find_top_n_records(tmp_path / "nope.txt", 3)
    assert excinfo.value.kind == NOT_FOUND
    assert str(excinfo.value) == "Cannot find input file"


def test_unreadable_file_raises_not_readable(write_lines, monkeypatch) -> None:
    path = write_lines([_line(1, "a")])
    monkeypatch.setattr("topn.scan.os.access", lambda p, mode: False)
    with pytest.raises(AccessError) as excinfo:
        check_access(path)
    assert excinfo.value.kind == NOT_READABLE
    assert str(excinfo.value) == "Cannot read input file"


def test_file_is_closed_after_format_error(write_lines, monkeypatch) -> None:
    path = write_lines([_line(1, "a"), "garbage", _line(2, "b")])
    opened = []

    def tracking_open(*args, **kwargs):
        f = open(*args, **kwargs)
        opened.append(f)
        return f

    monkeypatch.setattr("topn.scan.open", tracking_open, raising=False)
    with pytest.raises(FormatError):
        find_top_n_records(path, 2)
    assert len(opened) == 1
    assert opened[0].closed


def test_file_is_closed_after_success(write_lines, monkeypatch) -> None:
    path = write_lines([_line(1, "a")])
    opened = []

    def tracking_open(*args, **kwargs):
        f = open(*args, **kwargs)
        opened.append(f)
        return f

    monkeypatch.setattr("topn.scan.open", tracking_open, raising=False)
    assert [r.id for r in find_top_n_records(path, 2)] == ["a"]
    assert opened[0].closed
