"""Pydantic data models for topn."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """One parsed input line: an integer score and a string id."""

    model_config = ConfigDict(frozen=True)

    score: int
    id: str
    line: int = Field(default=0, exclude=True)  # 1-based source line, for tie-breaking


class ScanStats(BaseModel):
    """Counters collected over one scan."""

    lines: int = 0
    blank_lines: int = 0
    records: int = 0
    admitted: int = 0
    evicted: int = 0

    @property
    def rejected(self) -> int:
        return self.records - self.admitted
