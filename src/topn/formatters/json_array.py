"""JSON formatters — a pretty-printed array, or one object per line."""

from __future__ import annotations

import json

from rich.console import Console

from topn.formatters.base import BaseFormatter, register_formatter
from topn.models import Record
from topn.settings import Settings


def dump_records(records: list[Record], indent: int | None = 2) -> str:
    return json.dumps([r.model_dump() for r in records], indent=indent)


@register_formatter
class JsonFormatter(BaseFormatter):
    name = "json"
    description = "Pretty-printed JSON array of {score, id} objects"

    def write(self, records: list[Record], console: Console, settings: Settings) -> None:
        console.out(dump_records(records, settings.indent), highlight=False)


@register_formatter
class JsonLinesFormatter(BaseFormatter):
    name = "jsonl"
    description = "One compact {score, id} object per line"

    def write(self, records: list[Record], console: Console, settings: Settings) -> None:
        for r in records:
            console.out(json.dumps(r.model_dump()), highlight=False)
