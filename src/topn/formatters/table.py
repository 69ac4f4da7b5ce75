"""Rich table formatter."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from topn.formatters.base import BaseFormatter, register_formatter
from topn.models import Record
from topn.settings import Settings


@register_formatter
class TableFormatter(BaseFormatter):
    name = "table"
    description = "Ranked table for reading in a terminal"

    def write(self, records: list[Record], console: Console, settings: Settings) -> None:
        table = Table(title=f"Top {len(records)} records")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Score", justify="right", style="bold")
        table.add_column("ID", style="cyan")
        for rank, r in enumerate(records, 1):
            table.add_row(str(rank), str(r.score), Text(r.id))
        console.print(table)
