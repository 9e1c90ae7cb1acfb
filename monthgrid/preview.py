"""
Terminal preview of a month grid using rich.

Same MonthView as the HTML emitter, drawn as a table:
- each day shows its number, edge markers ([ start, = interior, ] end)
  and the summary text
- today is highlighted, pad cells stay blank
"""

from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from monthgrid.config import PREVIEW_MARKERS
from monthgrid.model import CellDescriptor, MonthView


def _cell_text(cell: CellDescriptor) -> Text:
    if cell.is_pad:
        return Text("")

    text = Text(str(cell.day), style="bold reverse" if cell.is_today else "bold")
    markers = "".join(PREVIEW_MARKERS.get(name, "") for name in cell.edge_classes)
    if markers:
        text.append(f" {markers}", style="cyan")
    if cell.summary:
        text.append("\n")
        text.append(cell.summary, style="green")
    return text


def build_table(view: MonthView) -> Table:
    table = Table(title=view.title, box=box.SIMPLE_HEAVY, show_lines=True)
    for label in view.weekday_labels:
        table.add_column(label, justify="center", vertical="top")
    for row in view.rows:
        table.add_row(*[_cell_text(cell) for cell in row])
    return table


def print_month(view: MonthView, console: Optional[Console] = None) -> None:
    (console or Console()).print(build_table(view))
