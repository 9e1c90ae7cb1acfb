"""
HTML emission.

Turns a MonthView into a <table> string. Tags are built with BeautifulSoup
and serialized with the "html" formatter, so summary text is entity-escaped
both in the title attribute and in the visible cell content.
"""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag

from monthgrid.config import (
    DAY_CLASS,
    DAYS_PER_WEEK,
    HEADER_ROW_CLASS,
    PAD_CLASS,
    TABLE_CLASS,
    TITLE_ROW_CLASS,
    TODAY_CLASS,
)
from monthgrid.model import CellDescriptor, MonthView


def _cell_classes(cell: CellDescriptor) -> str:
    """
    Class attribute of a day cell: day, edge classes, extra classes, today.
    """
    parts = [DAY_CLASS, *cell.edge_classes, *cell.extra_classes]
    if cell.is_today:
        parts.append(TODAY_CLASS)
    return " ".join(parts)


def _new_tag(soup: BeautifulSoup, name: str, text: Optional[str] = None, **attrs: str) -> Tag:
    tag = soup.new_tag(name, attrs=attrs)
    if text is not None:
        tag.string = text
    return tag


def _build_cell(soup: BeautifulSoup, cell: CellDescriptor) -> Tag:
    if cell.is_pad:
        return _new_tag(soup, "td", " ", **{"class": PAD_CLASS})

    td = _new_tag(soup, "td", **{"class": _cell_classes(cell), "title": cell.summary})
    td.append(_new_tag(soup, "div", str(cell.day)))
    td.append(_new_tag(soup, "div", cell.summary))
    return td


def render_html(view: MonthView, color: Optional[str] = None) -> str:
    """
    Render the month as one <table> element. color is appended to the
    table's class list when given.
    """
    soup = BeautifulSoup("", "html.parser")

    table_class = f"{TABLE_CLASS} {color.strip()}" if color and color.strip() else TABLE_CLASS
    table = _new_tag(soup, "table", **{"class": table_class})
    soup.append(table)

    thead = _new_tag(soup, "thead")
    table.append(thead)

    title_row = _new_tag(soup, "tr", **{"class": TITLE_ROW_CLASS})
    title_row.append(_new_tag(soup, "th", view.title, colspan=str(DAYS_PER_WEEK)))
    thead.append(title_row)

    header_row = _new_tag(soup, "tr", **{"class": HEADER_ROW_CLASS})
    for label in view.weekday_labels:
        header_row.append(_new_tag(soup, "th", label))
    thead.append(header_row)

    tbody = _new_tag(soup, "tbody")
    table.append(tbody)
    for row in view.rows:
        tr = _new_tag(soup, "tr")
        for cell in row:
            tr.append(_build_cell(soup, cell))
        tbody.append(tr)

    return soup.decode(formatter="html")
