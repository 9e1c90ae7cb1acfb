"""
Month grid construction.

CalendarGrid stores date-ranged events and maps them onto the day cells of
one month:

- find_events(day) returns every event whose inclusive [start, end] holds day
- classify_day(day) folds those events into edge classes, extra classes and
  summary text
- build_month(anchor) sweeps the month day by day into Sunday-first rows
- draw(anchor, color) hands the rows to the HTML emitter

Edge policy (per matching event, in insertion order):
    day == start          -> mask-start (if mask) + extra classes + summary
    start < day < end     -> mask (if mask)
    day == end            -> mask-end (if mask)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Optional

from monthgrid import dates
from monthgrid.config import (
    DAYS_PER_WEEK,
    LAST_WEEKDAY,
    MASK_END_CLASS,
    MASK_INTERIOR_CLASS,
    MASK_START_CLASS,
    WEEKDAY_LABELS,
)
from monthgrid.markup import render_html
from monthgrid.model import CellDescriptor, Event, MonthView, Row

logger = logging.getLogger(__name__)


@dataclass
class DayMarks:
    """
    Accumulator for one day: ordered class sets plus summaries.
    """

    edge_classes: list[str] = field(default_factory=list)
    extra_classes: list[str] = field(default_factory=list)
    summaries: list[str] = field(default_factory=list)

    def add_edge(self, name: str) -> None:
        if name not in self.edge_classes:
            self.edge_classes.append(name)

    def add_extra(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            if token not in self.extra_classes:
                self.extra_classes.append(token)

    @property
    def summary(self) -> str:
        return "".join(self.summaries)


class CalendarGrid:
    """
    Owns an ordered event list and renders one month at a time.

    strict=False (default): malformed dates become inert events and a
    malformed anchor falls back to today. strict=True raises InvalidDateError.
    """

    def __init__(self, strict: bool = False, clock: Optional[Callable[[], date]] = None) -> None:
        self.strict = strict
        self._clock = clock or dates.today
        self._events: list[Event] = []

    @property
    def events(self) -> tuple[Event, ...]:
        return tuple(self._events)

    # ------------------------------------------------------------------
    # Event store
    # ------------------------------------------------------------------

    def _coerce_date(self, value: object) -> Optional[date]:
        if self.strict:
            return dates.parse_date_strict(value)
        parsed = dates.parse_date(value)
        if parsed is None:
            logger.warning("Ignoring invalid event date %r", value)
        return parsed

    def add_event(
        self,
        start: object,
        end: object,
        summary: Optional[str] = None,
        mask: bool = False,
        classes: Optional[Iterable[str]] = (),
    ) -> CalendarGrid:
        """
        Append one event. Returns self so calls can be chained.
        """
        event_start = self._coerce_date(start)
        event_end = self._coerce_date(end)

        if classes is None:
            classes = []
        elif isinstance(classes, str):
            classes = [classes]
        elif not isinstance(classes, Iterable):
            logger.debug("add_event: ignoring non-iterable classes %r", classes)
            classes = []
        tokens = [str(c) for c in classes]

        self._events.append(
            Event(
                start=event_start,
                end=event_end,
                summary=summary,
                mask=bool(mask),
                classes=" ".join(tokens) if tokens else None,
            )
        )
        return self

    def add_events(self, events: Any) -> CalendarGrid:
        """
        Add event dicts with keys start, end and optional summary, mask, classes.
        Entries without start or end are skipped.
        """
        if not isinstance(events, Iterable) or isinstance(events, (str, bytes, Mapping)):
            logger.debug("add_events: ignoring non-sequence input %r", type(events).__name__)
            return self

        for item in events:
            if not isinstance(item, Mapping) or "start" not in item or "end" not in item:
                logger.debug("add_events: skipping entry without start/end: %r", item)
                continue
            self.add_event(
                item["start"],
                item["end"],
                summary=item.get("summary"),
                mask=bool(item.get("mask", False)),
                classes=item.get("classes"),
            )
        return self

    def clear_events(self) -> CalendarGrid:
        self._events = []
        return self

    def find_events(self, day: date) -> list[Event]:
        """
        Events whose inclusive [start, end] contains day, in insertion order.
        """
        day = dates.as_date(day)
        found: list[Event] = []
        for event in self._events:
            if event.start is None or event.end is None:
                continue
            if event.start <= day <= event.end:
                found.append(event)
        return found

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def classify_day(self, day: date) -> DayMarks:
        day = dates.as_date(day)
        marks = DayMarks()
        for event in self.find_events(day):
            if day == event.start:
                if event.mask:
                    marks.add_edge(MASK_START_CLASS)
                marks.add_extra(event.class_tokens())
                if event.summary:
                    marks.summaries.append(str(event.summary))
            elif event.start < day < event.end:
                if event.mask:
                    marks.add_edge(MASK_INTERIOR_CLASS)
            elif day == event.end:
                if event.mask:
                    marks.add_edge(MASK_END_CLASS)
        return marks

    # ------------------------------------------------------------------
    # Month sweep
    # ------------------------------------------------------------------

    def _resolve_anchor(self, anchor: object) -> date:
        if anchor is None:
            return dates.as_date(self._clock())
        if self.strict:
            return dates.parse_date_strict(anchor)
        parsed = dates.parse_date(anchor)
        if parsed is None:
            logger.warning("Invalid anchor date %r, drawing the current month", anchor)
            return dates.as_date(self._clock())
        return parsed

    def build_month(self, anchor: object = None) -> MonthView:
        """
        Build the Sunday-first rows of the month containing anchor.
        """
        first = dates.first_of_month(self._resolve_anchor(anchor))
        total_days = dates.days_in_month(first)
        today = dates.as_date(self._clock())

        rows: list[Row] = []
        row: Row = [CellDescriptor.pad() for _ in range(dates.weekday_index(first))]

        running_day = first
        for day_number in range(1, total_days + 1):
            marks = self.classify_day(running_day)
            row.append(
                CellDescriptor(
                    day=day_number,
                    is_today=running_day == today,
                    edge_classes=tuple(marks.edge_classes),
                    extra_classes=tuple(marks.extra_classes),
                    summary=marks.summary,
                )
            )
            # Saturday closes the row
            if dates.weekday_index(running_day) == LAST_WEEKDAY:
                rows.append(row)
                row = []
            running_day = dates.add_days(running_day, 1)

        # running_day is now the first day of the next month
        trailing = DAYS_PER_WEEK - dates.weekday_index(running_day)
        if 0 < trailing < DAYS_PER_WEEK:
            row.extend(CellDescriptor.pad() for _ in range(trailing))
        if row:
            rows.append(row)

        logger.debug("Built %s: %d rows, %d events stored", dates.month_title(first), len(rows), len(self._events))
        return MonthView(
            first_day=first,
            title=dates.month_title(first),
            weekday_labels=WEEKDAY_LABELS,
            rows=rows,
        )

    def draw(self, anchor: object = None, color: Optional[str] = None) -> str:
        """
        Render the month containing anchor as an HTML table string.
        """
        return render_html(self.build_month(anchor), color)
