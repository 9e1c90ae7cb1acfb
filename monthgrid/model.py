"""
Central data model definitions used across the project.

This module defines the canonical structure of Event, CellDescriptor and
MonthView objects so that:
- the grid and every emitter (HTML, terminal) share the same field names
- descriptors are produced fresh on each render and never persisted
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple


@dataclass
class Event:
    """
    Represents one stored date-ranged event.

    start/end are None when the input could not be parsed; such an event
    never matches any day.
    """

    start: Optional[date]
    end: Optional[date]
    summary: Optional[str] = None
    mask: bool = False
    classes: Optional[str] = None

    def class_tokens(self) -> List[str]:
        return self.classes.split() if self.classes else []


@dataclass(frozen=True)
class CellDescriptor:
    """
    One grid cell. Pad cells carry no day number, classes or summary.
    """

    day: Optional[int]
    is_pad: bool = False
    is_today: bool = False
    edge_classes: Tuple[str, ...] = ()
    extra_classes: Tuple[str, ...] = ()
    summary: str = ""

    @classmethod
    def pad(cls) -> "CellDescriptor":
        return cls(day=None, is_pad=True)


Row = List[CellDescriptor]


@dataclass
class MonthView:
    """
    Structured rendering of one month, handed to an emission collaborator.
    """

    first_day: date
    title: str
    weekday_labels: Tuple[str, ...]
    rows: List[Row] = field(default_factory=list)
