"""
Event files.

This module reads event definitions from a JSON file, by default:

    monthgrid/data/events.json

Accepted shapes:
- a list of event objects
- {"events": [ ... ]}

Each event object uses the keys understood by CalendarGrid.add_events:
start, end and optionally summary, mask, classes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _default_events_path() -> Path:
    """
    Events file used when the CLI gets no --events option.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "events.json"


def load_events(path: str | Path | None = None) -> list[dict[str, Any]]:
    """
    Load event dicts from a JSON file.

    Returns an empty list if the file does not exist or is invalid,
    so a broken events file never stops a calendar from rendering.
    """
    events_path = Path(path) if path is not None else _default_events_path()

    if not events_path.exists():
        logger.debug("No events file at %s", events_path)
        return []

    try:
        data = json.loads(events_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Could not read events from %s: %s", events_path, exc)
        return []

    if isinstance(data, dict):
        data = data.get("events", [])
    if not isinstance(data, list):
        logger.warning("Unexpected events layout in %s", events_path)
        return []

    # keep only objects, CalendarGrid decides about missing keys
    return [item for item in data if isinstance(item, dict)]
