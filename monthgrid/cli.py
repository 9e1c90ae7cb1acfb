"""
CLI (Command Line Interface).

This module provides quick terminal commands, e.g.:

    monthgrid html 2021-02-01 --events events.json --color blue
    monthgrid html --out calendar.html
    monthgrid preview 2021-02-01 --events events.json

Note:
- DATE is any day of the month to draw (YYYY-MM-DD), default: today
- events files are read with monthgrid.storage.load_events;
  without --events, monthgrid/data/events.json is used when it exists
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from monthgrid.exceptions import InvalidDateError
from monthgrid.grid import CalendarGrid
from monthgrid.preview import print_month
from monthgrid.storage import load_events


def _build_grid(args: argparse.Namespace) -> CalendarGrid:
    """
    Create a grid and load the --events file, or the default events file.
    """
    grid = CalendarGrid(strict=args.strict)
    events_path = (args.events or "").strip()
    grid.add_events(load_events(events_path or None))
    return grid


def _cmd_html(args: argparse.Namespace) -> int:
    """
    Print the month as an HTML table, or write it to --out.
    """
    try:
        html = _build_grid(args).draw(args.date, args.color)
    except InvalidDateError as exc:
        print(f"Error: {exc}")
        return 1

    out_path = (args.out or "").strip()
    if not out_path:
        print(html)
        return 0

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html + "\n", encoding="utf-8")
    print(f"Wrote calendar to: {out_path}")
    return 0


def _cmd_preview(args: argparse.Namespace) -> int:
    """
    Draw the month as a table in the terminal.
    """
    try:
        view = _build_grid(args).build_month(args.date)
    except InvalidDateError as exc:
        print(f"Error: {exc}")
        return 1

    print_month(view)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="monthgrid", description="Month calendar renderer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("date", nargs="?", default=None, help="Any day of the month (YYYY-MM-DD), default: today")
    common.add_argument("--events", "-e", type=str, default=None, help="JSON file with events (default: monthgrid/data/events.json)")
    common.add_argument("--strict", action="store_true", help="Fail on invalid dates instead of ignoring them")

    p_html = sub.add_parser("html", parents=[common], help="Render the month as an HTML table")
    p_html.add_argument("--color", "-c", type=str, default=None, help="Extra CSS class for the table")
    p_html.add_argument("--out", "-o", type=str, default=None, help="Output file path (default: stdout)")

    sub.add_parser("preview", parents=[common], help="Show the month in the terminal")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "html":
        raise SystemExit(_cmd_html(args))
    if args.command == "preview":
        raise SystemExit(_cmd_preview(args))

    raise SystemExit(2)
