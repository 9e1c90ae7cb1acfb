"""
Unit tests for loading event files.

Storage contract:
- Missing/invalid file -> empty list
- Accepts a top-level list or {"events": [...]}
- Non-object entries are dropped
"""

import json
import tempfile
import unittest
from pathlib import Path

from monthgrid.storage import load_events


class TestStorage(unittest.TestCase):
    def test_load_missing_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "missing.json"
            self.assertEqual(load_events(p), [])

    def test_load_invalid_json_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "broken.json"
            p.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_events(p), [])

    def test_load_list_and_wrapped_layouts(self) -> None:
        events = [{"start": "2021-02-10", "end": "2021-02-12", "summary": "Trip"}]
        with tempfile.TemporaryDirectory() as d:
            plain = Path(d) / "plain.json"
            plain.write_text(json.dumps(events), encoding="utf-8")
            wrapped = Path(d) / "wrapped.json"
            wrapped.write_text(json.dumps({"events": events}), encoding="utf-8")

            self.assertEqual(load_events(plain), events)
            self.assertEqual(load_events(wrapped), events)

    def test_non_object_entries_are_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "mixed.json"
            p.write_text(json.dumps(["2021-02-10", {"start": "2021-02-10"}, 3]), encoding="utf-8")
            self.assertEqual(load_events(p), [{"start": "2021-02-10"}])

    def test_unexpected_layout_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "scalar.json"
            p.write_text(json.dumps({"events": "nope"}), encoding="utf-8")
            self.assertEqual(load_events(p), [])


if __name__ == "__main__":
    unittest.main()
