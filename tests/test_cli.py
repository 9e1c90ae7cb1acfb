"""
Tests for CLI entry points.

These tests focus on:
- html output on stdout and into a file
- events loaded from a temporary JSON file
- the default events file when --events is omitted (path overridden in tests)
- strict mode exit codes
"""

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from monthgrid.cli import main


def _run(argv: list[str]) -> tuple[object, str]:
    # main() always exits via SystemExit, return its code plus captured stdout
    buf = io.StringIO()
    code: object = None
    with contextlib.redirect_stdout(buf):
        try:
            main(argv)
        except SystemExit as exc:
            code = exc.code
    return code, buf.getvalue()


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        # never read the real monthgrid/data/events.json from tests
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.default_events = Path(self._tmp.name) / "events.json"
        patcher = mock.patch("monthgrid.storage._default_events_path", return_value=self.default_events)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_cli_requires_command(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_cli_html_with_events_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "events.json"
            p.write_text(
                json.dumps([{"start": "2021-02-10", "end": "2021-02-12", "summary": "Trip", "mask": True}]),
                encoding="utf-8",
            )
            code, out = _run(["html", "2021-02-01", "--events", str(p), "--color", "blue"])

        self.assertEqual(code, 0)
        self.assertIn('<table class="calendar blue">', out)
        self.assertIn("February 2021", out)
        self.assertIn('title="Trip"', out)

    def test_cli_html_writes_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            out_path = Path(d) / "nested" / "cal.html"
            code, out = _run(["html", "2021-02-01", "--out", str(out_path)])
            self.assertEqual(code, 0)
            self.assertIn("Wrote calendar to:", out)
            self.assertIn("February 2021", out_path.read_text(encoding="utf-8"))

    def test_cli_uses_default_events_file(self) -> None:
        self.default_events.write_text(
            json.dumps({"events": [{"start": "2021-02-03", "end": "2021-02-03", "summary": "Dentist"}]}),
            encoding="utf-8",
        )
        code, out = _run(["html", "2021-02-01"])
        self.assertEqual(code, 0)
        self.assertIn('title="Dentist"><div>3</div><div>Dentist</div>', out)

    def test_cli_events_with_scalar_classes_still_render(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "events.json"
            p.write_text(
                json.dumps([{"start": "2021-02-10", "end": "2021-02-12", "summary": "Trip", "classes": 5}]),
                encoding="utf-8",
            )
            code, out = _run(["html", "2021-02-01", "--events", str(p)])

        self.assertEqual(code, 0)
        self.assertIn('<td class="day" title="Trip"><div>10</div><div>Trip</div></td>', out)

    def test_cli_strict_invalid_date_fails(self) -> None:
        code, out = _run(["html", "2021-99-01", "--strict"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid date", out)

    def test_cli_preview(self) -> None:
        code, out = _run(["preview", "2021-02-01"])
        self.assertEqual(code, 0)
        self.assertIn("February 2021", out)


if __name__ == "__main__":
    unittest.main()
