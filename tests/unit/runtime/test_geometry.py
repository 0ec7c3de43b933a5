"""Window-size gateway: direct query and cursor-report fallback."""

from __future__ import annotations

import os
import unittest
from unittest import mock

from lazyedit.errors import FatalSystemError
from lazyedit.runtime import geometry


class CursorReportParsingTests(unittest.TestCase):
    def test_parses_rows_and_columns(self) -> None:
        self.assertEqual(geometry.parse_cursor_position_report(b"\x1b[24;80R"), (24, 80))

    def test_rejects_malformed_reports(self) -> None:
        for report in (b"", b"24;80R", b"\x1b[24R", b"\x1b[a;bR", b"\x1bO24;80R"):
            with self.subTest(report=report):
                self.assertIsNone(geometry.parse_cursor_position_report(report))


class QueryWindowSizeTests(unittest.TestCase):
    def test_direct_query_is_preferred(self) -> None:
        with mock.patch(
            "lazyedit.runtime.geometry.os.get_terminal_size", return_value=os.terminal_size((120, 40))
        ), mock.patch("lazyedit.runtime.geometry.cursor_report_window_size") as fallback:
            self.assertEqual(geometry.query_window_size(0, 1), (40, 120))

        fallback.assert_not_called()

    def test_zero_columns_uses_cursor_report_fallback(self) -> None:
        read_fd, write_fd = os.pipe()
        out_read, out_write = os.pipe()
        try:
            os.write(write_fd, b"\x1b[33;101R")
            with mock.patch(
                "lazyedit.runtime.geometry.os.get_terminal_size", return_value=os.terminal_size((0, 0))
            ):
                size = geometry.query_window_size(read_fd, out_write)
            sent = os.read(out_read, 64)
        finally:
            for fd in (read_fd, write_fd, out_read, out_write):
                os.close(fd)

        self.assertEqual(size, (33, 101))
        self.assertEqual(sent, b"\x1b[999C\x1b[999B\x1b[6n")

    def test_total_failure_is_fatal(self) -> None:
        with mock.patch(
            "lazyedit.runtime.geometry.direct_window_size", return_value=None
        ), mock.patch("lazyedit.runtime.geometry.cursor_report_window_size", return_value=None):
            with self.assertRaises(FatalSystemError):
                geometry.query_window_size(0, 1)


if __name__ == "__main__":
    unittest.main()
