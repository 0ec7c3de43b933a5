"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import unittest
from pathlib import Path
from unittest import mock

from lazyedit import cli
from lazyedit.errors import FatalSystemError
from lazyedit.runtime.config import EditorSettings


class CliMainTests(unittest.TestCase):
    def _run(self, argv: list[str], run_editor: mock.Mock) -> None:
        with mock.patch("lazyedit.cli.load_settings", return_value=EditorSettings(log_level="INFO")), mock.patch(
            "lazyedit.cli.configure_logging"
        ) as configure, mock.patch("lazyedit.cli.run_editor", run_editor):
            cli.main(argv)
        configure.assert_called_once_with("INFO")

    def test_path_argument_is_passed_to_editor(self) -> None:
        run_editor = mock.Mock()

        self._run(["notes.txt"], run_editor)

        run_editor.assert_called_once_with(Path("notes.txt"), EditorSettings(log_level="INFO"))

    def test_no_argument_opens_empty_buffer(self) -> None:
        run_editor = mock.Mock()

        self._run([], run_editor)

        self.assertIsNone(run_editor.call_args.args[0])

    def test_fatal_error_exits_with_status_one(self) -> None:
        run_editor = mock.Mock(side_effect=FatalSystemError("tcgetattr", "not a tty"))
        stderr = io.StringIO()

        with mock.patch("sys.stderr", stderr), self.assertRaises(SystemExit) as raised:
            self._run([], run_editor)

        self.assertEqual(raised.exception.code, 1)
        self.assertIn("tcgetattr", stderr.getvalue())

    def test_too_many_arguments_is_usage_error(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()), self.assertRaises(SystemExit) as raised:
            cli.main(["a", "b"])

        self.assertEqual(raised.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
