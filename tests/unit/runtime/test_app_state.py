"""Initial editor state built from the command-line path."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyedit.runtime.app import HELP_MESSAGE, build_state
from lazyedit.runtime.config import EditorSettings


class BuildStateTests(unittest.TestCase):
    def test_existing_file_is_loaded_clean(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a.txt"
            target.write_text("one\ntwo\n", encoding="utf-8")

            state = build_state(target, EditorSettings(tab_stop=4))

        self.assertEqual([line.chars for line in state.buffer], ["one", "two"])
        self.assertEqual(state.buffer.path, target)
        self.assertFalse(state.buffer.dirty)
        self.assertEqual(state.buffer[0].tab_stop, 4)
        self.assertEqual(state.status_message, HELP_MESSAGE)

    def test_missing_file_keeps_name_for_first_save(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "new.txt"

            state = build_state(target, EditorSettings())

        self.assertEqual(state.buffer.num_lines, 0)
        self.assertEqual(state.buffer.path, target)

    def test_unreadable_file_opens_unnamed_buffer_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "locked.txt"
            target.write_text("secret\n", encoding="utf-8")
            with mock.patch(
                "lazyedit.runtime.app.load_lines",
                side_effect=PermissionError(13, "Permission denied"),
            ):
                state = build_state(target, EditorSettings())

        self.assertEqual(state.buffer.num_lines, 0)
        self.assertIsNone(state.buffer.path)
        self.assertEqual(state.status_message, "Can't open! I/O error: Permission denied")

    def test_no_path_starts_empty_with_help(self) -> None:
        state = build_state(None, EditorSettings())

        self.assertEqual(state.buffer.num_lines, 0)
        self.assertIsNone(state.buffer.path)
        self.assertEqual(state.quit_remaining, 3)


if __name__ == "__main__":
    unittest.main()
