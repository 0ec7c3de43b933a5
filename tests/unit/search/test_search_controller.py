"""Incremental search: scanning, wrapping, overlay, and session exits."""

from __future__ import annotations

import unittest

from lazyedit.buffer import Buffer
from lazyedit.input.key_prompt import handle_prompt_key, open_search_prompt
from lazyedit.render.syntax import Highlight
from lazyedit.search import SearchController, SearchPhase
from lazyedit.state import EditorState
from lazyedit.viewport import Viewport


def _state(lines: list[str]) -> EditorState:
    state = EditorState(buffer=Buffer(lines))
    state.viewport = Viewport(rows=10, cols=40)
    return state


def _type(state: EditorState, text: str) -> None:
    for ch in text:
        handle_prompt_key(state, ch)


class SearchControllerTests(unittest.TestCase):
    def test_typing_moves_cursor_to_first_match_and_overlays_it(self) -> None:
        state = _state(["alpha", "beta 42", "gamma"])
        open_search_prompt(state)

        _type(state, "42")

        self.assertEqual((state.cursor_line, state.cursor_col), (1, 5))
        tags = state.buffer[1].hl
        self.assertEqual(tags[5:7], [Highlight.MATCH, Highlight.MATCH])
        self.assertEqual(tags[:5], [Highlight.NORMAL] * 5)

    def test_match_column_is_mapped_through_tabs(self) -> None:
        state = _state(["\tneedle"])
        open_search_prompt(state)

        _type(state, "needle")

        self.assertEqual(state.cursor_col, 1)

    def test_forward_search_wraps_from_last_line_to_first(self) -> None:
        state = _state(["foo", "bar", "baz"])
        state.cursor_line = 2
        open_search_prompt(state)

        _type(state, "foo")

        self.assertEqual(state.cursor_line, 0)

    def test_backward_search_wraps_from_first_line_to_last(self) -> None:
        state = _state(["xa", "b", "ya"])
        open_search_prompt(state)
        _type(state, "a")
        self.assertEqual(state.cursor_line, 0)

        handle_prompt_key(state, "UP")

        self.assertEqual(state.cursor_line, 2)

    def test_arrow_keys_step_between_matches(self) -> None:
        state = _state(["a1", "a2", "a3"])
        open_search_prompt(state)
        _type(state, "a")

        handle_prompt_key(state, "DOWN")
        self.assertEqual(state.cursor_line, 1)
        handle_prompt_key(state, "RIGHT")
        self.assertEqual(state.cursor_line, 2)
        handle_prompt_key(state, "RIGHT")
        self.assertEqual(state.cursor_line, 0)
        handle_prompt_key(state, "LEFT")
        self.assertEqual(state.cursor_line, 2)

    def test_overlay_is_restored_before_next_step(self) -> None:
        state = _state(["a 1", "a 2"])
        original = list(state.buffer[0].hl)
        open_search_prompt(state)
        _type(state, "a")

        handle_prompt_key(state, "DOWN")

        self.assertEqual(state.buffer[0].hl, original)
        self.assertEqual(state.buffer[1].hl[0], Highlight.MATCH)

    def test_match_forces_viewport_to_snap_to_match(self) -> None:
        state = _state([f"line {n}" for n in range(50)] + ["target"])
        open_search_prompt(state)

        _type(state, "target")

        self.assertGreater(state.viewport.row_offset, state.cursor_line)

    def test_confirm_keeps_cursor_and_restores_tags(self) -> None:
        state = _state(["abc", "12 xyz"])
        original = list(state.buffer[1].hl)
        open_search_prompt(state)
        _type(state, "xyz")

        handle_prompt_key(state, "ENTER")

        self.assertIsNone(state.prompt)
        self.assertIsNone(state.search)
        self.assertEqual((state.cursor_line, state.cursor_col), (1, 3))
        self.assertEqual(state.buffer[1].hl, original)

    def test_cancel_restores_cursor_and_viewport(self) -> None:
        state = _state([f"row {n}" for n in range(40)])
        state.cursor_line, state.cursor_col = 3, 2
        before_viewport = state.viewport
        open_search_prompt(state)
        _type(state, "row 35")
        self.assertEqual(state.cursor_line, 35)

        handle_prompt_key(state, "ESC")

        self.assertEqual((state.cursor_line, state.cursor_col), (3, 2))
        self.assertEqual(state.viewport, before_viewport)
        self.assertTrue(all(tag != Highlight.MATCH for line in state.buffer for tag in line.hl))

    def test_enter_with_empty_query_keeps_prompt_open(self) -> None:
        state = _state(["abc"])
        open_search_prompt(state)

        handle_prompt_key(state, "ENTER")

        self.assertIsNotNone(state.prompt)

    def test_backspace_shrinks_query_and_rescans_from_cursor(self) -> None:
        state = _state(["ab", "abc"])
        open_search_prompt(state)
        _type(state, "abc")
        self.assertEqual(state.cursor_line, 1)

        handle_prompt_key(state, "BACKSPACE")

        self.assertEqual(state.prompt.query, "ab")
        self.assertEqual(state.cursor_line, 1)

    def test_no_match_leaves_cursor(self) -> None:
        state = _state(["abc"])
        open_search_prompt(state)

        _type(state, "zzz")

        self.assertEqual((state.cursor_line, state.cursor_col), (0, 0))


class SearchControllerDirectTests(unittest.TestCase):
    def test_find_next_on_empty_buffer_returns_none(self) -> None:
        controller = SearchController()
        controller.begin()

        self.assertIsNone(controller.find_next(_state([]), "x"))

    def test_phase_transitions(self) -> None:
        state = _state(["abc"])
        controller = SearchController()
        self.assertEqual(controller.phase, SearchPhase.IDLE)

        controller.begin()
        self.assertTrue(controller.active)
        self.assertEqual(controller.handle_key(state, "a", "a"), SearchPhase.PROMPTING)
        self.assertEqual(controller.finish(state, SearchPhase.CANCELLED), SearchPhase.CANCELLED)
        self.assertFalse(controller.active)

    def test_search_from_last_match_on_last_line_wraps_forward(self) -> None:
        state = _state(["hit", "miss", "hit"])
        controller = SearchController()
        controller.begin()
        controller.last_match = 2

        self.assertEqual(controller.find_next(state, "hit"), 0)

    def test_backward_search_from_first_line_finds_last_line(self) -> None:
        state = _state(["hit", "miss", "hit"])
        controller = SearchController()
        controller.begin()
        controller.last_match = 0
        controller.direction = -1

        self.assertEqual(controller.find_next(state, "hit"), 2)


if __name__ == "__main__":
    unittest.main()
