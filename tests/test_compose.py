"""ANSI frame composition tests.

Verifies cursor placement, theme styling, clipping at the surface edges, and
the combined plan-and-write path used by the runtime.
"""

from __future__ import annotations

import unittest

from johnjeong.content.model import AboutTab, AppData, Header, Link
from johnjeong.render import DrawOp, render_frame
from johnjeong.render.compose import CLEAR_SCREEN, compose_frame, cursor_to
from johnjeong.state import NavigationState
from johnjeong.ui_theme import DEFAULT_THEME, PLAIN_THEME, available_theme_names, resolve_theme


class ComposeFrameTests(unittest.TestCase):
    def test_frame_starts_by_clearing_screen(self) -> None:
        self.assertEqual(compose_frame([], 80, 24, DEFAULT_THEME), CLEAR_SCREEN)

    def test_cursor_position_is_one_based(self) -> None:
        self.assertEqual(cursor_to(0, 0), "\033[1;1H")
        self.assertEqual(cursor_to(4, 9), "\033[10;5H")

    def test_styled_op_is_wrapped_in_sgr_and_reset(self) -> None:
        payload = compose_frame([DrawOp(2, 1, "Title", "bold")], 80, 24, DEFAULT_THEME)
        self.assertEqual(payload, CLEAR_SCREEN + "\033[2;3H" + "\033[1mTitle\033[0m")

    def test_plain_op_has_no_sgr(self) -> None:
        payload = compose_frame([DrawOp(0, 0, "text")], 80, 24, DEFAULT_THEME)
        self.assertEqual(payload, CLEAR_SCREEN + "\033[1;1Htext")

    def test_ops_outside_surface_are_dropped(self) -> None:
        ops = [DrawOp(0, 24, "below"), DrawOp(80, 0, "right"), DrawOp(-1, 0, "left")]
        self.assertEqual(compose_frame(ops, 80, 24, DEFAULT_THEME), CLEAR_SCREEN)

    def test_text_is_clipped_at_right_edge(self) -> None:
        payload = compose_frame([DrawOp(6, 0, "abcdefgh")], 10, 5, DEFAULT_THEME)
        self.assertTrue(payload.endswith("\033[1;7Habcd"))

    def test_unknown_style_draws_unstyled(self) -> None:
        payload = compose_frame([DrawOp(0, 0, "x", "sparkly")], 10, 5, DEFAULT_THEME)
        self.assertEqual(payload, CLEAR_SCREEN + "\033[1;1Hx")


class ThemeTests(unittest.TestCase):
    def test_resolve_theme_defaults_and_fallbacks(self) -> None:
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("PLAIN"), PLAIN_THEME)
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme("default", no_color=True), PLAIN_THEME)
        self.assertEqual(available_theme_names(), ("default", "plain"))

    def test_unknown_theme_warns_with_available_names(self) -> None:
        with self.assertLogs("johnjeong.ui_theme", level="WARNING") as captured:
            self.assertIs(resolve_theme("solarized"), DEFAULT_THEME)

        self.assertIn("'solarized'", captured.output[0])
        self.assertIn("default, plain", captured.output[0])

    def test_plain_theme_keeps_reverse_video_for_selection(self) -> None:
        self.assertEqual(PLAIN_THEME.sgr_for("row_selected"), "\033[7m")
        self.assertEqual(PLAIN_THEME.sgr_for("dim"), "")


class RenderFrameTests(unittest.TestCase):
    def test_render_frame_writes_encoded_payload(self) -> None:
        data = AppData(
            header=Header(title="Tïtle", subtitle="Sub"),
            tabs=(AboutTab(tagline="tag", links=(Link("GitHub", "https://github.example"),)),),
        )
        writes: list[bytes] = []

        render_frame(data, NavigationState(), 80, 24, PLAIN_THEME, writes.append)

        self.assertEqual(len(writes), 1)
        decoded = writes[0].decode("utf-8")
        self.assertTrue(decoded.startswith(CLEAR_SCREEN))
        self.assertIn("Tïtle", decoded)
        self.assertIn("\033[7m› GitHub\033[0m", decoded)


if __name__ == "__main__":
    unittest.main()
