"""Frame planning tests.

Checks header/tab-bar placement, the two-pane listing geometry, the list
scroll window, detail scroll bound recomputation, and tiny-terminal safety.
"""

from __future__ import annotations

import unittest

from johnjeong.content.model import AboutTab, AppData, Entry, Header, Link, ListingTab
from johnjeong.render import (
    DrawOp,
    compute_frame_layout,
    entry_label,
    listing_geometry,
    plan_frame,
)
from johnjeong.render.help import HELP_LINE
from johnjeong.state import NavigationState
from johnjeong.text import ELLIPSIS


def _links(count: int) -> tuple[Link, ...]:
    return tuple(Link(label=f"Link{idx}", url=f"https://example.com/{idx}") for idx in range(count))


def _data(links: tuple[Link, ...] = (), entries: list[Entry] | None = None) -> AppData:
    return AppData(
        header=Header(title="John Jeong", subtitle="Co-founder"),
        tabs=(
            AboutTab(tagline="I like simple & intuitive stuff.", links=links or _links(4)),
            ListingTab.sorted("Essays", "Long-form writing.", entries or []),
        ),
    )


def _ops_at_row(ops: list[DrawOp], y: int) -> list[DrawOp]:
    return [op for op in ops if op.y == y]


def _texts(ops: list[DrawOp]) -> list[str]:
    return [op.text for op in ops]


class LayoutTests(unittest.TestCase):
    def test_layout_pins_status_and_help_rows(self) -> None:
        layout = compute_frame_layout(100, 30)
        self.assertEqual(layout.usable_width, 96)
        self.assertEqual(layout.status_row, 27)
        self.assertEqual(layout.help_row, 28)

    def test_layout_saturates_for_tiny_terminals(self) -> None:
        layout = compute_frame_layout(2, 1)
        self.assertEqual(layout.usable_width, 0)
        self.assertEqual(layout.status_row, 0)
        self.assertEqual(layout.help_row, 0)

    def test_list_width_is_third_of_usable_width(self) -> None:
        geometry = listing_geometry(compute_frame_layout(100, 30))
        self.assertEqual(geometry.list_width, 31)
        self.assertEqual(geometry.detail_x, 35)
        self.assertEqual(geometry.detail_width, 60)

    def test_list_width_is_clamped(self) -> None:
        narrow = listing_geometry(compute_frame_layout(40, 30))
        wide = listing_geometry(compute_frame_layout(200, 30))
        self.assertEqual(narrow.list_width, 24)
        self.assertEqual(wide.list_width, 38)

    def test_detail_width_has_floor(self) -> None:
        geometry = listing_geometry(compute_frame_layout(40, 30))
        self.assertEqual(geometry.detail_width, 10)


class HeaderAndTabBarTests(unittest.TestCase):
    def test_header_and_tabs_are_drawn(self) -> None:
        ops = plan_frame(_data(), NavigationState(tab_index=1), 100, 30)

        self.assertIn(DrawOp(2, 1, "John Jeong", "bold"), ops)
        self.assertIn(DrawOp(2, 2, "Co-founder", "dim"), ops)
        tab_ops = _ops_at_row(ops, 4)
        self.assertEqual(
            tab_ops,
            [DrawOp(2, 4, "1. About", "plain"), DrawOp(13, 4, "2. Essays", "tab_active")],
        )

    def test_help_and_status_lines(self) -> None:
        state = NavigationState(status="Opened GitHub")
        ops = plan_frame(_data(), state, 200, 30)

        self.assertIn(DrawOp(2, 27, "Opened GitHub", "dim"), ops)
        self.assertIn(DrawOp(2, 28, HELP_LINE, "dim"), ops)

    def test_no_status_row_without_message(self) -> None:
        ops = plan_frame(_data(), NavigationState(), 200, 30)
        self.assertEqual(_ops_at_row(ops, 27), [])


class AboutTabTests(unittest.TestCase):
    def test_selection_below_window_scrolls_list(self) -> None:
        state = NavigationState(tab_index=0, list_index=3)

        # Links start at row 8; 13 rows leave exactly two visible link rows.
        ops = plan_frame(_data(links=_links(4)), state, 80, 13)

        self.assertEqual(state.list_scroll, 2)
        self.assertEqual(
            _ops_at_row(ops, 8) + _ops_at_row(ops, 9),
            [DrawOp(4, 8, "  Link2", "row"), DrawOp(4, 9, "› Link3", "row_selected")],
        )

    def test_all_links_visible_keeps_scroll_at_zero(self) -> None:
        state = NavigationState(tab_index=0, list_index=3, list_scroll=2)

        ops = plan_frame(_data(links=_links(4)), state, 80, 30)

        self.assertEqual(state.list_scroll, 0)
        self.assertEqual(
            _texts(op for op in ops if op.x == 4),
            ["  Link0", "  Link1", "  Link2", "› Link3"],
        )


class ListingTabTests(unittest.TestCase):
    def _entries(self) -> list[Entry]:
        return [
            Entry(title="Alpha", date="2024-01-01T09:00:00Z", body="first body", url="u1", sort_key="2024-01-01"),
            Entry(title="Beta", date="2023-05-05", body="second body", url="u2", sort_key="2023-05-05"),
            Entry(title="Undated note", date="", body="third body", url="u3", sort_key="0"),
        ]

    def test_list_rows_show_marker_date_and_title(self) -> None:
        state = NavigationState(tab_index=1, list_index=1)

        ops = plan_frame(_data(entries=self._entries()), state, 100, 30)

        self.assertIn(DrawOp(2, 8, "Posts", "dim"), ops)
        self.assertIn(DrawOp(2, 9, "  2024-01-01 Alpha", "row"), ops)
        self.assertIn(DrawOp(2, 10, "› 2023-05-05 Beta", "row_selected"), ops)
        self.assertIn(DrawOp(2, 11, "  Undated note", "row"), ops)

    def test_detail_pane_shows_selected_entry(self) -> None:
        state = NavigationState(tab_index=1, list_index=0)

        ops = plan_frame(_data(entries=self._entries()), state, 100, 30)

        detail = [op for op in ops if op.x == 35]
        self.assertEqual(
            detail,
            [
                DrawOp(35, 8, "Alpha", "bold"),
                DrawOp(35, 9, "2024-01-01T09:00:00Z", "dim"),
                DrawOp(35, 10, "first body", "plain"),
            ],
        )

    def test_long_labels_are_truncated_to_list_width(self) -> None:
        long_title = "A very long essay title that will never fit into the list pane"
        entries = [Entry(title=long_title, date="2024-02-02", body="", url="u", sort_key="2024-02-02")]
        state = NavigationState(tab_index=1)

        ops = plan_frame(_data(entries=entries), state, 100, 30)

        row = next(op for op in ops if op.y == 9 and op.x == 2)
        self.assertEqual(len(row.text), 2 + 29)
        self.assertTrue(row.text.endswith(ELLIPSIS))

    def test_body_scroll_bound_is_recomputed(self) -> None:
        body = "\n".join(f"line {idx}" for idx in range(30))
        entries = [Entry(title="Long", date="2024-03-03", body=body, url="u", sort_key="2024-03-03")]
        state = NavigationState(tab_index=1, content_scroll=50, content_scroll_max=99)

        ops = plan_frame(_data(entries=entries), state, 100, 24)

        # Body starts at row 10 and stops above the status row (21).
        self.assertEqual(state.content_scroll_max, 30 - 11)
        self.assertEqual(state.content_scroll, 19)
        body_ops = [op for op in ops if op.x == 35 and op.y >= 10]
        self.assertEqual(body_ops[0], DrawOp(35, 10, "line 19", "plain"))
        self.assertEqual(body_ops[-1], DrawOp(35, 20, "line 29", "plain"))

    def test_undated_entry_gets_one_more_body_row(self) -> None:
        body = "\n".join(f"line {idx}" for idx in range(30))
        entries = [Entry(title="Long", date="", body=body, url="u", sort_key="x")]
        state = NavigationState(tab_index=1)

        plan_frame(_data(entries=entries), state, 100, 24)

        self.assertEqual(state.content_scroll_max, 30 - 12)

    def test_empty_listing_shows_placeholders(self) -> None:
        state = NavigationState(tab_index=1, content_scroll_max=4, content_scroll=2)

        ops = plan_frame(_data(entries=[]), state, 100, 30)

        self.assertIn(DrawOp(2, 9, "No posts found.", "dim"), ops)
        self.assertIn(DrawOp(35, 9, "Select a post to read.", "dim"), ops)
        self.assertEqual((state.content_scroll, state.content_scroll_max), (0, 0))

    def test_list_window_follows_selection(self) -> None:
        entries = [
            Entry(title=f"Post {idx}", date=f"2024-01-{idx + 1:02d}", body="", url="u", sort_key=f"2024-01-{idx + 1:02d}")
            for idx in range(20)
        ]
        state = NavigationState(tab_index=1)
        # 20 rows: list from row 9, height 20 - 12 = 8.
        for step in range(25):
            plan_frame(_data(entries=entries), state, 100, 20)
            self.assertLessEqual(state.list_scroll, state.list_index)
            self.assertLess(state.list_index, state.list_scroll + 8)
            state.list_index = (state.list_index + 3) % 20


class DegenerateSizeTests(unittest.TestCase):
    def test_tiny_terminals_do_not_fail(self) -> None:
        entries = [Entry(title="Alpha", date="2024-01-01", body="- a b c d e f g", url="u", sort_key="1")]
        data = _data(entries=entries)
        for columns, rows in ((0, 0), (1, 1), (5, 3), (12, 8), (30, 12)):
            for tab_index in (0, 1):
                state = NavigationState(tab_index=tab_index)
                ops = plan_frame(data, state, columns, rows)
                self.assertTrue(all(op.x >= 0 and op.y >= 0 for op in ops))
                self.assertGreaterEqual(state.list_scroll, 0)
                self.assertGreaterEqual(state.content_scroll_max, 0)


class EntryLabelTests(unittest.TestCase):
    def test_date_prefix_is_ten_characters(self) -> None:
        self.assertEqual(entry_label("Alpha", "2024-01-01T10:00:00"), "2024-01-01 Alpha")
        self.assertEqual(entry_label("Alpha", ""), "Alpha")


if __name__ == "__main__":
    unittest.main()
