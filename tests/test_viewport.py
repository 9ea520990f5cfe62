"""Layout flags and the scroll-to-top path."""

import pytest

from logic.viewport import COMPACT_BREAKPOINT, SCROLL_TOP_THRESHOLD, ViewportController


@pytest.mark.parametrize(
    "width, compact",
    [(320, True), (COMPACT_BREAKPOINT - 1, True), (COMPACT_BREAKPOINT, False), (1440, False)],
)
def test_compact_breakpoint(width, compact):
    viewport = ViewportController()
    viewport.resize(width)
    assert viewport.compact is compact


def test_resize_back_and_forth_notifies_on_change_only():
    viewport = ViewportController(width=1024)
    seen = []
    viewport.subscribe(lambda vp: seen.append(vp.compact))

    assert viewport.resize(900) is False
    assert viewport.resize(700) is True
    assert viewport.resize(600) is False
    assert viewport.resize(768) is True
    assert seen == [True, False]


@pytest.mark.parametrize(
    "offset, shown",
    [(0, False), (SCROLL_TOP_THRESHOLD, False), (SCROLL_TOP_THRESHOLD + 1, True), (5000, True)],
)
def test_scroll_threshold(offset, shown):
    viewport = ViewportController()
    viewport.scroll(offset)
    assert viewport.show_scroll_top is shown


def test_negative_offsets_clamp_to_zero():
    viewport = ViewportController()
    viewport.scroll(-40)
    assert viewport.offset == 0


def test_unsubscribe_stops_notifications():
    viewport = ViewportController()
    seen = []
    unsubscribe = viewport.subscribe(seen.append)
    assert viewport.listener_count == 1

    unsubscribe()
    unsubscribe()
    viewport.scroll(1000)

    assert seen == []
    assert viewport.listener_count == 0


class TestScrollToTopPath:
    def test_animates_down_to_zero(self):
        viewport = ViewportController()
        viewport.scroll(1200)
        path = viewport.scroll_to_top_path()
        assert path[-1] == 0
        assert path[0] < 1200
        assert all(a > b for a, b in zip(path, path[1:]))
        assert len(path) > 1

    def test_eases_out(self):
        viewport = ViewportController()
        viewport.scroll(1200)
        path = viewport.scroll_to_top_path(steps=10)
        first_step = 1200 - path[0]
        last_step = path[-2] - path[-1]
        assert first_step > last_step

    def test_small_offsets_still_end_at_zero(self):
        viewport = ViewportController()
        viewport.scroll(3)
        path = viewport.scroll_to_top_path()
        assert path[-1] == 0
        assert all(a > b for a, b in zip([3] + path, path))

    def test_already_at_top(self):
        assert ViewportController().scroll_to_top_path() == []

    def test_following_the_path_hides_the_button(self):
        viewport = ViewportController()
        viewport.scroll(900)
        assert viewport.show_scroll_top
        for offset in viewport.scroll_to_top_path():
            viewport.scroll(offset)
        assert viewport.offset == 0
        assert not viewport.show_scroll_top
