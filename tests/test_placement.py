import itertools

import pytest

from core.placement import (ARROW_SIZE, VIEWPORT_PADDING, Rect, Size, candidate_sides,
                            first_acceptable, place)
from core.steps import Side

VIEWPORT = Size(800, 600)
TOOLTIP = Size(200, 100)


def test_bottom_placement_matches_reference_layout():
    anchor = Rect(top=100, left=100, width=50, height=50)
    result = place(anchor, TOOLTIP, "bottom", VIEWPORT)

    assert result.tooltip_top == 166
    assert result.tooltip_left == 25
    assert result.side is Side.BOTTOM
    assert result.arrow_side is Side.TOP
    # anchor center x=125 sits 100px into the tooltip
    assert result.arrow_offset == 100


def test_bottom_falls_back_to_top_near_viewport_bottom():
    anchor = Rect(top=550, left=300, width=50, height=30)
    result = place(anchor, TOOLTIP, Side.BOTTOM, VIEWPORT)

    assert result.side is Side.TOP
    assert result.tooltip_top == 434
    assert result.tooltip_top + TOOLTIP.height < anchor.top


def test_right_falls_back_to_left_near_viewport_edge():
    anchor = Rect(top=200, left=700, width=50, height=50)
    result = place(anchor, TOOLTIP, Side.RIGHT, VIEWPORT)

    assert result.side is Side.LEFT
    assert result.tooltip_left == 484
    assert result.tooltip_top == 175
    assert result.arrow_side is Side.RIGHT


def test_left_and_right_preferences_are_honoured_when_they_fit():
    anchor = Rect(top=200, left=400, width=50, height=50)

    right = place(anchor, TOOLTIP, Side.RIGHT, VIEWPORT)
    assert (right.side, right.tooltip_left, right.tooltip_top) == (Side.RIGHT, 466, 175)

    left = place(anchor, TOOLTIP, Side.LEFT, VIEWPORT)
    assert (left.side, left.tooltip_left) == (Side.LEFT, 184)
    assert left.arrow_offset == 50


def test_last_clamped_trial_wins_when_no_side_fits():
    viewport = Size(800, 200)
    anchor = Rect(top=50, left=300, width=50, height=100)
    result = place(anchor, TOOLTIP, Side.BOTTOM, viewport)

    assert result.side is Side.TOP
    assert result.tooltip_top == VIEWPORT_PADDING
    assert result.has_arrow


@pytest.mark.parametrize("anchor", [None, Rect(100, 100, 50, 50)])
def test_center_is_arrowless_and_centered(anchor):
    result = place(anchor, TOOLTIP, Side.CENTER, VIEWPORT)

    assert (result.tooltip_top, result.tooltip_left) == (250, 300)
    assert result.side is Side.CENTER
    assert not result.has_arrow
    assert result.arrow_offset is None


def test_missing_anchor_centers_even_with_a_side():
    result = place(None, TOOLTIP, Side.LEFT, Size(1000, 400))
    assert (result.tooltip_top, result.tooltip_left) == (150, 400)
    assert not result.has_arrow


def test_tooltip_larger_than_viewport_collapses_to_padding():
    huge = Size(900, 700)
    for side in Side:
        result = place(Rect(10, 10, 5, 5), huge, side, VIEWPORT)
        assert (result.tooltip_top, result.tooltip_left) == (VIEWPORT_PADDING, VIEWPORT_PADDING)


def test_position_always_within_viewport_bounds():
    anchors = [Rect(t, l, 40, 30) for t, l in itertools.product((0, 120, 480, 590), (0, 350, 790))]
    viewports = [Size(800, 600), Size(320, 240), Size(150, 90)]
    for anchor, side, viewport in itertools.product(anchors, Side, viewports):
        result = place(anchor, TOOLTIP, side, viewport)
        max_top = max(VIEWPORT_PADDING, viewport.height - TOOLTIP.height - VIEWPORT_PADDING)
        max_left = max(VIEWPORT_PADDING, viewport.width - TOOLTIP.width - VIEWPORT_PADDING)
        assert VIEWPORT_PADDING <= result.tooltip_top <= max_top
        assert VIEWPORT_PADDING <= result.tooltip_left <= max_left


def test_arrow_stays_inside_tooltip_when_anchor_is_at_the_edge():
    anchor = Rect(top=100, left=0, width=10, height=10)
    result = place(anchor, TOOLTIP, Side.BOTTOM, VIEWPORT)

    assert result.tooltip_left == VIEWPORT_PADDING
    assert result.arrow_offset == ARROW_SIZE


def test_arrow_clamp_on_tiny_tooltip():
    tiny = Size(10, 10)
    result = place(Rect(100, 100, 50, 50), tiny, Side.TOP, VIEWPORT)
    assert result.arrow_offset == ARROW_SIZE


def test_candidates_are_preferred_then_opposite():
    assert candidate_sides("top") == [Side.TOP, Side.BOTTOM]
    assert candidate_sides(Side.LEFT) == [Side.LEFT, Side.RIGHT]


def test_first_acceptable_respects_candidate_order():
    anchor = Rect(top=250, left=350, width=100, height=100)
    side, top, left = first_acceptable([Side.TOP, Side.BOTTOM], anchor, TOOLTIP, VIEWPORT)
    assert side is Side.TOP
    assert top == 134


def test_unknown_side_is_rejected():
    with pytest.raises(ValueError):
        place(Rect(0, 0, 1, 1), TOOLTIP, "diagonal", VIEWPORT)


def test_rect_rejects_negative_size():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 10)


def test_rect_edges():
    r = Rect(top=10, left=20, width=30, height=40)
    assert (r.right, r.bottom, r.center_x, r.center_y) == (50, 50, 35, 30)
    assert r.inflated(8) == Rect(2, 12, 46, 56)
