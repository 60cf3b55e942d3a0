# placement.py
"""Tooltip placement around an anchor rectangle.

Everything here is pure: no Qt, no state between calls. The controller calls
``place`` again whenever the anchor, the tooltip size or the viewport changes.

The side policy is a two-entry candidate list, the preferred side followed by
its opposite. Each candidate is clamped into the viewport and kept only if the
clamped box still sits on the intended side of the anchor. When neither
candidate survives, the last clamped trial is used anyway.
"""

from dataclasses import dataclass
from typing import Optional

from core.steps import Side

GAP = 16
VIEWPORT_PADDING = 16
ARROW_SIZE = 8


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    top: float
    left: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect size must be non-negative, got {self.width}x{self.height}")

    @property
    def right(self):
        return self.left + self.width

    @property
    def bottom(self):
        return self.top + self.height

    @property
    def center_x(self):
        return self.left + self.width / 2

    @property
    def center_y(self):
        return self.top + self.height / 2

    def inflated(self, margin):
        return Rect(self.top - margin, self.left - margin,
                    self.width + 2 * margin, self.height + 2 * margin)


@dataclass(frozen=True)
class Placement:
    tooltip_top: float
    tooltip_left: float
    side: Side
    arrow_side: Optional[Side] = None
    arrow_offset: Optional[float] = None

    @property
    def has_arrow(self):
        return self.arrow_side is not None


def clamp(value, low, high):
    # an empty range collapses onto ``low``
    return max(low, min(value, high))


def _clamp_to_viewport(top, left, tooltip, viewport):
    top = clamp(top, VIEWPORT_PADDING, viewport.height - tooltip.height - VIEWPORT_PADDING)
    left = clamp(left, VIEWPORT_PADDING, viewport.width - tooltip.width - VIEWPORT_PADDING)
    return top, left


def _trial_position(side, anchor, tooltip):
    if side is Side.BOTTOM:
        return anchor.bottom + GAP, anchor.center_x - tooltip.width / 2
    if side is Side.TOP:
        return anchor.top - GAP - tooltip.height, anchor.center_x - tooltip.width / 2
    if side is Side.LEFT:
        return anchor.center_y - tooltip.height / 2, anchor.left - GAP - tooltip.width
    if side is Side.RIGHT:
        return anchor.center_y - tooltip.height / 2, anchor.right + GAP
    raise ValueError(f"No trial position for side {side!r}")


def _is_on_side(side, top, left, anchor, tooltip):
    if side is Side.BOTTOM:
        return top > anchor.bottom
    if side is Side.TOP:
        return top + tooltip.height < anchor.top
    if side is Side.LEFT:
        return left + tooltip.width < anchor.left
    return left > anchor.right


def candidate_sides(preferred):
    preferred = Side(preferred)
    return [preferred, preferred.opposite]


def first_acceptable(candidates, anchor, tooltip, viewport):
    """Return ``(side, top, left)`` for the first candidate that fits.

    Falls back to the last clamped trial when no candidate fits.
    """
    chosen = None
    for side in candidates:
        top, left = _trial_position(side, anchor, tooltip)
        top, left = _clamp_to_viewport(top, left, tooltip, viewport)
        chosen = (side, top, left)
        if _is_on_side(side, top, left, anchor, tooltip):
            break
    return chosen


def arrow_offset(side, top, left, anchor, tooltip):
    """Arrow center along the tooltip edge facing the anchor."""
    if side in (Side.TOP, Side.BOTTOM):
        return clamp(anchor.center_x - left, ARROW_SIZE, tooltip.width - ARROW_SIZE)
    return clamp(anchor.center_y - top, ARROW_SIZE, tooltip.height - ARROW_SIZE)


def centered(tooltip, viewport):
    top = (viewport.height - tooltip.height) / 2
    left = (viewport.width - tooltip.width) / 2
    top, left = _clamp_to_viewport(top, left, tooltip, viewport)
    return Placement(tooltip_top=top, tooltip_left=left, side=Side.CENTER)


def place(anchor, tooltip, side, viewport):
    side = Side(side)
    if anchor is None or side is Side.CENTER:
        return centered(tooltip, viewport)

    final_side, top, left = first_acceptable(candidate_sides(side), anchor, tooltip, viewport)
    return Placement(
        tooltip_top=top,
        tooltip_left=left,
        side=final_side,
        arrow_side=final_side.opposite,
        arrow_offset=arrow_offset(final_side, top, left, anchor, tooltip),
    )
