# steps.py
from dataclasses import dataclass
from enum import Enum

DEFAULT_SETTLE_DELAY_MS = 50


class Side(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @property
    def opposite(self):
        return _OPPOSITES[self]


_OPPOSITES = {
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
    Side.CENTER: Side.CENTER,
}


@dataclass(frozen=True)
class Step:
    """One stop of a tour.

    ``title`` and ``content`` are text keys handed to the renderer's translate
    function, never display strings. An empty ``target`` means the step has no
    anchor and its tooltip sits in the middle of the viewport.
    """

    target: str
    title: str
    content: str
    side: Side = Side.BOTTOM
    interactive: bool = False
    settle_delay: int = DEFAULT_SETTLE_DELAY_MS

    def __post_init__(self):
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "side", Side(self.side))
        object.__setattr__(self, "target", self.target.strip())
        if self.settle_delay < 0:
            raise ValueError(f"settle_delay must be >= 0, got {self.settle_delay}")
        # only a click on the target can advance an interactive step
        if self.interactive and not self.target:
            raise ValueError("interactive steps need a target")

    @property
    def has_target(self):
        return bool(self.target)
