# errors.py


class TourError(Exception):
    """Base class for recoverable tour problems. Never raised into the host."""


class TargetNotFound(TourError):
    def __init__(self, selector, reason="no visible widget matches"):
        super().__init__(f"{selector!r}: {reason}")
        self.selector = selector
        self.reason = reason


class SelectorSyntaxError(TargetNotFound):
    def __init__(self, selector, position):
        super().__init__(selector, f"unexpected input at column {position}")
        self.position = position
