# tour_controller.py
"""State machine that drives a guided tour.

The controller owns the current step and nothing renders inside it: the
presentation layer listens to its signals and reads ``view()``.

Phases::

    CLOSED --open--> SHOWING(0) --advance--> SHOWING(i+1) ... --advance--> COMPLETED
                     SHOWING(i) --request_close / Escape--> CANCELLED
                     SHOWING(i) --close (host)--> CLOSED

Every step change bumps ``_token``. Delayed work (the settle timer, resize
notifications, the interaction gate) carries the token it was created with and
is dropped when the token is no longer current.
"""

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from core.errors import TourError
from core.interaction_gate import EscapeWatcher, InteractionGate, ResizeWatcher, StepSubscription
from core.placement import Placement, Rect, Size, place
from core.steps import Side, Step

log = logging.getLogger(__name__)

DEFAULT_TOOLTIP_SIZE = Size(320, 180)


def _release_hooks(subscription, session, *_):
    subscription.release()
    session.close()


class TourPhase(Enum):
    CLOSED = "closed"
    SHOWING = "showing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TourView:
    step: Step
    index: int
    total: int
    highlight: Optional[Rect]
    placement: Placement
    interactive: bool

    @property
    def is_first(self):
        return self.index == 0

    @property
    def is_last(self):
        return self.index == self.total - 1


class TourController(QObject):
    step_changed = pyqtSignal(int)
    layout_changed = pyqtSignal()
    completed = pyqtSignal()
    cancelled = pyqtSignal()
    closed = pyqtSignal()

    def __init__(self, resolver, parent=None):
        super().__init__(parent)
        self.resolver = resolver
        self.steps = ()
        self.phase = TourPhase.CLOSED
        self.current_index = 0
        self.last_anchor_box = None
        self.placement = None
        self.tooltip_size = DEFAULT_TOOLTIP_SIZE

        self._token = 0
        self._target = None
        self._subscription = StepSubscription()
        self._session = ExitStack()
        # the wrapper may already be gone here, so the handler must not touch self
        self.destroyed.connect(partial(_release_hooks, self._subscription, self._session))

    # --- Queries ---
    @property
    def is_open(self):
        return self.phase is TourPhase.SHOWING

    @property
    def current_step(self):
        if not self.is_open:
            return None
        return self.steps[self.current_index]

    def view(self):
        if not self.is_open or self.placement is None:
            return None
        step = self.current_step
        return TourView(
            step=step,
            index=self.current_index,
            total=len(self.steps),
            highlight=self.last_anchor_box,
            placement=self.placement,
            interactive=step.interactive,
        )

    # --- Lifecycle ---
    def open(self, steps):
        if self.is_open:
            log.debug("Tour already open; ignoring open()")
            return False
        steps = tuple(steps)
        if not steps:
            log.info("Tour has no steps; nothing to show")
            return False

        self.steps = steps
        self.phase = TourPhase.SHOWING
        self._session.enter_context(EscapeWatcher(self.request_close, parent=self))
        log.info("Tour opened with %d steps", len(steps))
        self._show(0)
        return True

    def sync_open(self, should_open, steps=()):
        """Follow the host's persisted "tour should be open" flag."""
        if should_open and not self.is_open:
            return self.open(steps)
        if not should_open and self.is_open:
            self.close()
        return self.is_open

    def close(self):
        if self.is_open:
            self._finish(TourPhase.CLOSED)

    def request_close(self):
        if not self.is_open:
            return False
        log.info("Tour cancelled at step %d of %d", self.current_index + 1, len(self.steps))
        self._finish(TourPhase.CANCELLED)
        self.cancelled.emit()
        return True

    # --- Navigation ---
    def advance(self):
        if not self._accepts_manual_navigation("advance"):
            return False
        self._step_forward()
        return True

    def retreat(self):
        if not self._accepts_manual_navigation("retreat"):
            return False
        if self.current_index == 0:
            return False
        self._show(self.current_index - 1)
        return True

    def interactive_advance(self):
        if not self.is_open or not self.current_step.interactive:
            log.debug("Interactive advance ignored; active step is not interactive")
            return False
        self._step_forward()
        return True

    def set_tooltip_size(self, size):
        self.tooltip_size = size
        if self.is_open:
            self._relayout()

    def _accepts_manual_navigation(self, action):
        if not self.is_open:
            return False
        if self.current_step.interactive:
            log.debug("Manual %s rejected; step %d waits for its target", action, self.current_index)
            return False
        return True

    # --- Internals ---
    def _step_forward(self):
        if self.current_index >= len(self.steps) - 1:
            log.info("Tour completed")
            self._finish(TourPhase.COMPLETED)
            self.completed.emit()
        else:
            self._show(self.current_index + 1)

    def _show(self, index):
        self._token += 1
        token = self._token
        scope = self._subscription.replace()

        self.current_index = index
        self.last_anchor_box = None
        self._target = None
        step = self.steps[index]

        on_resize = partial(self._on_viewport_resized, token)
        scope.enter_context(ResizeWatcher(self.resolver.root, on_resize, parent=self))
        if step.has_target:
            timer = QTimer(self)
            timer.setSingleShot(True)
            timer.timeout.connect(partial(self._on_settled, token))
            scope.callback(timer.deleteLater)
            scope.callback(timer.stop)
            timer.start(step.settle_delay)

        self._relayout()
        self.step_changed.emit(index)

    def _on_settled(self, token):
        if not self._is_current(token):
            return
        step = self.current_step
        try:
            widget = self.resolver.locate(step.target)
            box = self.resolver.measure(widget, selector=step.target)
        except TourError as exc:
            log.warning("Tour target not found: %s. Skipping step. (%s)", step.target, exc)
            self._step_forward()
            return

        self._target = widget
        self.last_anchor_box = box
        if step.interactive:
            on_click = partial(self._on_target_clicked, token)
            self._subscription.enter(InteractionGate(widget, on_click, parent=self))
        self._relayout()

    def _on_target_clicked(self, token):
        if self._is_current(token):
            self.interactive_advance()

    def _on_viewport_resized(self, token):
        if not self._is_current(token):
            return
        if self._target is not None:
            try:
                self.last_anchor_box = self.resolver.measure(self._target, scroll=False)
            except TourError:
                log.debug("Anchor for step %d vanished during resize; keeping last box", self.current_index)
        self._relayout()

    def _is_current(self, token):
        if token != self._token or not self.is_open:
            log.debug("Discarding stale callback for token %d (current %d)", token, self._token)
            return False
        return True

    def _relayout(self):
        step = self.current_step
        anchor = None if step.side is Side.CENTER else self.last_anchor_box
        self.placement = place(anchor, self.tooltip_size, step.side, self.resolver.viewport())
        self.layout_changed.emit()

    def _finish(self, phase):
        self._token += 1
        self._subscription.release()
        self._session.close()
        self.phase = phase
        self.current_index = 0
        self.last_anchor_box = None
        self.placement = None
        self._target = None
        self.closed.emit()
