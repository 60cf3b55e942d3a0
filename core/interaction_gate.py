# interaction_gate.py
"""Event filters the tour installs on the host, and the scope that owns them.

Every hook is a context manager: entering installs the Qt event filter,
exiting removes it. The controller enters hooks into a ``StepSubscription``
so that a step change, a close or a teardown releases all of them at once.
"""

import logging
from contextlib import ExitStack

from PyQt6 import sip
from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtWidgets import QAbstractButton, QApplication, QWidget

log = logging.getLogger(__name__)


class StepSubscription:
    """Resources held by the active step. ``replace`` swaps in an empty set."""

    def __init__(self):
        self._stack = ExitStack()

    def replace(self):
        old, self._stack = self._stack, ExitStack()
        old.close()
        return self._stack

    def release(self):
        self._stack.close()

    def enter(self, hook):
        return self._stack.enter_context(hook)

    def callback(self, fn, *args):
        self._stack.callback(fn, *args)


class _EventHook(QObject):
    # Parent the hook to its owner: Qt drops the filter when the owner is deleted.
    def __init__(self, callback, parent=None):
        super().__init__(parent)
        self._callback = callback
        self._watched = []

    def _targets(self):
        raise NotImplementedError

    def handle(self, obj, event):
        return False

    def eventFilter(self, obj, event):
        return self.handle(obj, event)

    def __enter__(self):
        for target in self._targets():
            target.installEventFilter(self)
            self._watched.append(target)
        return self

    def __exit__(self, *exc):
        self.detach()
        if not sip.isdeleted(self):
            self.deleteLater()
        return False

    @property
    def attached(self):
        return bool(self._watched)

    def detach(self):
        watched, self._watched = self._watched, []
        if sip.isdeleted(self):
            return
        for target in watched:
            if not sip.isdeleted(target):
                target.removeEventFilter(self)


class InteractionGate(_EventHook):
    """One-shot interceptor for the first activation of a target widget.

    A left click anywhere in the target, or Space/Enter/Return on a button
    inside it, counts. The triggering event is consumed, so the widget never
    sees it and never emits its own ``clicked``. Children are covered as well,
    the way a capturing listener covers an element's subtree.
    """

    ACTIVATION_KEYS = (Qt.Key.Key_Space, Qt.Key.Key_Enter, Qt.Key.Key_Return)

    def __init__(self, target, callback, parent=None):
        super().__init__(callback, parent)
        self.target = target

    def _targets(self):
        return [self.target] + self.target.findChildren(QWidget)

    def handle(self, obj, event):
        if not self._is_activation(obj, event):
            return False
        event.accept()
        self.detach()
        log.debug("Interactive target %s activated", self.target.objectName() or type(self.target).__name__)
        self._callback()
        return True

    def _is_activation(self, obj, event):
        kind = event.type()
        if kind in (QEvent.Type.MouseButtonPress, QEvent.Type.MouseButtonDblClick):
            return event.button() == Qt.MouseButton.LeftButton
        if kind == QEvent.Type.KeyPress:
            # a button only clicks on release after seeing the press, so
            # consuming the press is enough to keep it from firing
            return (isinstance(obj, QAbstractButton) and not event.isAutoRepeat()
                    and event.key() in self.ACTIVATION_KEYS)
        return False


class EscapeWatcher(_EventHook):
    """Application-wide Escape key handler for the lifetime of an open tour."""

    def _targets(self):
        app = QApplication.instance()
        return [app] if app is not None else []

    def handle(self, obj, event):
        if event.type() == QEvent.Type.KeyPress and event.key() == Qt.Key.Key_Escape:
            self._callback()
            return True
        return False


class ResizeWatcher(_EventHook):
    def __init__(self, viewport, callback, parent=None):
        super().__init__(callback, parent)
        self.viewport = viewport

    def _targets(self):
        return [self.viewport]

    def handle(self, obj, event):
        if event.type() == QEvent.Type.Resize:
            self._callback()
        return False
