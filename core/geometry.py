# geometry.py
"""Finds tour targets in the host's widget tree and measures them.

Selectors are a small CSS-like language over the widget tree::

    QPushButton                      widgets inheriting QPushButton
    #sendButton                      objectName == "sendButton"
    [data-tour-id="send-button"]     Qt (dynamic) property equal to a value
    [tourTarget]                     property is set at all
    #sidebar QPushButton[active]     descendant combinator (whitespace)

Measurement always reads live geometry; nothing is cached between calls.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from PyQt6 import sip
from PyQt6.QtCore import QPoint
from PyQt6.QtWidgets import QApplication, QScrollArea, QWidget

from core.errors import SelectorSyntaxError, TargetNotFound
from core.placement import Rect, Size

log = logging.getLogger(__name__)

# Widgets carrying this property (and their children) belong to the tour itself.
OVERLAY_PROPERTY = "tourOverlay"

_IDENT = r"[A-Za-z_][\w-]*"
_TYPE_RE = re.compile(_IDENT)
_ID_RE = re.compile(r"#(" + _IDENT + r")")
_ATTR_RE = re.compile(
    r"\[\s*(" + _IDENT + r")\s*(?:=\s*(?:\"([^\"]*)\"|'([^']*)'|([\w-]+))\s*)?\]"
)
_SPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Compound:
    class_name: Optional[str] = None
    object_name: Optional[str] = None
    properties: Tuple[Tuple[str, Optional[str]], ...] = ()

    def matches(self, widget):
        if self.class_name and not widget.inherits(self.class_name):
            return False
        if self.object_name is not None and widget.objectName() != self.object_name:
            return False
        for name, expected in self.properties:
            value = widget.property(name)
            if value is None:
                return False
            if expected is not None and str(value) != expected:
                return False
        return True


@lru_cache(maxsize=128)
def parse_selector(selector):
    text = selector.strip()
    if not text:
        raise SelectorSyntaxError(selector, 0)

    compounds = []
    pos = 0
    while pos < len(text):
        class_name = object_name = None
        properties = []

        m = _TYPE_RE.match(text, pos)
        if m:
            class_name = m.group(0)
            pos = m.end()

        while pos < len(text):
            m = _ID_RE.match(text, pos)
            if m:
                if object_name is not None:
                    raise SelectorSyntaxError(selector, pos)
                object_name = m.group(1)
                pos = m.end()
                continue
            m = _ATTR_RE.match(text, pos)
            if m:
                value = next((g for g in m.group(2, 3, 4) if g is not None), None)
                properties.append((m.group(1), value))
                pos = m.end()
                continue
            break

        if class_name is None and object_name is None and not properties:
            raise SelectorSyntaxError(selector, pos)
        compounds.append(Compound(class_name, object_name, tuple(properties)))

        m = _SPACE_RE.match(text, pos)
        if m:
            pos = m.end()
        elif pos < len(text):
            raise SelectorSyntaxError(selector, pos)

    return tuple(compounds)


def selector_matches(widget, compounds):
    *ancestors, last = compounds
    if not last.matches(widget):
        return False
    parent = widget.parentWidget()
    for compound in reversed(ancestors):
        while parent is not None and not compound.matches(parent):
            parent = parent.parentWidget()
        if parent is None:
            return False
        parent = parent.parentWidget()
    return True


def is_overlay_widget(widget):
    while widget is not None:
        if widget.property(OVERLAY_PROPERTY):
            return True
        widget = widget.parentWidget()
    return False


def scroll_into_view(widget):
    """Center ``widget`` inside every scroll area that contains it."""
    parent = widget.parentWidget()
    while parent is not None:
        if isinstance(parent, QScrollArea) and parent.widget() is not None:
            viewport = parent.viewport()
            xmargin = max(0, (viewport.width() - widget.width()) // 2)
            ymargin = max(0, (viewport.height() - widget.height()) // 2)
            parent.ensureWidgetVisible(widget, xmargin, ymargin)
        parent = parent.parentWidget()


class GeometryResolver:
    def __init__(self, root):
        self.root = root

    def viewport(self):
        return Size(self.root.width(), self.root.height())

    def resolve(self, selector):
        return self.measure(self.locate(selector), selector=selector)

    def locate(self, selector):
        compounds = parse_selector(selector)
        for widget in self._search_order():
            if widget.isVisible() and selector_matches(widget, compounds) \
                    and not is_overlay_widget(widget):
                return widget
        raise TargetNotFound(selector)

    def measure(self, widget, scroll=True, selector=""):
        if widget is None or sip.isdeleted(widget):
            raise TargetNotFound(selector, "widget was deleted")
        if not widget.isVisible():
            raise TargetNotFound(selector or widget.objectName(), "widget is hidden")

        if scroll:
            scroll_into_view(widget)

        top_left = self.root.mapFromGlobal(widget.mapToGlobal(QPoint(0, 0)))
        return Rect(top_left.y(), top_left.x(), widget.width(), widget.height())

    def _search_order(self):
        # host window first, then popups and other visible top-levels
        yield self.root
        yield from self.root.findChildren(QWidget)
        for window in QApplication.topLevelWidgets():
            if window is self.root or not window.isVisible():
                continue
            yield window
            yield from window.findChildren(QWidget)
