# Headless Qt for every test; must be set before pytest-qt creates the QApplication.
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QPushButton, QWidget

from core.errors import TargetNotFound
from core.placement import Size


class FakeResolver:
    """Resolver with canned boxes. Each selector gets a real button under
    ``root`` so interaction gates have something to attach to."""

    def __init__(self, root, boxes):
        self.root = root
        self.boxes = dict(boxes)
        self.widgets = {}
        self.calls = []
        for selector, box in self.boxes.items():
            btn = QPushButton(selector, root)
            btn.setObjectName(selector)
            btn.setGeometry(int(box.left), int(box.top), int(box.width), int(box.height))
            btn.show()
            self.widgets[selector] = btn

    def viewport(self):
        return Size(self.root.width(), self.root.height())

    def locate(self, selector):
        self.calls.append(selector)
        if selector not in self.widgets:
            raise TargetNotFound(selector)
        return self.widgets[selector]

    def measure(self, widget, scroll=True, selector=""):
        return self.boxes[widget.objectName()]


@pytest.fixture
def root(qtbot):
    w = QWidget()
    w.resize(800, 600)
    qtbot.addWidget(w)
    w.show()
    qtbot.waitExposed(w)
    return w


@pytest.fixture
def make_resolver(root):
    def factory(boxes=()):
        return FakeResolver(root, dict(boxes))
    return factory
