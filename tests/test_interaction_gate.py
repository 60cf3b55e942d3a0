import pytest
from PyQt6 import sip
from PyQt6.QtCore import QObject, Qt
from PyQt6.QtWidgets import QFrame, QLabel, QPushButton

from core.interaction_gate import (EscapeWatcher, InteractionGate, ResizeWatcher,
                                   StepSubscription)


def test_gate_fires_once_and_blocks_the_click(root, qtbot):
    button = QPushButton("Send", root)
    button.setGeometry(10, 10, 80, 30)
    button.show()
    clicks, triggered = [], []
    button.clicked.connect(lambda: clicks.append(True))

    with InteractionGate(button, lambda: triggered.append(True)) as gate:
        qtbot.mouseClick(button, Qt.MouseButton.LeftButton)
        assert triggered == [True]
        assert clicks == []
        assert not gate.attached

        # one-shot: the next click goes through to the button
        qtbot.mouseClick(button, Qt.MouseButton.LeftButton)
        assert triggered == [True]
        assert clicks == [True]


def test_gate_ignores_right_button(root, qtbot):
    button = QPushButton("Send", root)
    button.setGeometry(10, 10, 80, 30)
    button.show()
    triggered = []

    with InteractionGate(button, lambda: triggered.append(True)) as gate:
        qtbot.mouseClick(button, Qt.MouseButton.RightButton)
        assert triggered == []
        assert gate.attached


def test_gate_covers_child_widgets(root, qtbot):
    card = QFrame(root)
    card.setGeometry(0, 0, 200, 100)
    label = QLabel("inside", card)
    label.setGeometry(10, 10, 100, 30)
    card.show()
    label.show()
    triggered = []

    with InteractionGate(card, lambda: triggered.append(True)):
        qtbot.mouseClick(label, Qt.MouseButton.LeftButton)
    assert triggered == [True]


def test_gate_detaches_on_exit_without_firing(root, qtbot):
    button = QPushButton("Send", root)
    button.setGeometry(10, 10, 80, 30)
    button.show()
    clicks, triggered = [], []
    button.clicked.connect(lambda: clicks.append(True))

    with InteractionGate(button, lambda: triggered.append(True)):
        pass
    qtbot.mouseClick(button, Qt.MouseButton.LeftButton)

    assert triggered == []
    assert clicks == [True]


def test_gate_consumes_keyboard_activation_of_a_button(root, qtbot):
    button = QPushButton("Send", root)
    button.setGeometry(10, 10, 80, 30)
    button.show()
    clicks, triggered = [], []
    button.clicked.connect(lambda: clicks.append(True))

    with InteractionGate(button, lambda: triggered.append(True)) as gate:
        qtbot.keyClick(button, Qt.Key.Key_A)
        assert triggered == []
        qtbot.keyClick(button, Qt.Key.Key_Space)
        assert triggered == [True]
        assert not gate.attached
    assert clicks == []


@pytest.mark.parametrize("key", [Qt.Key.Key_Return, Qt.Key.Key_Enter])
def test_gate_treats_enter_on_a_button_as_activation(root, qtbot, key):
    button = QPushButton("Send", root)
    button.show()
    triggered = []

    with InteractionGate(button, lambda: triggered.append(True)):
        qtbot.keyClick(button, key)
    assert triggered == [True]


def test_gate_ignores_keys_on_non_buttons(root, qtbot):
    card = QFrame(root)
    label = QLabel("inside", card)
    card.show()
    triggered = []

    with InteractionGate(card, lambda: triggered.append(True)) as gate:
        qtbot.keyClick(label, Qt.Key.Key_Space)
        assert gate.attached
    assert triggered == []


def test_hook_owned_by_a_deleted_object_stops_filtering(root, qtbot):
    owner = QObject()
    presses = []
    watcher = EscapeWatcher(lambda: presses.append(True), parent=owner)
    watcher.__enter__()

    sip.delete(owner)
    assert sip.isdeleted(watcher)
    qtbot.keyClick(root, Qt.Key.Key_Escape)
    assert presses == []

    # leaving the scope afterwards is harmless
    watcher.__exit__(None, None, None)


def test_escape_watcher_only_reacts_to_escape(root, qtbot):
    presses = []
    with EscapeWatcher(lambda: presses.append(True)):
        qtbot.keyClick(root, Qt.Key.Key_A)
        qtbot.keyClick(root, Qt.Key.Key_Escape)
    qtbot.keyClick(root, Qt.Key.Key_Escape)
    assert presses == [True]


def test_resize_watcher(root, qtbot):
    resizes = []
    with ResizeWatcher(root, lambda: resizes.append(root.size())):
        root.resize(640, 480)
        qtbot.waitUntil(lambda: len(resizes) > 0, timeout=1000)
    seen = len(resizes)
    root.resize(500, 400)
    qtbot.wait(50)
    assert len(resizes) == seen


def test_step_subscription_replace_releases_previous_scope():
    released = []
    sub = StepSubscription()
    sub.callback(released.append, "first")

    scope = sub.replace()
    assert released == ["first"]

    scope.callback(released.append, "second")
    sub.callback(released.append, "third")
    sub.release()
    assert released == ["first", "third", "second"]

    sub.release()
    assert released == ["first", "third", "second"]
