# coach_mark.py
from PyQt6.QtWidgets import (QWidget, QLabel, QPushButton, QVBoxLayout,
                             QHBoxLayout, QGraphicsDropShadowEffect)
from PyQt6.QtCore import Qt, QCoreApplication, pyqtSignal
from PyQt6.QtGui import QColor, QFont

from core.geometry import OVERLAY_PROPERTY


def translate_key(key):
    return QCoreApplication.translate("onboarding", key)


class CoachMark(QWidget):
    """The tooltip card. Lives as a child of the host window, above the Spotlight."""

    next_clicked = pyqtSignal()
    back_clicked = pyqtSignal()
    skip_clicked = pyqtSignal()

    WIDTH = 320

    def __init__(self, parent=None, translate=translate_key):
        super().__init__(parent)
        self.translate = translate
        self.setProperty(OVERLAY_PROPERTY, True)
        self.setObjectName("CoachMark")
        self.setFixedWidth(self.WIDTH)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        # --- Style ---
        self.setStyleSheet("""
            #CoachMark {
                background-color: #333;
                border-radius: 8px;
                border: 2px solid #555;
            }
            QLabel { font-size: 11pt; color: #fff; border: none; }
            QLabel#waitPrompt { color: #64B5F6; font-size: 9pt; font-weight: bold; }
            QPushButton {
                background-color: #2196F3;
                color: #fff;
                border: none;
                padding: 6px 12px;
                border-radius: 4px;
                font-weight: bold;
            }
            QPushButton:hover { background-color: #1976D2; }
            QPushButton:disabled { background-color: #555; color: #999; }
            QPushButton#backButton, QPushButton#skipButton { background-color: transparent; color: #bbb; }
        """)

        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(15)
        shadow.setColor(QColor(0, 0, 0, 120))
        shadow.setOffset(0, 4)
        self.setGraphicsEffect(shadow)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 12, 18, 14)

        header = QHBoxLayout()
        self.lbl_title = QLabel()
        self.lbl_title.setFont(QFont("Arial", 12, QFont.Weight.Bold))
        self.lbl_title.setWordWrap(True)
        header.addWidget(self.lbl_title, stretch=1)

        self.btn_skip = QPushButton(self.tr("Skip"))
        self.btn_skip.setObjectName("skipButton")
        self.btn_skip.clicked.connect(self.skip_clicked)
        header.addWidget(self.btn_skip, alignment=Qt.AlignmentFlag.AlignTop)
        layout.addLayout(header)

        self.lbl_text = QLabel()
        self.lbl_text.setWordWrap(True)
        layout.addWidget(self.lbl_text)

        self.lbl_wait = QLabel(self.tr("Click the highlighted element to continue"))
        self.lbl_wait.setObjectName("waitPrompt")
        self.lbl_wait.setWordWrap(True)
        layout.addWidget(self.lbl_wait)

        footer = QHBoxLayout()
        self.dots = QLabel()
        self.dots.setTextFormat(Qt.TextFormat.RichText)
        footer.addWidget(self.dots)
        footer.addStretch()

        self.btn_back = QPushButton(self.tr("Back"))
        self.btn_back.setObjectName("backButton")
        self.btn_back.clicked.connect(self.back_clicked)
        footer.addWidget(self.btn_back)

        self.btn_next = QPushButton(self.tr("Next ➡"))
        self.btn_next.setObjectName("nextButton")
        self.btn_next.clicked.connect(self.next_clicked)
        footer.addWidget(self.btn_next)
        layout.addLayout(footer)

        self.hide()

    def show_step(self, view):
        step = view.step
        self.lbl_title.setText(self.translate(step.title))
        self.lbl_text.setText(self.translate(step.content))
        self.dots.setText(progress_dots(view.index, view.total))

        self.lbl_wait.setVisible(view.interactive)
        self.btn_back.setVisible(not view.is_first)
        self.btn_back.setEnabled(not view.interactive)
        self.btn_next.setEnabled(not view.interactive)
        self.btn_next.setText(self.tr("Finish ✅") if view.is_last else self.tr("Next ➡"))

        self.adjustSize()

    def move_to(self, placement):
        self.move(round(placement.tooltip_left), round(placement.tooltip_top))
        self.raise_()
        self.show()


def progress_dots(index, total):
    dots = []
    for i in range(total):
        color = "#2196F3" if i == index else "#666"
        dots.append(f'<span style="color: {color}; font-size: 14pt;">●</span>')
    return "&nbsp;".join(dots)
