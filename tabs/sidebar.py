# sidebar.py
from PyQt6.QtWidgets import QFrame, QVBoxLayout, QPushButton, QLabel
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont


class Sidebar(QFrame):
    ITEMS = [
        ("sidebar-home", "🏠 Home"),
        ("sidebar-profile", "👤 Profile"),
        ("sidebar-config", "⚙️ Configuration"),
    ]

    def __init__(self):
        super().__init__()
        self.setObjectName("sidebar")
        self.setFixedWidth(190)
        self.setStyleSheet("""
            #sidebar { background-color: #263238; }
            QLabel { color: #fff; }
            QPushButton {
                color: #eceff1; background: transparent; border: none;
                text-align: left; padding: 10px; font-size: 11pt;
            }
            QPushButton:hover { background-color: #37474f; }
        """)

        layout = QVBoxLayout(self)
        brand = QLabel("Guidepost")
        brand.setFont(QFont("Arial", 14, QFont.Weight.Bold))
        brand.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(brand)
        layout.addSpacing(12)

        self.buttons = {}
        for tour_id, label in self.ITEMS:
            btn = QPushButton(label)
            # addressed by tour steps as [data-tour-id="..."]
            btn.setProperty("data-tour-id", tour_id)
            layout.addWidget(btn)
            self.buttons[tour_id] = btn

        layout.addStretch()
