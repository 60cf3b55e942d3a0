# info_tabs.py
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QLabel, QPushButton,
                             QTextEdit, QHBoxLayout)
from PyQt6.QtGui import QFont


class HelpTab(QWidget):
    def __init__(self, main_app_ref):
        super().__init__()
        self.main_app = main_app_ref

        layout = QVBoxLayout()
        self.setLayout(layout)

        # --- HEADER ---
        header_layout = QHBoxLayout()
        title = QLabel("📚 Guidepost Help Center")
        title.setFont(QFont("Arial", 16, QFont.Weight.Bold))

        # Button to re-launch the Active Tour
        self.btn_replay = QPushButton("🏃 Start Interactive Tour")
        self.btn_replay.setObjectName("replayTourButton")
        self.btn_replay.setFixedWidth(200)
        self.btn_replay.clicked.connect(self.main_app.launch_active_tour)

        header_layout.addWidget(title)
        header_layout.addStretch()
        header_layout.addWidget(self.btn_replay)
        layout.addLayout(header_layout)

        # --- HELP CONTENT ---
        content = QTextEdit()
        content.setReadOnly(True)
        content.setStyleSheet("font-size: 11pt;")
        content.setHtml("""
        <h3 style="color: #4CAF50;">Asking for help</h3>
        <p>Type a request in the <b>Workspace</b> box and press <b>Send</b>.</p>

        <h3 style="color: #2196F3;">Following up</h3>
        <p>The <b>Tasks</b> button lists everything that is in progress.</p>

        <h3 style="color: #FF9800;">Lost?</h3>
        <p>Replay the tour with the button above. Press <b>Esc</b> to leave it at any time.</p>
        """)
        layout.addWidget(content)
        layout.addStretch()
