# workspace_tab.py
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                             QLineEdit, QPushButton, QListWidget, QTextEdit)
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont


class WorkspaceTab(QWidget):
    request_sent = pyqtSignal(str)

    def __init__(self):
        super().__init__()
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QHBoxLayout()
        title = QLabel("Workspace")
        title.setFont(QFont("Arial", 16, QFont.Weight.Bold))
        header.addWidget(title)
        header.addStretch()

        self.btn_tasks = QPushButton("📋 Tasks")
        self.btn_tasks.setCheckable(True)
        self.btn_tasks.setProperty("data-tour-id", "tasks-tab")
        self.btn_tasks.toggled.connect(self.toggle_tasks)
        header.addWidget(self.btn_tasks)
        layout.addLayout(header)

        # --- CONVERSATION ---
        self.log_window = QTextEdit()
        self.log_window.setReadOnly(True)
        self.log_window.setPlaceholderText("Your conversation will appear here...")
        layout.addWidget(self.log_window, stretch=1)

        self.task_list = QListWidget()
        self.task_list.setVisible(False)
        self.task_list.setMaximumHeight(140)
        layout.addWidget(self.task_list)

        # --- INPUT ROW ---
        input_row = QHBoxLayout()
        self.chat_input = QLineEdit()
        self.chat_input.setPlaceholderText("Ask your assistant...")
        self.chat_input.setProperty("data-tour-id", "chat-input")
        self.chat_input.returnPressed.connect(self.send_request)
        input_row.addWidget(self.chat_input, stretch=1)

        self.btn_send = QPushButton("Send ➤")
        self.btn_send.setProperty("data-tour-id", "send-button")
        self.btn_send.clicked.connect(self.send_request)
        input_row.addWidget(self.btn_send)
        layout.addLayout(input_row)

    def send_request(self):
        text = self.chat_input.text().strip()
        if not text:
            return
        self.log_window.append(f"<b>You:</b> {text}")
        self.task_list.addItem(text)
        self.chat_input.clear()
        self.request_sent.emit(text)

    def toggle_tasks(self, checked):
        self.task_list.setVisible(checked)
        self.btn_tasks.setText("📋 Hide Tasks" if checked else "📋 Tasks")
        if checked:
            self.task_list.setFocus(Qt.FocusReason.OtherFocusReason)
