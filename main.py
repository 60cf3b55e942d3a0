# main.py
import sys
import logging
from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import (QApplication, QMainWindow, QTabWidget, QWidget, QHBoxLayout)

# --- IMPORT MODULES ---
from core.config_manager import ConfigManager
from tabs.sidebar import Sidebar
from tabs.workspace_tab import WorkspaceTab
from tabs.info_tabs import HelpTab
from components.tour_config import setup_tour, build_steps

log = logging.getLogger(__name__)


class GuidepostApp(QMainWindow):
    def __init__(self, cfg=None):
        super().__init__()
        self.setWindowTitle("Guidepost")
        self.resize(1000, 700)

        self.cfg = cfg or ConfigManager()

        central = QWidget()
        row = QHBoxLayout(central)
        row.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(central)

        self.sidebar = Sidebar()
        row.addWidget(self.sidebar)

        self.tabs = QTabWidget()
        self.tabs.setStyleSheet("""
            QTabBar::tab { height: 34px; padding: 8px; font-size: 10pt; }
            QTabBar::tab:selected { font-weight: bold; }
        """)
        row.addWidget(self.tabs, stretch=1)

        # Build Tabs
        self.workspace_tab = WorkspaceTab()
        self.help_tab = HelpTab(self)
        self.tabs.addTab(self.workspace_tab, "💬 Workspace")
        self.tabs.addTab(self.help_tab, "❓ Help")

        # --- TOUR ---
        self.tour = setup_tour(self)
        self.tour.completed.connect(self.on_tour_finished)
        self.tour.cancelled.connect(self.on_tour_finished)

        if not self.cfg.get("onboarding_completed"):
            QTimer.singleShot(self.cfg.get("tour_start_delay_ms"), self.launch_active_tour)

    def launch_active_tour(self):
        # tour targets live on the workspace page
        self.tabs.setCurrentWidget(self.workspace_tab)
        self.tour.open(build_steps())

    def on_tour_finished(self):
        log.info("Onboarding finished; not showing the tour on next start")
        self.cfg.set("onboarding_completed", True)


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    window = GuidepostApp()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
