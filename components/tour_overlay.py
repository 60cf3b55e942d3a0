# tour_overlay.py
from PyQt6.QtCore import QObject

from components.coach_mark import CoachMark, translate_key
from components.spotlight import Spotlight
from core.placement import Size


class TourOverlay(QObject):
    """Paints whatever the controller says. Never writes tour state except
    through the controller's navigation methods."""

    def __init__(self, controller, host, translate=translate_key):
        super().__init__(host)
        self.controller = controller
        self.spotlight = Spotlight(host)
        self.coach = CoachMark(host, translate)

        self.coach.next_clicked.connect(controller.advance)
        self.coach.back_clicked.connect(controller.retreat)
        self.coach.skip_clicked.connect(controller.request_close)

        controller.step_changed.connect(self._on_step_changed)
        controller.layout_changed.connect(self._on_layout_changed)
        controller.closed.connect(self._on_closed)

    def _on_step_changed(self, index):
        view = self.controller.view()
        if view is None:
            return
        self.coach.show_step(view)
        # placement needs the card's real size once the new text is laid out
        self.controller.set_tooltip_size(Size(self.coach.width(), self.coach.height()))

    def _on_layout_changed(self):
        view = self.controller.view()
        if view is None:
            return
        self.spotlight.set_view(view, self.controller.tooltip_size)
        self.coach.move_to(view.placement)

    def _on_closed(self):
        self.spotlight.clear()
        self.coach.hide()
