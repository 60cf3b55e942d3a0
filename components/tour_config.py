# tour_config.py
from core.geometry import GeometryResolver
from core.steps import Side, Step
from core.tour_controller import TourController
from components.tour_overlay import TourOverlay

TOUR_TEXT = {
    "onboarding.welcome.title": "Welcome to Guidepost",
    "onboarding.welcome.content": "This short tour shows you around. Press Esc or Skip at any time.",
    "onboarding.home.title": "Home",
    "onboarding.home.content": "Your dashboard. Come back here whenever you get lost.",
    "onboarding.chat.title": "Ask anything",
    "onboarding.chat.content": "Type a request for your assistant in this box.",
    "onboarding.send.title": "Send it",
    "onboarding.send.content": "Click Send to hand the request over.",
    "onboarding.tasks.title": "Your tasks",
    "onboarding.tasks.content": "Open the task list to see what the assistant is working on.",
    "onboarding.profile.title": "Profile",
    "onboarding.profile.content": "Manage your account and personal preferences here.",
    "onboarding.config.title": "Configuration",
    "onboarding.config.content": "Connectors, notifications and data controls live here.",
}


def translate(key):
    return TOUR_TEXT.get(key, key)


def build_steps():
    return [
        Step("", "onboarding.welcome.title", "onboarding.welcome.content", Side.CENTER),
        Step('[data-tour-id="sidebar-home"]', "onboarding.home.title", "onboarding.home.content", Side.RIGHT),
        Step('[data-tour-id="chat-input"]', "onboarding.chat.title", "onboarding.chat.content", Side.BOTTOM),
        Step('[data-tour-id="send-button"]', "onboarding.send.title", "onboarding.send.content",
             Side.BOTTOM, interactive=True),
        Step('[data-tour-id="tasks-tab"]', "onboarding.tasks.title", "onboarding.tasks.content",
             Side.BOTTOM, interactive=True, settle_delay=300),
        Step('[data-tour-id="sidebar-profile"]', "onboarding.profile.title", "onboarding.profile.content", Side.RIGHT),
        Step('[data-tour-id="sidebar-config"]', "onboarding.config.title", "onboarding.config.content", Side.RIGHT),
    ]


def setup_tour(main_window):
    tour = TourController(GeometryResolver(main_window), parent=main_window)
    main_window.tour_overlay = TourOverlay(tour, main_window, translate)
    return tour
