# config_manager.py
import json
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


class ConfigManager:
    """Host settings persisted as JSON. The tour engine never touches this;
    the host writes ``onboarding_completed`` from the tour's signals."""

    def __init__(self, config_dir=None):
        self.config_dir = str(config_dir or os.path.join(Path.home(), ".config", "Guidepost"))
        self.config_file = os.path.join(self.config_dir, "config.json")

        self.defaults = {
            "onboarding_completed": False,
            "tour_start_delay_ms": 1000,
        }

        self.settings = self.defaults.copy()
        self.load_config()

    def load_config(self):
        if not os.path.exists(self.config_dir):
            try:
                os.makedirs(self.config_dir)
            except OSError as e:
                log.error("Error creating config directory %s: %s", self.config_dir, e)

        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                log.warning("Config file %s unreadable (%s). Using defaults.", self.config_file, e)
                return
            if isinstance(data, dict):
                self.settings.update(data)
            else:
                log.warning("Config file %s is not a JSON object. Using defaults.", self.config_file)
        else:
            self.save_config()

    def save_config(self):
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.settings, f, indent=4)
        except OSError as e:
            log.error("Failed to save config: %s", e)

    def get(self, key):
        return self.settings.get(key, self.defaults.get(key))

    def set(self, key, value):
        self.settings[key] = value
        self.save_config()
