import json
import os

from config import SUPPORTED_TYPES
from models import ClipboardSettings


class ClipStateStore:
    DEFAULT_SETTINGS = ClipboardSettings()

    def __init__(self, path, logger=None):
        self.path = path
        self.logger = logger

    def _log(self, msg):
        if self.logger:
            try:
                self.logger.debug(msg)
            except Exception:
                pass

    def load(self):
        defaults = self.DEFAULT_SETTINGS
        try:
            if not os.path.exists(self.path):
                return defaults
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception as e:
            self._log(f"Failed to load state: {e}")
            return defaults
        if not isinstance(data, dict):
            self._log("Ignoring state file with unexpected layout")
            return defaults

        enabled_types = defaults.enabled_types
        enabled = data.get("enabled_types")
        if isinstance(enabled, list) and all(isinstance(t, str) for t in enabled):
            # Unknown types cannot be enabled or disabled
            enabled_types = frozenset(enabled) & SUPPORTED_TYPES

        ignored_types = defaults.ignored_types
        ignored = data.get("ignored_types")
        if isinstance(ignored, list) and all(isinstance(t, str) for t in ignored):
            ignored_types = frozenset(t for t in ignored if t)

        ignore_events = data.get("ignore_events")
        if not isinstance(ignore_events, bool):
            ignore_events = defaults.ignore_events

        play_sounds = data.get("play_sounds")
        if not isinstance(play_sounds, bool):
            play_sounds = defaults.play_sounds

        return ClipboardSettings(
            enabled_types=enabled_types,
            ignored_types=ignored_types,
            ignore_events=ignore_events,
            play_sounds=play_sounds,
        )

    def save(self, settings):
        payload = {
            "enabled_types": sorted(settings.enabled_types),
            "ignored_types": sorted(settings.ignored_types),
            "ignore_events": settings.ignore_events,
            "play_sounds": settings.play_sounds,
        }
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=True)
        except Exception as e:
            self._log(f"Failed to save state: {e}")
