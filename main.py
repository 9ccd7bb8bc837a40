import argparse
import logging
from dataclasses import replace

import rumps
from AppKit import NSApplicationActivateIgnoringOtherApps, NSWorkspace

import keystroke
from change_detector import ChangeDetector
from config import FILE_URL_TYPE, MAX_MENU_ITEMS, MENU_TITLE_LENGTH, PNG_TYPE, STATE_PATH, TIFF_TYPE
from paste_tool import PasteTool
from paste_writer import PasteWriter
from pasteboard import GeneralPasteboard
from scheduler import MainThreadScheduler
from state_manager import ClipStateStore

__version__ = "0.1.0"


def configure_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


logger = logging.getLogger(__name__)


def menu_title(item):
    text = item.text
    if text is not None:
        line = text.strip().splitlines()[0] if text.strip() else ""
        return line[:MENU_TITLE_LENGTH] + "..." if len(line) > MENU_TITLE_LENGTH else line
    if FILE_URL_TYPE in item.types:
        return "[File]"
    if PNG_TYPE in item.types or TIFF_TYPE in item.types:
        return "[Image]"
    return "[Unknown]"


class ClipWatchApp(rumps.App):
    def __init__(self, debug: bool = False):
        super(ClipWatchApp, self).__init__("ClipWatch", title="📋", quit_button="Quit")
        self.debug = debug
        self.state_store = ClipStateStore(STATE_PATH, logger)
        self.history = []
        self.target_app = None
        self.return_focus_to_previous_app = True
        self.remove_formatting = False

        pasteboard = GeneralPasteboard()
        self.detector = ChangeDetector(pasteboard, self.state_store.load)
        self.detector.on_capture(self._add_to_history)
        self.writer = PasteWriter(pasteboard, self.state_store.load, play_sound=keystroke.play_sound)
        self.paste_tool = PasteTool(
            MainThreadScheduler(),
            accessibility_allowed=keystroke.accessibility_allowed,
            post_keystroke=keystroke.post_paste_keystroke,
            show_alert=keystroke.show_accessibility_alert,
            open_url=keystroke.open_url,
            on_denied=self._disable_return_focus,
        )

        settings = self.state_store.load()
        self.history_menu = rumps.MenuItem("History")
        self.history_menu.add(rumps.MenuItem("(empty)", callback=None))
        self.plain_text_item = rumps.MenuItem("Paste as Plain Text", callback=self.toggle_plain_text)
        self.ignore_item = rumps.MenuItem("Ignore Events", callback=self.toggle_ignore_events)
        self.ignore_item.state = 1 if settings.ignore_events else 0
        self.sound_toggle_item = rumps.MenuItem(
            "Sound: On" if settings.play_sounds else "Sound: Off",
            callback=self.toggle_sound
        )
        self.clear_item = rumps.MenuItem("Clear History", callback=self.clear_history)
        self.version_info = rumps.MenuItem(f"Version: {__version__}", callback=None)

        self.menu = [
            self.history_menu,
            None,  # Separator
            self.plain_text_item,
            self.ignore_item,
            self.sound_toggle_item,
            None,  # Separator
            self.clear_item,
            self.version_info,
        ]

    def _add_to_history(self, item):
        # Items copied back from the menu are captured again; move them to the top.
        if item in self.history:
            self.history.remove(item)
        self.history.insert(0, item)
        del self.history[MAX_MENU_ITEMS:]
        self._rebuild_history_menu()

    def _rebuild_history_menu(self):
        self.history_menu.clear()
        if not self.history:
            self.history_menu.add(rumps.MenuItem("(empty)", callback=None))
            return
        for item in self.history:
            self.history_menu.add(rumps.MenuItem(menu_title(item), callback=self._make_select_callback(item)))

    def _make_select_callback(self, item):
        """Create a callback that copies the item and pastes it into the previous app."""
        def callback(_):
            self.target_app = NSWorkspace.sharedWorkspace().frontmostApplication()
            self.return_focus_to_previous_app = True
            self.writer.copy(item, remove_formatting=self.remove_formatting)
            self.paste_tool.paste()
            if self.return_focus_to_previous_app and self.target_app is not None:
                self.target_app.activateWithOptions_(NSApplicationActivateIgnoringOtherApps)
        return callback

    def _disable_return_focus(self):
        self.return_focus_to_previous_app = False

    def _update_settings(self, **changes):
        settings = replace(self.state_store.load(), **changes)
        self.state_store.save(settings)
        return settings

    def toggle_plain_text(self, sender):
        self.remove_formatting = not self.remove_formatting
        sender.state = 1 if self.remove_formatting else 0

    def toggle_ignore_events(self, sender):
        settings = self._update_settings(ignore_events=not self.state_store.load().ignore_events)
        sender.state = 1 if settings.ignore_events else 0

    def toggle_sound(self, _):
        settings = self._update_settings(play_sounds=not self.state_store.load().play_sounds)
        self.sound_toggle_item.title = "Sound: On" if settings.play_sounds else "Sound: Off"

    def clear_history(self, _):
        self.history = []
        self._rebuild_history_menu()

    def run_app(self):
        if not keystroke.accessibility_allowed():
            logger.warning("Accessibility access not granted; pasting will prompt for it")
        self.detector.start_listening()
        self.run()


def main():
    parser = argparse.ArgumentParser(description="ClipWatch")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    configure_logging(args.debug)
    app = ClipWatchApp(debug=args.debug)
    app.run_app()


if __name__ == "__main__":
    main()
