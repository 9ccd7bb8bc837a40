"""Configuration for ClipWatch."""

import os
from pathlib import Path

# Polling
TIMER_INTERVAL_SEC = 1.0

# Pasteboard types (UTIs)
STRING_TYPE = "public.utf8-plain-text"
FILE_URL_TYPE = "public.file-url"
PNG_TYPE = "public.png"
TIFF_TYPE = "public.tiff"

SUPPORTED_TYPES = frozenset({FILE_URL_TYPE, PNG_TYPE, STRING_TYPE, TIFF_TYPE})

# See http://nspasteboard.org for more details.
IGNORED_TYPES = frozenset({
    "org.nspasteboard.TransientType",
    "org.nspasteboard.ConcealedType",
    "org.nspasteboard.AutoGeneratedType",
})

# Paste
ACCESSIBILITY_URL = "x-apple.systempreferences:com.apple.preference.security?Privacy_Accessibility"
COPY_SOUND_NAME = "Pop"

try:
    from Carbon.HIToolbox import kVK_ANSI_V
except Exception:
    # macOS virtual keycode for "V" (US keyboard layout).
    kVK_ANSI_V = 0x09

# Physical key position, not layout-aware: on Dvorak and similar layouts
# this posts the key labelled differently (e.g. Cmd+K).
KEY_CODE_V = kVK_ANSI_V

# History menu
MAX_MENU_ITEMS = 20
MENU_TITLE_LENGTH = 50

STATE_PATH = os.environ.get("CLIPWATCH_STATE_PATH") or str(
    Path.home() / "Library" / "Application Support" / "ClipWatch" / "clipwatch_state.json"
)
