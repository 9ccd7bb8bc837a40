import sys
from collections import deque
from pathlib import Path

import pytest

# Make the flat modules importable without installing
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from config import PNG_TYPE, STRING_TYPE  # noqa: E402
from models import ClipboardSettings  # noqa: E402


class FakePasteboard:
    """In-memory pasteboard with NSPasteboard's change count semantics."""

    def __init__(self):
        self.count = 0
        self.pasteboard_items = []
        self.extra_types = []

    def change_count(self):
        return self.count

    def types(self):
        seen = []
        for pairs in self.pasteboard_items:
            for t, _ in pairs:
                if t not in seen:
                    seen.append(t)
        return seen + [t for t in self.extra_types if t not in seen]

    def items(self):
        return [list(pairs) for pairs in self.pasteboard_items]

    def clear_contents(self):
        self.pasteboard_items = []
        self.extra_types = []
        self.count += 1

    def set_data(self, data, type_):
        if not self.pasteboard_items:
            self.pasteboard_items.append([])
        self.pasteboard_items[0].append((type_, data))

    # Simulates another application copying.
    def user_copy(self, *items, extra_types=()):
        self.pasteboard_items = [list(pairs) for pairs in items]
        self.extra_types = list(extra_types)
        self.count += 1


class DeferredQueue:
    """Single-threaded stand-in for the main run loop, drained explicitly."""

    def __init__(self):
        self._pending = deque()

    def call_soon(self, func, *args):
        self._pending.append((func, args))

    def run_pending(self):
        # Tasks scheduled while draining run in the same pass.
        while self._pending:
            func, args = self._pending.popleft()
            func(*args)


class SettingsBox:
    """Mutable holder so tests can change settings between ticks."""

    def __init__(self, settings=None):
        self.settings = settings or ClipboardSettings()
        self.reads = 0

    def __call__(self):
        self.reads += 1
        return self.settings


@pytest.fixture
def pasteboard():
    return FakePasteboard()


@pytest.fixture
def settings():
    return SettingsBox()


@pytest.fixture
def queue():
    return DeferredQueue()


@pytest.fixture
def text_pair():
    return (STRING_TYPE, b"hello")


@pytest.fixture
def png_pair():
    return (PNG_TYPE, b"\x89PNG\r\n")
