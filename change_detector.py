"""Pasteboard change detection."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from config import TIMER_INTERVAL_SEC
from content_filter import filter_entry
from models import ClipboardEntry, ClipboardSettings, HistoryItem

logger = logging.getLogger(__name__)

OnCapture = Callable[[HistoryItem], None]


class ChangeDetector:
    """
    Polls the pasteboard change count and turns every new pasteboard item
    into a HistoryItem for the registered observers.

    Each tick runs to completion on the main run loop; observers are
    called synchronously, in registration order.
    """

    def __init__(
        self,
        pasteboard,
        settings_provider: Callable[[], ClipboardSettings],
        interval: float = TIMER_INTERVAL_SEC,
    ) -> None:
        self.pasteboard = pasteboard
        self.settings_provider = settings_provider
        self.interval = interval
        self._observers: List[OnCapture] = []
        self._change_count: int = pasteboard.change_count()
        self._timer = None

    @property
    def change_count(self) -> int:
        return self._change_count

    def on_capture(self, callback: OnCapture) -> None:
        self._observers.append(callback)

    def start_listening(self, timer_factory: Optional[Callable] = None) -> None:
        if self._timer is not None:
            return
        if timer_factory is None:
            import rumps
            timer_factory = rumps.Timer
        self._timer = timer_factory(self._on_timer, self.interval)
        self._timer.start()
        logger.info("Listening for pasteboard changes every %.1fs", self.interval)

    def _on_timer(self, _sender) -> None:
        self.check_for_changes()

    def check_for_changes(self) -> List[HistoryItem]:
        change_count = self.pasteboard.change_count()
        if change_count == self._change_count:
            return []

        settings = self.settings_provider()
        if settings.ignore_events:
            logger.debug("Ignoring pasteboard change %d", change_count)
            self._change_count = change_count
            return []

        # Some applications add more than one item per copy, so every
        # item is handled, not only the last one.
        pasteboard_types = frozenset(self.pasteboard.types())
        captured = []
        try:
            for pairs in self.pasteboard.items():
                entry = ClipboardEntry.from_pairs(pairs)
                item = filter_entry(entry, pasteboard_types, settings)
                if item is None:
                    continue
                logger.debug("Captured item with types %s", list(item.types))
                for callback in self._observers:
                    callback(item)
                captured.append(item)
        finally:
            # Advance even if an observer raises.
            self._change_count = change_count
        return captured
