"""Writes history items back onto the pasteboard."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from config import COPY_SOUND_NAME, STRING_TYPE
from models import ClipboardSettings, HistoryItem

logger = logging.getLogger(__name__)


class PasteWriter:
    def __init__(
        self,
        pasteboard,
        settings_provider: Callable[[], ClipboardSettings],
        play_sound: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.pasteboard = pasteboard
        self.settings_provider = settings_provider
        self.play_sound = play_sound

    def copy(self, item: HistoryItem, remove_formatting: bool = False) -> None:
        # Clearing and writing bumps the change count; the detector will
        # capture the written item on its next tick.
        self.pasteboard.clear_contents()
        contents = item.contents

        if remove_formatting:
            string_contents = tuple(c for c in contents if c.type == STRING_TYPE)
            # Without a string representation, keep every format.
            if string_contents:
                contents = string_contents

        for content in contents:
            self.pasteboard.set_data(content.value, content.type)
        logger.debug("Copied item with types %s", [c.type for c in contents])

        if self.settings_provider().play_sounds and self.play_sound is not None:
            self.play_sound(COPY_SOUND_NAME)
