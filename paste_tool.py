from __future__ import annotations

import logging
from typing import Callable, Optional

from config import ACCESSIBILITY_URL

logger = logging.getLogger(__name__)


class PasteTool:
    """
    Simulates Cmd+V in the active application once Accessibility access
    is granted. Without it, the user is asked to grant access instead.
    """

    def __init__(
        self,
        scheduler,
        accessibility_allowed: Callable[[], bool],
        post_keystroke: Callable[[], None],
        show_alert: Callable[[], bool],
        open_url: Callable[[str], None],
        on_denied: Optional[Callable[[], None]] = None,
    ) -> None:
        self.state = "UNCHECKED"
        self.scheduler = scheduler
        self.accessibility_allowed = accessibility_allowed
        self.post_keystroke = post_keystroke
        self.show_alert = show_alert
        self.open_url = open_url
        self.on_denied = on_denied

    def paste(self) -> bool:
        if not self.accessibility_allowed():
            self.state = "DENIED"
            logger.warning("Accessibility access not granted; cannot paste")
            if self.on_denied is not None:
                self.on_denied()
            # Show the alert async to allow the menu to close.
            self.scheduler.call_soon(self._show_accessibility_window)
            return False

        self.state = "GRANTED"
        self.scheduler.call_soon(self.post_keystroke)
        return True

    def _show_accessibility_window(self) -> None:
        if self.show_alert():
            logger.info("Opening Accessibility settings")
            self.open_url(ACCESSIBILITY_URL)
