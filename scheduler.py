"""Deferred execution on the main run loop."""

from __future__ import annotations

from typing import Callable


class MainThreadScheduler:
    """Runs callables on the Cocoa main thread after the current callback returns."""

    def call_soon(self, func: Callable, *args) -> None:
        from PyObjCTools.AppHelper import callAfter
        callAfter(func, *args)
