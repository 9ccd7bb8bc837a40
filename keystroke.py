"""macOS hooks for paste synthesis, alerts and sounds."""

from __future__ import annotations

import logging

import rumps
from AppKit import NSSound, NSWorkspace
from ApplicationServices import AXIsProcessTrustedWithOptions
from Foundation import NSURL
from Quartz import (
    CGEventCreateKeyboardEvent,
    CGEventPost,
    CGEventSetFlags,
    CGEventSourceCreate,
    CGEventSourceSetLocalEventsFilterDuringSuppressionState,
    kCGAnnotatedSessionEventTap,
    kCGEventFilterMaskPermitLocalKeyboardEvents,
    kCGEventFilterMaskPermitLocalMouseEvents,
    kCGEventFilterMaskPermitSystemDefinedEvents,
    kCGEventFlagMaskCommand,
    kCGEventSourceStateCombinedSessionState,
    kCGEventSuppressionStateSuppressionInterval,
)

from config import KEY_CODE_V

logger = logging.getLogger(__name__)

PERMIT_ALL_EVENTS = (
    kCGEventFilterMaskPermitLocalMouseEvents
    | kCGEventFilterMaskPermitLocalKeyboardEvents
    | kCGEventFilterMaskPermitSystemDefinedEvents
)


def accessibility_allowed() -> bool:
    return bool(AXIsProcessTrustedWithOptions(None))


def post_paste_keystroke() -> None:
    # Post Cmd+V keydown/keyup to the active application.
    source = CGEventSourceCreate(kCGEventSourceStateCombinedSessionState)
    # Disable local keyboard events while pasting
    CGEventSourceSetLocalEventsFilterDuringSuppressionState(
        source,
        kCGEventFilterMaskPermitLocalMouseEvents | kCGEventFilterMaskPermitSystemDefinedEvents,
        kCGEventSuppressionStateSuppressionInterval,
    )
    try:
        event_down = CGEventCreateKeyboardEvent(source, KEY_CODE_V, True)
        CGEventSetFlags(event_down, kCGEventFlagMaskCommand)
        event_up = CGEventCreateKeyboardEvent(source, KEY_CODE_V, False)
        CGEventSetFlags(event_up, kCGEventFlagMaskCommand)

        CGEventPost(kCGAnnotatedSessionEventTap, event_down)
        CGEventPost(kCGAnnotatedSessionEventTap, event_up)
    finally:
        CGEventSourceSetLocalEventsFilterDuringSuppressionState(
            source,
            PERMIT_ALL_EVENTS,
            kCGEventSuppressionStateSuppressionInterval,
        )


def show_accessibility_alert() -> bool:
    """Block until the user answers; True if they chose to open System Settings."""
    response = rumps.alert(
        title="Accessibility Access Required",
        message=(
            "ClipWatch needs Accessibility access to paste into other applications. "
            "Grant it in System Settings → Privacy & Security → Accessibility."
        ),
        ok="Open System Settings",
        cancel="Deny",
    )
    return response == 1


def open_url(url: str) -> None:
    NSWorkspace.sharedWorkspace().openURL_(NSURL.URLWithString_(url))


def play_sound(name: str) -> None:
    try:
        sound = NSSound.soundNamed_(name)
        if sound:
            sound.play()
    except Exception as e:
        logger.debug(f"Failed to play sound {name}: {e}")
