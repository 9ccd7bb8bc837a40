"""Decides which pasteboard items become history items."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from config import STRING_TYPE
from models import ClipboardEntry, ClipboardSettings, HistoryItem

logger = logging.getLogger(__name__)


def should_ignore(pasteboard_types: Iterable[str], settings: ClipboardSettings) -> bool:
    """
    Check the pasteboard-level types, which can include types
    that no single item exposes.
    """
    types = set(pasteboard_types)
    if not types.isdisjoint(settings.all_ignored_types):
        return True
    return types.isdisjoint(settings.enabled_types)


def is_empty_string(entry: ClipboardEntry) -> bool:
    representation = entry.get(STRING_TYPE)
    if representation is None:
        return True
    try:
        text = representation.value.decode("utf-8")
    except UnicodeDecodeError:
        return True
    return not text.strip()


def filter_entry(
    entry: ClipboardEntry,
    pasteboard_types: Iterable[str],
    settings: ClipboardSettings,
) -> Optional[HistoryItem]:
    """Return the history item for ``entry``, or None if it is rejected."""
    pasteboard_types = frozenset(pasteboard_types)
    if should_ignore(pasteboard_types, settings):
        logger.debug("Ignoring pasteboard types: %s", sorted(pasteboard_types))
        return None

    # Some applications (e.g. BBEdit) push an extra item with no types
    # alongside the meaningful one.
    if entry.is_empty:
        return None

    if STRING_TYPE in entry.types and is_empty_string(entry):
        logger.debug("Ignoring blank string item")
        return None

    disabled = settings.disabled_types
    contents = tuple(r for r in entry.representations if r.type not in disabled)
    return HistoryItem(contents=contents)
