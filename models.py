"""Value types shared by the detector, filter and writer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

from config import IGNORED_TYPES, STRING_TYPE, SUPPORTED_TYPES


@dataclass(frozen=True)
class ClipboardRepresentation:
    """One typed payload of a pasteboard item."""
    type: str
    value: bytes = b""


def _decode_text(representation: Optional[ClipboardRepresentation]) -> Optional[str]:
    if representation is None:
        return None
    return representation.value.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class ClipboardEntry:
    """
    All representations one pasteboard item carried at a single moment.
    Type tags are unique; the item's enumeration order is kept.
    """
    representations: Tuple[ClipboardRepresentation, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Optional[bytes]]]) -> "ClipboardEntry":
        seen = set()
        representations = []
        for type_, data in pairs:
            type_ = str(type_)
            if type_ in seen:
                continue
            seen.add(type_)
            # Types that fail to materialize are kept with an empty payload.
            representations.append(ClipboardRepresentation(type_, bytes(data) if data is not None else b""))
        return cls(tuple(representations))

    @property
    def types(self) -> FrozenSet[str]:
        return frozenset(r.type for r in self.representations)

    @property
    def is_empty(self) -> bool:
        return not self.representations

    def get(self, type_: str) -> Optional[ClipboardRepresentation]:
        for representation in self.representations:
            if representation.type == type_:
                return representation
        return None


@dataclass(frozen=True)
class HistoryItem:
    """Accepted, filtered output of one tick. Consumers own persistence."""
    contents: Tuple[ClipboardRepresentation, ...] = ()

    @property
    def types(self) -> Tuple[str, ...]:
        return tuple(c.type for c in self.contents)

    @property
    def is_empty(self) -> bool:
        return not self.contents

    @property
    def text(self) -> Optional[str]:
        for content in self.contents:
            if content.type == STRING_TYPE:
                return _decode_text(content)
        return None


@dataclass(frozen=True)
class ClipboardSettings:
    """User configuration read before every filter and writer call."""
    enabled_types: FrozenSet[str] = SUPPORTED_TYPES
    ignored_types: FrozenSet[str] = field(default_factory=frozenset)
    ignore_events: bool = False
    play_sounds: bool = True

    @property
    def all_ignored_types(self) -> FrozenSet[str]:
        return IGNORED_TYPES | self.ignored_types

    @property
    def disabled_types(self) -> FrozenSet[str]:
        return SUPPORTED_TYPES - self.enabled_types
