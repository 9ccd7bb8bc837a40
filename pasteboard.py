from typing import List, Optional, Tuple

from AppKit import NSPasteboard


class GeneralPasteboard:
    """
    Thin wrapper around NSPasteboard.generalPasteboard().
    Payloads are handed out as (type, raw_bytes) pairs.
    """

    def __init__(self, pasteboard=None):
        self.pb = pasteboard or NSPasteboard.generalPasteboard()

    def change_count(self) -> int:
        return int(self.pb.changeCount())

    def types(self) -> List[str]:
        # Reading types on the pasteboard gives every available type,
        # even the ones no item carries.
        return [str(t) for t in (self.pb.types() or [])]

    def items(self) -> List[List[Tuple[str, Optional[bytes]]]]:
        items = []
        for item in self.pb.pasteboardItems() or []:
            pairs = []
            for t in item.types() or []:
                data = item.dataForType_(t)
                # Lazy/promised types may not materialize
                pairs.append((str(t), bytes(data) if data is not None else None))
            items.append(pairs)
        return items

    def clear_contents(self) -> None:
        self.pb.clearContents()

    def set_data(self, data: bytes, type_: str) -> None:
        self.pb.setData_forType_(data, type_)
