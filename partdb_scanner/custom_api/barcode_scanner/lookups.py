from typing import List, Protocol


class PartLookup(Protocol):
    """Read-only queries the scanner needs for barcodes stored on records.

    Both methods do an exact match and return the ids of every matching
    record, an empty list when nothing matches.
    """

    def find_lots_by_user_barcode(self, barcode: str) -> List[int]:
        ...

    def find_parts_by_ipn(self, ipn: str) -> List[int]:
        ...
