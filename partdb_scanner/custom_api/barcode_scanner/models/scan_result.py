from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..constants import BarcodeSourceType, TargetType


@dataclass(frozen=True)
class LocalBarcodeScanResult:
    """A barcode pointing to a part, part lot or storage location of this installation."""

    target_type: TargetType
    target_id: int
    source_type: BarcodeSourceType

    def get_decoded_for_info_mode(self) -> Dict[str, Any]:
        return {
            "Barcode type": self.source_type.name,
            "Target type": self.target_type.name,
            "Target ID": self.target_id,
        }


@dataclass(frozen=True)
class VendorBarcodeScanResult:
    """Data carried by a distributor barcode (Format 06).

    ``fields`` holds every decoded field, keyed by its meaning
    (e.g. ``"Lot Code"``), in the order they appear in the barcode.
    """

    vendor: Optional[str] = None
    manufacturer_part_number: Optional[str] = None
    vendor_part_number: Optional[str] = None
    date_code: Optional[str] = None
    quantity: Optional[str] = None
    manufacturer: Optional[str] = None
    fields: Mapping[str, str] = field(default_factory=dict, hash=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get_decoded_for_info_mode(self) -> Dict[str, Any]:
        from .format06 import guess_barcode_vendor_from_fields

        decoded = {
            "Barcode type": "Format 06",
            "Guessed vendor from barcode": guess_barcode_vendor_from_fields(
                self.fields
            )
            or "Unknown",
        }
        if self.vendor:
            decoded["Vendor"] = self.vendor
        decoded.update(self.fields)
        return decoded


BarcodeScanResult = Union[LocalBarcodeScanResult, VendorBarcodeScanResult]
