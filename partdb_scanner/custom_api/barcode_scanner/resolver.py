from typing import Any, Dict, Optional, Tuple

import frappe
from frappe.utils import get_url_to_form

from partdb_scanner.settings import ScannerSettings, get_scanner_settings

from .constants import TargetType
from .exceptions import EntityNotFoundError
from .models.scan_result import (
    BarcodeScanResult,
    LocalBarcodeScanResult,
    VendorBarcodeScanResult,
)


class BarcodeScanResultHandler:
    """Maps scan results to the records they point to and to their desk URLs."""

    def __init__(self, settings: Optional[ScannerSettings] = None):
        self.settings = settings or get_scanner_settings()

    def get_doctype(self, target_type: TargetType) -> str:
        return {
            TargetType.PART: self.settings.part_doctype,
            TargetType.PART_LOT: self.settings.part_lot_doctype,
            TargetType.STORELOCATION: self.settings.storage_location_doctype,
        }[target_type]

    def resolve_entity(
        self, scan_result: BarcodeScanResult
    ) -> Optional[Tuple[str, Any]]:
        """Return ``(doctype, name)`` of the scanned record, or None if it does not exist."""
        if isinstance(scan_result, LocalBarcodeScanResult):
            doctype = self.get_doctype(scan_result.target_type)
            if not frappe.db.exists(doctype, scan_result.target_id):
                return None
            return doctype, scan_result.target_id

        if isinstance(scan_result, VendorBarcodeScanResult):
            part = self._resolve_part_from_vendor(scan_result)
            if part is None:
                return None
            return self.settings.part_doctype, part

        raise TypeError(f"Cannot resolve scan result of type {type(scan_result).__name__}")

    def resolve_part(self, scan_result: BarcodeScanResult) -> Optional[Any]:
        """Return the name of the part behind the scan result.

        Storage locations hold many parts, so they never resolve to one.
        """
        entity = self.resolve_entity(scan_result)
        if entity is None:
            return None

        doctype, name = entity
        if doctype == self.settings.part_doctype:
            return name
        if doctype == self.settings.part_lot_doctype:
            return self._get_part_of_lot(name)
        return None

    def get_info_url(self, scan_result: BarcodeScanResult) -> str:
        entity = self.resolve_entity(scan_result)
        if entity is None:
            raise EntityNotFoundError(
                "No entity could be resolved for the given barcode scan result"
            )

        doctype, name = entity
        if doctype == self.settings.part_lot_doctype:
            part = self._get_part_of_lot(name)
            if part is None:
                raise EntityNotFoundError(f"{doctype} {name} has no part")
            return (
                f"{get_url_to_form(self.settings.part_doctype, part)}?highlight_lot={name}"
            )

        return get_url_to_form(doctype, name)

    def get_info_for_response(self, scan_result: BarcodeScanResult) -> Dict[str, Any]:
        """Info mode data: decoded fields and whatever record could be resolved."""
        entity = self.resolve_entity(scan_result)
        info = {
            "decoded": scan_result.get_decoded_for_info_mode(),
            "entity": None,
            "part": self.resolve_part(scan_result),
            "redirect_url": None,
        }
        if entity is not None:
            info["entity"] = {"doctype": entity[0], "name": entity[1]}
            # A lot without a part has no page to open
            if entity[0] != self.settings.part_lot_doctype or info["part"] is not None:
                info["redirect_url"] = self.get_info_url(scan_result)
        return info

    def _get_part_of_lot(self, lot: Any) -> Optional[Any]:
        return frappe.db.get_value(
            self.settings.part_lot_doctype, lot, self.settings.lot_part_field
        )

    def _resolve_part_from_vendor(
        self, scan_result: VendorBarcodeScanResult
    ) -> Optional[Any]:
        # The distributor's own part number only matches parts created through
        # that distributor's info provider
        if scan_result.vendor_part_number:
            part = self._find_first_part(
                {self.settings.provider_id_field: scan_result.vendor_part_number}
            )
            if part is not None:
                return part

        if not scan_result.manufacturer_part_number:
            return None

        # Several manufacturers may use the same part number, so narrow it down
        # by manufacturer when the barcode carries one
        filters = {self.settings.mpn_field: scan_result.manufacturer_part_number}
        if scan_result.manufacturer:
            part = self._find_first_part(
                {**filters, self.settings.manufacturer_field: scan_result.manufacturer}
            )
            if part is not None:
                return part

        return self._find_first_part(filters)

    def _find_first_part(self, filters: Dict[str, Any]) -> Optional[Any]:
        parts = frappe.get_all(
            self.settings.part_doctype,
            filters=filters,
            pluck="name",
            order_by="name asc",
            limit=1,
        )
        return parts[0] if parts else None
