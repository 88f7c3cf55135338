from typing import List, Optional

import frappe
from frappe.utils import cint

from partdb_scanner.settings import ScannerSettings, get_scanner_settings


class FrappePartLookup:
    def __init__(self, settings: Optional[ScannerSettings] = None):
        self.settings = settings or get_scanner_settings()

    def find_lots_by_user_barcode(self, barcode: str) -> List[int]:
        return self._find_ids(
            self.settings.part_lot_doctype, self.settings.user_barcode_field, barcode
        )

    def find_parts_by_ipn(self, ipn: str) -> List[int]:
        return self._find_ids(self.settings.part_doctype, self.settings.ipn_field, ipn)

    def _find_ids(self, doctype: str, fieldname: str, value: str) -> List[int]:
        # Part-DB records use autoincrement naming, so names are the numeric ids
        names = frappe.get_all(
            doctype,
            filters={fieldname: value},
            pluck="name",
            order_by="name asc",
        )
        return [cint(name) for name in names]
