from dataclasses import dataclass, fields

import frappe


@dataclass(frozen=True)
class ScannerSettings:
    """Doctypes and fields the scanner queries.

    Every attribute can be overridden in site_config.json with the
    ``partdb_`` prefixed key, e.g. ``partdb_part_lot_doctype``.
    """

    part_doctype: str = "Part"
    part_lot_doctype: str = "Part Lot"
    storage_location_doctype: str = "Storage Location"
    user_barcode_field: str = "user_barcode"
    ipn_field: str = "ipn"
    lot_part_field: str = "part"
    provider_id_field: str = "provider_id"
    mpn_field: str = "manufacturer_product_number"
    manufacturer_field: str = "manufacturer"


def get_scanner_settings() -> ScannerSettings:
    config = frappe.conf or {}
    overrides = {
        f.name: config.get(f"partdb_{f.name}")
        for f in fields(ScannerSettings)
        if config.get(f"partdb_{f.name}")
    }
    return ScannerSettings(**overrides)
