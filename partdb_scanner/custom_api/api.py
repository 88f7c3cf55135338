from typing import Any, Dict, Optional

import frappe
from frappe import _
from frappe.utils import cint, sbool

from partdb_scanner.settings import get_scanner_settings
from partdb_scanner.utils import timer

from .barcode_scanner.constants import QR_TYPE_MAP, BarcodeSourceType
from .barcode_scanner.exceptions import (
    BarcodeError,
    EntityNotFoundError,
    InvalidFormatError,
    UnknownPrefixError,
)
from .barcode_scanner.models.scan_result import LocalBarcodeScanResult
from .barcode_scanner.resolver import BarcodeScanResultHandler
from .barcode_scanner.scanner import BarcodeScanner
from .barcode_scanner.utils.part_lookup import FrappePartLookup


@frappe.whitelist()
@timer
def scan_barcode(
    barcode: str, mode: Optional[str] = None, info_mode: Any = False
) -> Dict[str, Any]:
    """Scan dialog endpoint.

    ``mode`` restricts parsing to one barcode kind (internal, user_defined,
    ipn, vendor). In info mode the decoded content is returned even when no
    record matches it.
    """
    if not barcode:
        return _create_error_response("No barcode given.", "validation")

    try:
        hint = BarcodeSourceType(mode) if mode else None
    except ValueError:
        return _create_error_response(
            "Invalid mode parameter. Must be one of: {0}".format(
                ", ".join(t.value for t in BarcodeSourceType)
            ),
            "validation",
        )

    try:
        settings = get_scanner_settings()
        scanner = BarcodeScanner(FrappePartLookup(settings))
        scan_result = scanner.scan(barcode, hint)
        result_handler = BarcodeScanResultHandler(settings)

        if sbool(info_mode):
            return _create_success_response(
                "Barcode decoded successfully",
                result_handler.get_info_for_response(scan_result),
            )

        return _create_success_response(
            "Barcode scanned successfully",
            {"redirect_url": result_handler.get_info_url(scan_result)},
        )
    except BarcodeError as e:
        return _handle_barcode_error(e)
    except Exception as e:
        return _handle_system_error(e)


@frappe.whitelist()
def scan_qr_code(target: str, target_id: Any) -> Dict[str, Any]:
    """Redirect target of the URLs encoded in label QR codes (/scan/<target>/<id>)."""
    try:
        target_type = QR_TYPE_MAP.get((target or "").lower())
        if target_type is None:
            raise UnknownPrefixError(target)

        scan_result = LocalBarcodeScanResult(
            target_type=target_type,
            target_id=cint(target_id),
            source_type=BarcodeSourceType.INTERNAL,
        )
        redirect_url = BarcodeScanResultHandler().get_info_url(scan_result)
        return _create_success_response(
            "Barcode scanned successfully", {"redirect_url": redirect_url}
        )
    except BarcodeError as e:
        return _handle_barcode_error(e)
    except Exception as e:
        return _handle_system_error(e)


def _create_error_response(message: str, error_type: str) -> Dict[str, Any]:
    return {
        "status": "error",
        "message": _(message),
        "error_type": error_type,
    }


def _create_success_response(message: str, data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "status": "success",
        "message": _(message),
        **data,
    }


def _handle_barcode_error(error: BarcodeError) -> Dict[str, Any]:
    """Map scanner errors to the error types the scan dialog understands"""
    if isinstance(error, UnknownPrefixError):
        return {"status": "error", "message": str(error), "error_type": "unknown_prefix"}
    if isinstance(error, InvalidFormatError):
        return {"status": "error", "message": str(error), "error_type": "invalid_format"}
    if isinstance(error, EntityNotFoundError):
        return {"status": "error", "message": str(error), "error_type": "not_found"}
    return _handle_system_error(error)


def _handle_system_error(error: Exception) -> Dict[str, Any]:
    frappe.log_error(f"Error scanning barcode: {str(error)}", "Barcode Scanner Error")
    return {"status": "error", "message": str(error), "error_type": "system"}
