import os
import sys
import unittest
from unittest.mock import patch

import frappe

# Add the app path to sys.path for imports
sys.path.append(os.path.join(os.path.dirname(__file__), "..", ".."))

from partdb_scanner.custom_api.api import scan_barcode, scan_qr_code
from partdb_scanner.custom_api.barcode_scanner.constants import (
    BarcodeSourceType,
    TargetType,
)
from partdb_scanner.custom_api.barcode_scanner.exceptions import (
    EntityNotFoundError,
    InvalidFormatError,
    UnknownPrefixError,
)
from partdb_scanner.custom_api.barcode_scanner.models.scan_result import (
    LocalBarcodeScanResult,
)
from partdb_scanner.settings import ScannerSettings

API = "partdb_scanner.custom_api.api"


@patch(f"{API}.get_scanner_settings", return_value=ScannerSettings())
@patch(f"{API}.FrappePartLookup")
@patch(f"{API}.BarcodeScanResultHandler")
class TestScanBarcode(unittest.TestCase):
    """Test cases for the scan_barcode endpoint"""

    def setUp(self):
        # Whitelisted methods read frappe.local.flags, normally set up by the site request
        frappe.local.flags = frappe._dict()
        self.scan_result = LocalBarcodeScanResult(
            TargetType.PART, 123, BarcodeSourceType.INTERNAL
        )

    def test_redirect(self, mock_handler_class, mock_lookup_class, mock_settings):
        mock_handler_class.return_value.get_info_url.return_value = "/app/part/123"

        result = scan_barcode(barcode="P0123")

        self.assertEqual(result["status"], "success")
        self.assertEqual(result["redirect_url"], "/app/part/123")
        mock_handler_class.return_value.get_info_url.assert_called_once_with(
            self.scan_result
        )

    def test_info_mode(self, mock_handler_class, mock_lookup_class, mock_settings):
        info = {
            "decoded": {"Barcode type": "INTERNAL"},
            "entity": None,
            "part": None,
            "redirect_url": None,
        }
        mock_handler_class.return_value.get_info_for_response.return_value = info

        result = scan_barcode(barcode="P0123", info_mode="1")

        self.assertEqual(result["status"], "success")
        self.assertEqual(result["decoded"], {"Barcode type": "INTERNAL"})
        self.assertIsNone(result["entity"])
        mock_handler_class.return_value.get_info_url.assert_not_called()

    @patch(f"{API}.BarcodeScanner")
    def test_mode_is_passed_as_hint(
        self, mock_scanner_class, mock_handler_class, mock_lookup_class, mock_settings
    ):
        mock_scanner_class.return_value.scan.return_value = self.scan_result
        mock_handler_class.return_value.get_info_url.return_value = "/app/part/123"

        scan_barcode(barcode="IPN123", mode="ipn")

        mock_scanner_class.return_value.scan.assert_called_once_with(
            "IPN123", BarcodeSourceType.IPN
        )

    def test_invalid_mode(self, mock_handler_class, mock_lookup_class, mock_settings):
        result = scan_barcode(barcode="P0123", mode="gtin")

        self.assertEqual(result["status"], "error")
        self.assertEqual(result["error_type"], "validation")
        self.assertIn("Invalid mode parameter", result["message"])

    def test_missing_barcode(self, mock_handler_class, mock_lookup_class, mock_settings):
        result = scan_barcode(barcode="")

        self.assertEqual(result["error_type"], "validation")

    def test_unknown_format(self, mock_handler_class, mock_lookup_class, mock_settings):
        lookup = mock_lookup_class.return_value
        lookup.find_lots_by_user_barcode.return_value = []
        lookup.find_parts_by_ipn.return_value = []

        result = scan_barcode(barcode="not a barcode")

        self.assertEqual(result["status"], "error")
        self.assertEqual(result["error_type"], "invalid_format")

    def test_unknown_prefix(self, mock_handler_class, mock_lookup_class, mock_settings):
        result = scan_barcode(barcode="X0099")

        self.assertEqual(result["status"], "error")
        self.assertEqual(result["error_type"], "unknown_prefix")
        self.assertIn("X", result["message"])

    def test_not_found(self, mock_handler_class, mock_lookup_class, mock_settings):
        mock_handler_class.return_value.get_info_url.side_effect = EntityNotFoundError(
            "No entity could be resolved for the given barcode scan result"
        )

        result = scan_barcode(barcode="P0123")

        self.assertEqual(result["error_type"], "not_found")

    @patch(f"{API}.frappe")
    def test_system_error_is_logged(
        self, mock_frappe, mock_handler_class, mock_lookup_class, mock_settings
    ):
        mock_handler_class.return_value.get_info_url.side_effect = RuntimeError("db down")

        result = scan_barcode(barcode="P0123")

        self.assertEqual(result["error_type"], "system")
        self.assertEqual(result["message"], "db down")
        mock_frappe.log_error.assert_called_once()


@patch(f"{API}.BarcodeScanResultHandler")
class TestScanQRCode(unittest.TestCase):
    """Test cases for the QR code redirect endpoint"""

    def setUp(self):
        frappe.local.flags = frappe._dict()

    def test_redirect(self, mock_handler_class):
        mock_handler_class.return_value.get_info_url.return_value = "/app/part-lot/4"

        result = scan_qr_code(target="lot", target_id="4")

        self.assertEqual(result["redirect_url"], "/app/part-lot/4")
        mock_handler_class.return_value.get_info_url.assert_called_once_with(
            LocalBarcodeScanResult(TargetType.PART_LOT, 4, BarcodeSourceType.INTERNAL)
        )

    def test_unknown_target(self, mock_handler_class):
        result = scan_qr_code(target="project", target_id="4")

        self.assertEqual(result["error_type"], "unknown_prefix")
        mock_handler_class.return_value.get_info_url.assert_not_called()

    def test_missing_record(self, mock_handler_class):
        mock_handler_class.return_value.get_info_url.side_effect = EntityNotFoundError()

        result = scan_qr_code(target="part", target_id="999")

        self.assertEqual(result["status"], "error")
        self.assertEqual(result["error_type"], "not_found")


class TestErrorTypes(unittest.TestCase):
    """Test the error hierarchy used by the endpoints"""

    def test_unknown_prefix_is_not_invalid_format(self):
        self.assertFalse(issubclass(UnknownPrefixError, InvalidFormatError))


if __name__ == "__main__":
    unittest.main()
