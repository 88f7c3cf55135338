import logging

from ..base import DialectHandler, ParseOutcome
from ..constants import BarcodeSourceType
from ..models.format06 import Format06Barcode

logger = logging.getLogger(__name__)


class VendorBarcodeHandler(DialectHandler):
    """Distributor barcodes in ISO/IEC 15434 Format 06."""

    source_type = BarcodeSourceType.VENDOR

    def parse(self, content: str) -> ParseOutcome:
        if not Format06Barcode.is_format06_code(content):
            return ParseOutcome.no_match()

        try:
            barcode = Format06Barcode.parse(content)
        except ValueError as e:
            logger.debug("Rejected Format06 barcode: %s", e)
            return ParseOutcome.no_match()

        return ParseOutcome.matched(barcode.to_scan_result())
