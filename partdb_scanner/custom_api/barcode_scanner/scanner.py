import logging
from typing import Dict, List, Optional

from .base import DialectHandler, OutcomeKind
from .constants import BarcodeSourceType
from .exceptions import InvalidFormatError
from .lookups import PartLookup
from .models.scan_result import BarcodeScanResult

logger = logging.getLogger(__name__)

# Characters removed from both ends of the scanned content
TRIM_CHARACTERS = " \t\n\r\0\x0b"


class BarcodeScanner:
    """Turns scanned barcode content into a scan result.

    Without a hint every dialect is tried in registration order and the first
    match wins. With a hint only that dialect is tried.
    """

    def __init__(self, lookup: PartLookup):
        self.lookup = lookup
        self.handlers: Dict[BarcodeSourceType, DialectHandler] = {}
        self._register_handlers()

    def _register_handlers(self):
        from .handlers.internal_handler import InternalBarcodeHandler
        from .handlers.lookup_handler import IPNBarcodeHandler, UserDefinedBarcodeHandler
        from .handlers.vendor_handler import VendorBarcodeHandler

        # Order matters, it is the resolution order of unhinted scans
        self.handlers = {
            BarcodeSourceType.INTERNAL: InternalBarcodeHandler(),
            BarcodeSourceType.USER_DEFINED: UserDefinedBarcodeHandler(self.lookup),
            BarcodeSourceType.IPN: IPNBarcodeHandler(self.lookup),
            BarcodeSourceType.VENDOR: VendorBarcodeHandler(),
        }

    @staticmethod
    def normalize(content: str) -> str:
        content = content.strip(TRIM_CHARACTERS)
        # Some scanners output "-" as "ß". "ß" never occurs in a barcode, so this is safe
        return content.replace("ß", "-")

    def scan(
        self, content: str, hint: Optional[BarcodeSourceType] = None
    ) -> BarcodeScanResult:
        content = self.normalize(content)
        if not content:
            raise InvalidFormatError("Empty barcode")

        for handler in self._get_handlers(hint):
            outcome = handler.parse(content)
            if outcome.kind == OutcomeKind.INVALID:
                raise outcome.error
            if outcome.kind == OutcomeKind.MATCHED:
                logger.debug(
                    "Barcode %r matched as %s", content, handler.source_type.name
                )
                return outcome.result

        if hint is not None:
            raise InvalidFormatError(f"Could not parse barcode as {hint.name}")
        raise InvalidFormatError()

    def _get_handlers(self, hint: Optional[BarcodeSourceType]) -> List[DialectHandler]:
        if hint is None:
            return list(self.handlers.values())
        return [self.handlers[hint]]
