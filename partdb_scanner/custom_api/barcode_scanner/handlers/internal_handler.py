import re
from typing import Callable, List, Match, Pattern, Tuple

from ..base import DialectHandler, ParseOutcome
from ..constants import PREFIX_TYPE_MAP, QR_TYPE_MAP, BarcodeSourceType, TargetType
from ..exceptions import UnknownPrefixError
from ..models.scan_result import LocalBarcodeScanResult

# QR codes on labels contain the URL of the scan route
QR_URL_PATTERN = re.compile(r"https?://.*/scan/(\w+)/(\d+)/?", re.ASCII)
# Current Code39 labels: L0001
PREFIXED_PATTERN = re.compile(r"([A-Z])(\d{4,})", re.ASCII)
# Used during development: L-000001
LEGACY_DASHED_PATTERN = re.compile(r"(\w)-(\d{6,})", re.ASCII)
# Legacy Part-DB storage location labels: $L00336
LEGACY_LOCATION_PATTERN = re.compile(r"\$L(\d{5,})", re.ASCII)
# Legacy Part-DB EAN8 part labels, the optional 8th digit is the checksum
LEGACY_EAN8_PATTERN = re.compile(r"(\d{7})\d?", re.ASCII)


class InternalBarcodeHandler(DialectHandler):
    """Barcodes generated by the label system of this installation."""

    source_type = BarcodeSourceType.INTERNAL

    def __init__(self):
        self.dialects: List[Tuple[Pattern, Callable[[Match], ParseOutcome]]] = [
            (QR_URL_PATTERN, self._from_qr_url),
            (PREFIXED_PATTERN, self._from_prefix),
            (LEGACY_DASHED_PATTERN, self._from_prefix),
            (LEGACY_LOCATION_PATTERN, self._from_legacy_location),
            (LEGACY_EAN8_PATTERN, self._from_legacy_ean8),
        ]

    def parse(self, content: str) -> ParseOutcome:
        for pattern, build in self.dialects:
            match = pattern.fullmatch(content)
            if match:
                return build(match)
        return ParseOutcome.no_match()

    def _result(self, target_type: TargetType, target_id: str) -> ParseOutcome:
        return ParseOutcome.matched(
            LocalBarcodeScanResult(
                target_type=target_type,
                target_id=int(target_id),
                source_type=self.source_type,
            )
        )

    def _from_qr_url(self, match: Match) -> ParseOutcome:
        qr_type = match.group(1).lower()
        if qr_type not in QR_TYPE_MAP:
            return ParseOutcome.invalid(UnknownPrefixError(qr_type))
        return self._result(QR_TYPE_MAP[qr_type], match.group(2))

    def _from_prefix(self, match: Match) -> ParseOutcome:
        prefix = match.group(1)
        if prefix not in PREFIX_TYPE_MAP:
            return ParseOutcome.invalid(UnknownPrefixError(prefix))
        return self._result(PREFIX_TYPE_MAP[prefix], match.group(2))

    def _from_legacy_location(self, match: Match) -> ParseOutcome:
        return self._result(TargetType.STORELOCATION, match.group(1))

    def _from_legacy_ean8(self, match: Match) -> ParseOutcome:
        return self._result(TargetType.PART, match.group(1))
