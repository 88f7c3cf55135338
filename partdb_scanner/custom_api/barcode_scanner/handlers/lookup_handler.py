import logging
from typing import List

from ..base import DialectHandler, ParseOutcome
from ..constants import BarcodeSourceType, TargetType
from ..lookups import PartLookup
from ..models.scan_result import LocalBarcodeScanResult

logger = logging.getLogger(__name__)


class LookupBarcodeHandler(DialectHandler):
    """Matches the whole barcode content against a field stored on a record."""

    target_type: TargetType

    def __init__(self, lookup: PartLookup):
        self.lookup = lookup

    def find_ids(self, content: str) -> List[int]:
        raise NotImplementedError

    def parse(self, content: str) -> ParseOutcome:
        ids = self.find_ids(content)
        if not ids:
            return ParseOutcome.no_match()

        if len(ids) > 1:
            logger.debug(
                "%s barcode %r matches %d records, using the lowest id",
                self.source_type.name,
                content,
                len(ids),
            )

        return ParseOutcome.matched(
            LocalBarcodeScanResult(
                target_type=self.target_type,
                target_id=min(ids),
                source_type=self.source_type,
            )
        )


class UserDefinedBarcodeHandler(LookupBarcodeHandler):
    source_type = BarcodeSourceType.USER_DEFINED
    target_type = TargetType.PART_LOT

    def find_ids(self, content: str) -> List[int]:
        return self.lookup.find_lots_by_user_barcode(content)


class IPNBarcodeHandler(LookupBarcodeHandler):
    source_type = BarcodeSourceType.IPN
    target_type = TargetType.PART

    def find_ids(self, content: str) -> List[int]:
        return self.lookup.find_parts_by_ipn(content)
