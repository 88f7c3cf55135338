from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import BarcodeSourceType
from .exceptions import BarcodeError
from .models.scan_result import BarcodeScanResult


class OutcomeKind(Enum):
    NO_MATCH = "no_match"
    MATCHED = "matched"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParseOutcome:
    """Result of offering a barcode to a single dialect handler.

    NO_MATCH lets the scanner try the next dialect, INVALID stops the scan
    with the carried error.
    """

    kind: OutcomeKind
    result: Optional[BarcodeScanResult] = None
    error: Optional[BarcodeError] = None

    @classmethod
    def no_match(cls) -> "ParseOutcome":
        return cls(OutcomeKind.NO_MATCH)

    @classmethod
    def matched(cls, result: BarcodeScanResult) -> "ParseOutcome":
        return cls(OutcomeKind.MATCHED, result=result)

    @classmethod
    def invalid(cls, error: BarcodeError) -> "ParseOutcome":
        return cls(OutcomeKind.INVALID, error=error)


class DialectHandler(ABC):
    source_type: BarcodeSourceType

    @abstractmethod
    def parse(self, content: str) -> ParseOutcome:
        pass
