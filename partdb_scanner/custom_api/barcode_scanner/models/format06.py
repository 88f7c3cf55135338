"""Decoder for ISO/IEC 15434 "Format 06" barcodes.

Electronics distributors (Digikey, Mouser, element14) print these 2D codes on
reels and bags, following the ECIA EIGP 114.2018 labeling specification. The
payload looks like::

    [)> RS 06 GS P596-777A1-ND GS 1PXAF4444 GS Q3 ... RS EOT

where every field starts with a data identifier (``P``, ``1P``, ``10D``, ...)
followed by its value. Digikey omits the ``RS EOT`` trailer.
"""

import re
from typing import Dict, Iterable, Mapping, Optional

from ..constants import (
    DIGIKEY_CODES,
    ELEMENT14_CODES,
    END_OF_TRANSMISSION,
    FORMAT06_FIELD_MAP,
    FORMAT06_HEADER,
    GROUP_SEPARATOR,
    MOUSER_CODES,
    RECORD_SEPARATOR,
)
from .scan_result import VendorBarcodeScanResult

# Leading zeros are discarded: "0014K" and "14K" are the same identifier
FIELD_CODE_PATTERN = re.compile(r"0*([1-9]?\d*[A-Z])", re.ASCII)

_CODE_BY_MEANING = {meaning: code for code, meaning in FORMAT06_FIELD_MAP.items()}


def guess_barcode_vendor(codes: Iterable[str]) -> Optional[str]:
    """Guess the distributor from the data identifiers present in a barcode.

    Experimental: the identifiers are vendor extensions, not a vendor field.
    """
    codes = set(codes)
    if codes.intersection(DIGIKEY_CODES):
        return "digikey"
    if codes.intersection(MOUSER_CODES):
        return "mouser"
    if codes.intersection(ELEMENT14_CODES):
        return "element14"
    return None


def guess_barcode_vendor_from_fields(fields: Mapping[str, str]) -> Optional[str]:
    return guess_barcode_vendor(
        _CODE_BY_MEANING[meaning] for meaning in fields if meaning in _CODE_BY_MEANING
    )


class Format06Barcode:
    def __init__(self, data: Dict[str, str]):
        # data identifier -> raw field value
        self.data = dict(data)

    @staticmethod
    def is_format06_code(content: str) -> bool:
        # Only the header is checked, the fields may still be malformed
        return content.startswith(FORMAT06_HEADER)

    @classmethod
    def parse(cls, content: str) -> "Format06Barcode":
        if not cls.is_format06_code(content):
            raise ValueError("The given input is not a valid format06 code")

        if content.endswith(END_OF_TRANSMISSION):
            content = content[:-1]
        if content.endswith(RECORD_SEPARATOR):
            content = content[:-1]

        # First segment is the format header
        segments = [s for s in content.split(GROUP_SEPARATOR)[1:] if s]
        if len(segments) < 2:
            raise ValueError("Format06 code does not contain enough fields")

        data = {}
        for segment in segments:
            match = FIELD_CODE_PATTERN.match(segment)
            if not match:
                raise ValueError(f"Could not parse field: {segment}")

            code = match.group(1)
            if code not in FORMAT06_FIELD_MAP:
                raise ValueError(f"Unknown data identifier {code} in field: {segment}")

            data[code] = segment[match.end() :]

        return cls(data)

    @property
    def fields(self) -> Dict[str, str]:
        return {FORMAT06_FIELD_MAP[code]: value for code, value in self.data.items()}

    def get(self, code: str) -> Optional[str]:
        return self.data.get(code)

    @property
    def customer_part_number(self) -> Optional[str]:
        return self.get("P")

    @property
    def supplier_part_number(self) -> Optional[str]:
        return self.get("1P")

    @property
    def quantity(self) -> Optional[str]:
        return self.get("Q")

    @property
    def date_code(self) -> Optional[str]:
        return self.get("9D")

    @property
    def lot_code(self) -> Optional[str]:
        return self.get("1T")

    @property
    def country_of_origin(self) -> Optional[str]:
        return self.get("4L")

    @property
    def digikey_part_number(self) -> Optional[str]:
        return self.get("30P")

    @property
    def manufacturer(self) -> Optional[str]:
        return self.get("1V")

    def guess_barcode_vendor(self) -> Optional[str]:
        return guess_barcode_vendor(self.data)

    def to_scan_result(self) -> VendorBarcodeScanResult:
        # vendor stays empty, guessing it is left to the caller
        return VendorBarcodeScanResult(
            manufacturer_part_number=self.supplier_part_number,
            vendor_part_number=self.digikey_part_number,
            date_code=self.date_code,
            quantity=self.quantity,
            manufacturer=self.manufacturer,
            fields=self.fields,
        )
