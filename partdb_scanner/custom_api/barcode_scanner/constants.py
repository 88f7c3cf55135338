from enum import Enum
from types import MappingProxyType


class TargetType(Enum):
    PART = "part"
    PART_LOT = "part_lot"
    STORELOCATION = "storelocation"


class BarcodeSourceType(Enum):
    INTERNAL = "internal"
    IPN = "ipn"
    USER_DEFINED = "user_defined"
    VENDOR = "vendor"


# Letter prefixes used by the Code39 label barcodes (L0001, P-000123, ...)
PREFIX_TYPE_MAP = MappingProxyType(
    {
        "L": TargetType.PART_LOT,
        "P": TargetType.PART,
        "S": TargetType.STORELOCATION,
    }
)

# Path segment of the QR code URLs (https://host/scan/<type>/<id>)
QR_TYPE_MAP = MappingProxyType(
    {
        "lot": TargetType.PART_LOT,
        "part": TargetType.PART,
        "location": TargetType.STORELOCATION,
    }
)

FORMAT06_HEADER = "[)>\x1e06\x1d"
RECORD_SEPARATOR = "\x1e"
GROUP_SEPARATOR = "\x1d"
END_OF_TRANSMISSION = "\x04"

# EIGP 114.2018 data identifiers, plus the Digikey and Mouser extensions
FORMAT06_FIELD_MAP = MappingProxyType(
    {
        "6D": "Ship Date",
        "P": "Customer Part Number",
        "1P": "Supplier Part Number",
        "Q": "Quantity",
        "K": "Purchase Order Part Number",
        "4K": "Purchase Order Line",
        "9D": "Date Code",
        "10D": "Alternative Date Code",
        "1T": "Lot Code",
        "4L": "Country of Origin",
        "3S": "Package ID 1",
        "4S": "Package ID 2",
        "5S": "Package ID 3",
        "11K": "Packing List Number",
        "S": "Serial Number",
        "33P": "BIN Code",
        "13Q": "Package Count",
        "2P": "Revision Number",
        "30P": "Digikey Part Number",
        "1K": "Digikey Sales Order Number",
        "10K": "Digikey Invoice Number",
        "11Z": "Digikey Label Type",
        "12Z": "Digikey Part ID",
        "13Z": "Digikey NA",
        "20Z": "Digikey Padding",
        "14K": "Mouser Position in Order",
        "1V": "Manufacturer",
    }
)

DIGIKEY_CODES = ("11Z", "12Z", "13Z", "20Z")
MOUSER_CODES = ("14K", "1V")
ELEMENT14_CODES = ("3P",)
