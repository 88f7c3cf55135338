from typing import Optional


class BarcodeError(Exception):
    """Base exception for barcode scanning"""

    pass


class InvalidFormatError(BarcodeError):
    """Raised when the input matches no known barcode format"""

    def __init__(self, message: str = "Unknown barcode format"):
        super().__init__(message)


class UnknownPrefixError(BarcodeError):
    """Raised when a prefixed barcode uses a type prefix that is not supported"""

    def __init__(self, prefix: str, message: Optional[str] = None):
        self.prefix = prefix
        super().__init__(message or f"Unknown prefix {prefix}")


class EntityNotFoundError(BarcodeError):
    """Raised when a scan result does not point to an existing record"""

    pass
