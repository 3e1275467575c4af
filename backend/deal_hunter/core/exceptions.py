"""Custom exception classes for the application."""

from typing import Optional


class DealHunterException(Exception):
    """Base exception for all Deal Hunter errors."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class VendorConfigError(DealHunterException):
    """Raised when the vendor registry is malformed."""


class SelectorConfigError(VendorConfigError):
    """Raised when a configured selector expression cannot be compiled."""

    def __init__(self, expression: str, message: str):
        self.expression = expression
        super().__init__(f"Invalid selector {expression!r}: {message}")


class VendorFetchError(DealHunterException):
    """Raised when a vendor page cannot be retrieved."""

    def __init__(self, vendor: str, message: str, status_code: Optional[int] = None):
        self.vendor = vendor
        self.status_code = status_code
        super().__init__(f"Fetch error for {vendor}: {message}")


class SerializationError(DealHunterException):
    """Raised when the aggregated deals cannot be rendered."""
