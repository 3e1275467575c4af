"""Pydantic schemas for the Deal Hunter API.

All request/response models are defined here for easy import.
"""

from deal_hunter.schemas.common import ErrorDetail, ErrorResponse
from deal_hunter.schemas.deal import DealResponse
from deal_hunter.schemas.health import HealthCheckResponse
from deal_hunter.schemas.vendor import VendorResponse

__all__ = [
    # Common
    "ErrorDetail",
    "ErrorResponse",
    # Deal
    "DealResponse",
    # Health
    "HealthCheckResponse",
    # Vendor
    "VendorResponse",
]
