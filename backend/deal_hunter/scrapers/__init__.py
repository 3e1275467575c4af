"""Vendor aggregation pipeline.

This package provides:
- Data structures for vendors, selector sets and deals
- The fixed vendor registry
- Concurrent fetching, selector-driven extraction and field normalization
- The aggregator that merges and sorts the per-vendor results
"""

from .base import DealItem, SelectorSet, VendorSpec
from .vendors import (
    VENDORS,
    build_vendor_url,
    get_vendor_by_name,
    list_vendors,
    validate_registry,
)
from .extractor import extract
from .fetcher import ConcurrentFetcher, VendorResult
from .aggregator import aggregate

__all__ = [
    # Data structures
    "DealItem",
    "SelectorSet",
    "VendorSpec",
    # Registry
    "VENDORS",
    "build_vendor_url",
    "get_vendor_by_name",
    "list_vendors",
    "validate_registry",
    # Pipeline
    "extract",
    "ConcurrentFetcher",
    "VendorResult",
    "aggregate",
]
