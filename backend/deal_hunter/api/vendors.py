"""Vendor listing endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException

from deal_hunter.scrapers.base import VendorSpec
from deal_hunter.scrapers.vendors import build_vendor_url, get_vendor_by_name, list_vendors
from deal_hunter.schemas import VendorResponse

router = APIRouter()


def _to_response(vendor: VendorSpec) -> VendorResponse:
    return VendorResponse(
        name=vendor.name,
        base_url=vendor.base_url,
        listing_url=build_vendor_url(vendor),
        search_url_template=(
            vendor.base_url + vendor.search_path if vendor.search_path else None
        ),
    )


@router.get("", response_model=List[VendorResponse])
async def get_vendors():
    """List configured vendors in dispatch order."""
    return [_to_response(v) for v in list_vendors()]


@router.get("/{name}", response_model=VendorResponse)
async def get_vendor(name: str):
    """Get one vendor by exact name."""
    vendor = get_vendor_by_name(name)
    if not vendor:
        raise HTTPException(status_code=404, detail=f"Vendor '{name}' not found")
    return _to_response(vendor)
