"""Vendor Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel


class VendorResponse(BaseModel):
    """Public view of a configured vendor."""

    name: str
    base_url: str
    listing_url: str
    search_url_template: Optional[str] = None
