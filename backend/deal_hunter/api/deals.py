"""Deals API endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from deal_hunter.config import settings
from deal_hunter.dependencies import get_deal_service
from deal_hunter.services.deal_service import DealService
from deal_hunter.services.serializer import cache_control_header, render_deals

router = APIRouter()


@router.get("")
async def list_deals(
    q: Optional[str] = Query(None, description="Search all vendors instead of clearance listings"),
    service: DealService = Depends(get_deal_service),
):
    """Aggregate live deals from every vendor, cheapest first.

    Vendors that are down or return an error status are skipped; the
    response is always a (possibly shorter) JSON array. A rendering failure
    raises SerializationError, which the app turns into a 500.
    """
    deals = await service.get_deals(query=q)
    body = render_deals(deals)

    return Response(
        content=body,
        media_type="application/json",
        headers={"Cache-Control": cache_control_header(settings.DEALS_CACHE_MAX_AGE)},
    )
