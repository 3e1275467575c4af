"""Health check endpoint."""

from fastapi import APIRouter

from deal_hunter.config import settings
from deal_hunter.scrapers.vendors import list_vendors
from deal_hunter.schemas import HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Return service status and the number of configured vendors.

    Vendors are not contacted here; /api/deals does that on every call.
    """
    return HealthCheckResponse(
        status="ok",
        environment=settings.ENVIRONMENT,
        vendor_count=len(list_vendors()),
    )
