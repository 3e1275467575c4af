"""FastAPI dependency injection providers."""

from deal_hunter.services.deal_service import DealService


def get_deal_service() -> DealService:
    """Provide a DealService for request-scoped usage.

    Overridden in tests to inject a mock HTTP transport:
        app.dependency_overrides[get_deal_service] = lambda: DealService(fetcher)
    """
    return DealService()
