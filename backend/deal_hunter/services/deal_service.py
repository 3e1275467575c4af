"""Deal aggregation service.

Connects the vendor registry, the concurrent fetcher and the aggregator
into one pipeline run per request.
"""

from typing import List, Optional, Sequence

import structlog

from deal_hunter.scrapers.aggregator import aggregate
from deal_hunter.scrapers.base import DealItem, VendorSpec
from deal_hunter.scrapers.fetcher import ConcurrentFetcher, VendorResult
from deal_hunter.scrapers.vendors import list_vendors

logger = structlog.get_logger(__name__)


class DealService:
    """Runs the fetch -> extract -> aggregate pipeline.

    Nothing is cached between runs: every call fetches every vendor live.
    """

    def __init__(
        self,
        fetcher: Optional[ConcurrentFetcher] = None,
        vendors: Optional[Sequence[VendorSpec]] = None,
    ):
        """Initialize deal service.

        Args:
            fetcher: Fetcher to use; a default ConcurrentFetcher otherwise
            vendors: Vendor table; the global registry otherwise
        """
        self.fetcher = fetcher or ConcurrentFetcher()
        self.vendors = tuple(vendors) if vendors is not None else list_vendors()
        self.logger = logger.bind(service="deal_service")

    async def collect(self, query: Optional[str] = None) -> List[VendorResult]:
        """Fetch and extract every vendor, one result per vendor."""
        return await self.fetcher.fetch_all(self.vendors, query=query)

    async def get_deals(self, query: Optional[str] = None) -> List[DealItem]:
        """Return the aggregate for one live pipeline run.

        Args:
            query: Optional search text; clearance listings when blank

        Returns:
            Deals from all reachable vendors, sorted by price ascending
        """
        results = await self.collect(query=query)
        deals = aggregate([(r.vendor, r.deals) for r in results])

        self.logger.info(
            "deals_aggregated",
            query=query or None,
            vendors=len(results),
            vendors_failed=sum(1 for r in results if not r.ok),
            deals=len(deals),
        )
        return deals
