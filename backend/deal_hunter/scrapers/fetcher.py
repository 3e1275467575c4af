"""Concurrent retrieval of vendor listing pages.

Every vendor request is started before any response is awaited, so a run
takes about as long as the slowest vendor. Failures are contained per
vendor: a dead storefront contributes zero deals and a log line.
"""

import asyncio
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import httpx
import structlog

from deal_hunter.config import settings
from deal_hunter.core.exceptions import VendorFetchError
from deal_hunter.scrapers.base import DealItem, VendorSpec
from deal_hunter.scrapers.extractor import extract
from deal_hunter.scrapers.utils.user_agents import get_user_agent
from deal_hunter.scrapers.vendors import build_vendor_url

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class VendorResult:
    """Outcome of one vendor's fetch + extract step."""

    vendor: VendorSpec
    url: str
    deals: Tuple[DealItem, ...] = ()
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ConcurrentFetcher:
    """Fetches and extracts every vendor in parallel.

    A transport can be injected (httpx.MockTransport in tests); otherwise a
    client is created per run to avoid lifecycle issues across requests.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
        backend_hosts: Optional[Dict[str, str]] = None,
        user_agent: Optional[str] = None,
    ):
        self._transport = transport
        self._timeout = timeout if timeout is not None else settings.FETCH_TIMEOUT_SECONDS
        self._backend_hosts = (
            backend_hosts if backend_hosts is not None else settings.get_backend_hosts()
        )
        self._headers = {
            "User-Agent": user_agent
            or get_user_agent(settings.USER_AGENT, rotate=settings.ROTATE_USER_AGENT),
            "Accept": "text/html,application/xhtml+xml",
            # Uncompressed bodies keep parsing simple
            "Accept-Encoding": "identity",
        }

    def url_for(self, vendor: VendorSpec, query: Optional[str] = None) -> str:
        """Resolve the URL to request for a vendor via its backend mapping."""
        host = self._backend_hosts.get(vendor.backend)
        return build_vendor_url(vendor, query=query, host=host)

    async def fetch_all(
        self,
        vendors: Sequence[VendorSpec],
        query: Optional[str] = None,
    ) -> List[VendorResult]:
        """Fetch every vendor concurrently.

        Args:
            vendors: Vendors in dispatch order
            query: Optional search text passed to each vendor's search page

        Returns:
            One VendorResult per vendor, in the same order as vendors
        """
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self._timeout,
            headers=self._headers,
            follow_redirects=True,
        ) as client:
            # Start everything first, then wait in dispatch order
            tasks = [
                asyncio.create_task(self._fetch_vendor(client, vendor, query))
                for vendor in vendors
            ]
            results = [await task for task in tasks]

        failed = [r.vendor.name for r in results if not r.ok]
        logger.info(
            "vendors_fetched",
            total=len(results),
            failed=len(failed),
            failed_vendors=failed,
        )
        return results

    async def _fetch_vendor(
        self,
        client: httpx.AsyncClient,
        vendor: VendorSpec,
        query: Optional[str],
    ) -> VendorResult:
        url = self.url_for(vendor, query)
        try:
            response = await self._get(client, vendor, url)
            deals = extract(response.text, vendor)
        except VendorFetchError as e:
            return VendorResult(
                vendor=vendor,
                url=url,
                error=e.message,
                status_code=e.status_code,
            )
        except Exception as e:
            # A task that raises would abort the whole run in fetch_all
            logger.exception("vendor_unexpected_error", vendor=vendor.name, url=url)
            return VendorResult(
                vendor=vendor,
                url=url,
                error=f"{type(e).__name__}: {e}",
            )

        logger.info("vendor_parsed", vendor=vendor.name, deals=len(deals))
        return VendorResult(
            vendor=vendor,
            url=url,
            deals=tuple(deals),
            status_code=response.status_code,
        )

    async def _get(
        self, client: httpx.AsyncClient, vendor: VendorSpec, url: str
    ) -> httpx.Response:
        """Perform the single GET for a vendor.

        Raises:
            VendorFetchError: On transport failure or a non-2xx status
        """
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning(
                "vendor_fetch_failed",
                vendor=vendor.name,
                url=url,
                error=f"{type(e).__name__}: {e}",
            )
            raise VendorFetchError(vendor.name, f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            logger.warning(
                "vendor_http_error",
                vendor=vendor.name,
                url=url,
                status_code=response.status_code,
            )
            raise VendorFetchError(
                vendor.name,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return response
