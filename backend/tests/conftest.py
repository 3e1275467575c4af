"""Pytest configuration and shared fixtures."""

from typing import Callable, Dict, Union

import httpx
import pytest

from deal_hunter.scrapers.base import SelectorSet, VendorSpec
from deal_hunter.scrapers.fetcher import ConcurrentFetcher
from deal_hunter.scrapers.vendors import get_vendor_by_name


SHOPIFY_HTML = """
<html><body>
<div class="collection">
  <div class="product-card">
    <div class="card__media"><img src="https://example.com/camera1.jpg" alt=""></div>
    <h3 class="card__heading">
      <a href="/products/fpv-camera-1" class="full-unstyled-link">RunCam Phoenix 2 - Clearance</a>
    </h3>
    <div class="price">
      <span class="price-item price-item--sale">$29.99</span>
      <span class="price-item price-item--regular">$39.99</span>
    </div>
  </div>
  <div class="product-card">
    <div class="card__media">
      <img srcset="//cdn.example.com/vtx.jpg 1x, //cdn.example.com/vtx@2x.jpg 2x">
    </div>
    <h3 class="card__heading">
      <a href="/products/tbs-unify" class="full-unstyled-link">TBS Unify Pro 5G8 HV</a>
    </h3>
    <span class="price-item price-item--regular">$45.50</span>
  </div>
  <div class="product-card">
    <h3 class="card__heading">
      <a href="/products/out-of-stock" class="full-unstyled-link">Out of Stock Item</a>
    </h3>
    <span class="price-item price-item--regular">Sold out</span>
  </div>
</div>
</body></html>
"""

GETFPV_HTML = """
<html><body>
<ol class="products list items product-items">
  <li class="product-item">
    <a class="product-item-photo" href="https://www.getfpv.com/batteries/lipo-4s">
      <img class="product-image-photo" data-src="https://www.getfpv.com/media/lipo.jpg">
    </a>
    <a class="product-item-link" href="https://www.getfpv.com/batteries/lipo-4s">
      CNHL 4S 1500mAh LiPo Battery
    </a>
    <span class="price">$19.99</span>
  </li>
  <li class="product-item">
    <a class="product-item-photo" href="/frames/freestyle-5">
      <img class="product-image-photo" src="/media/frame.jpg">
    </a>
    <a class="product-item-link">5" Freestyle Frame Kit</a>
    <span class="price">$79.00</span>
  </li>
  <li class="product-item">
    <a class="product-item-link">Custom Long Range Build</a>
    <span class="price">Contact for price</span>
  </li>
</ol>
</body></html>
"""

SIMPLE_SELECTORS = SelectorSet(
    card=".item",
    title=".name",
    price=".cost",
    image="img",
    link="a",
)


def simple_vendor(name: str, backend: str, host: str) -> VendorSpec:
    """Build a vendor using SIMPLE_SELECTORS served from host."""
    return VendorSpec(
        name=name,
        request_path="/clearance",
        backend=backend,
        base_url=f"https://{host}",
        selectors=SIMPLE_SELECTORS,
        search_path="/search?q={query}",
    )


def item_html(*items) -> str:
    """Render (title, price) pairs as .item cards for SIMPLE_SELECTORS."""
    cards = "".join(
        f'<div class="item"><a href="/p/{i}"><span class="name">{title}</span></a>'
        f'<span class="cost">{price}</span><img src="/img/{i}.jpg"></div>'
        for i, (title, price) in enumerate(items)
    )
    return f"<html><body>{cards}</body></html>"


Route = Union[httpx.Response, Exception]


def mock_fetcher(routes: Dict[str, Route], **kwargs) -> ConcurrentFetcher:
    """Create a ConcurrentFetcher whose requests are answered by host.

    Args:
        routes: Host -> canned response, or an exception to raise

    Returns:
        ConcurrentFetcher backed by httpx.MockTransport
    """

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.host)
        if route is None:
            return httpx.Response(404, text="no route")
        if isinstance(route, Exception):
            raise route
        return route

    return ConcurrentFetcher(transport=httpx.MockTransport(handler), **kwargs)


@pytest.fixture
def shopify_vendor() -> VendorSpec:
    """A registry vendor using the shared Shopify selectors."""
    return get_vendor_by_name("Pyrodrone")


@pytest.fixture
def getfpv_vendor() -> VendorSpec:
    """The Magento-based GetFPV vendor."""
    return get_vendor_by_name("GetFPV")


@pytest.fixture
def three_vendors():
    """Three independent test vendors on distinct hosts."""
    return [
        simple_vendor("Alpha", "alpha", "alpha.test"),
        simple_vendor("Bravo", "bravo", "bravo.test"),
        simple_vendor("Charlie", "charlie", "charlie.test"),
    ]


@pytest.fixture
def make_fetcher() -> Callable[..., ConcurrentFetcher]:
    """Factory fixture for mock-transport fetchers."""
    return mock_fetcher
