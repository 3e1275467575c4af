"""Vendor registry.

The table of storefronts is built once at import time and never mutated.
Adding a vendor means adding a row here; the extractor has no per-vendor
code paths.
"""

from typing import Optional, Sequence, Tuple
from urllib.parse import quote

import structlog

from deal_hunter.core.exceptions import VendorConfigError
from deal_hunter.scrapers.base import SelectorSet, VendorSpec

logger = structlog.get_logger(__name__)


# Shared by every Shopify storefront. Alternatives are listed most specific
# first: older "grid-view-item" themes, then Dawn-style "card" themes.
SHOPIFY_SELECTORS = SelectorSet(
    card=(
        "div.grid-view-item",
        ".product-card",
        ".product-item",
        ".card-wrapper",
        ".product-grid-item",
    ),
    title=(
        "div.grid-view-item__title",
        ".card__heading",
        ".product-item__title",
        ".full-unstyled-link",
        ".product-title",
        "h3 a",
    ),
    price=(
        "span.price-item--sale",
        "span.price-item--regular",
        ".price__current",
        ".product-price__price",
        ".money",
        ".price",
    ),
    image=(
        "img.grid-view-item__image",
        ".card__media img",
        ".product-item__image-wrapper img",
        ".product-grid-image img",
    ),
    link=(
        "a.grid-view-item__link",
        "a.full-unstyled-link",
        ".product-item__image-link",
        ".product-card a",
    ),
)

# Magento
GETFPV_SELECTORS = SelectorSet(
    card="li.product-item",
    title="a.product-item-link",
    price="span.price",
    image="img.product-image-photo",
    link="a.product-item-photo",
)

RDQ_SELECTORS = SelectorSet(
    card="div.product-item",
    title="a.product-item__title",
    price="span.price",
    image="div.product-item__image-wrapper img",
    link="a.product-item__title",
)

SHOPIFY_SEARCH = "/search?q={query}"
MAGENTO_SEARCH = "/catalogsearch/result/?q={query}"


def _shopify(name: str, request_path: str, backend: str, base_url: str) -> VendorSpec:
    return VendorSpec(
        name=name,
        request_path=request_path,
        backend=backend,
        base_url=base_url,
        selectors=SHOPIFY_SELECTORS,
        search_path=SHOPIFY_SEARCH,
    )


def validate_registry(vendors: Sequence[VendorSpec]) -> None:
    """Check a vendor table for configuration errors.

    Selector expressions are already compiled by SelectorSet; this covers
    the table-level rules.

    Raises:
        VendorConfigError: If the table is empty or vendor names repeat
    """
    if not vendors:
        raise VendorConfigError("vendor registry is empty")

    seen = set()
    for vendor in vendors:
        if not isinstance(vendor, VendorSpec):
            raise VendorConfigError(f"registry entry is not a VendorSpec: {vendor!r}")
        if vendor.name in seen:
            raise VendorConfigError(f"duplicate vendor name: {vendor.name}")
        seen.add(vendor.name)


def _build_registry() -> Tuple[VendorSpec, ...]:
    vendors = (
        VendorSpec(
            name="GetFPV",
            request_path="/on-sale/clearance.html?product_list_limit=100",
            backend="getfpv",
            base_url="https://www.getfpv.com",
            selectors=GETFPV_SELECTORS,
            search_path=MAGENTO_SEARCH,
        ),
        VendorSpec(
            name="RaceDayQuads",
            request_path="/collections/clearance",
            backend="racedayquads",
            base_url="https://www.racedayquads.com",
            selectors=RDQ_SELECTORS,
            search_path=SHOPIFY_SEARCH,
        ),
        _shopify("Pyrodrone", "/collections/clearance", "pyrodrone", "https://pyrodrone.com"),
        _shopify("NewBeeDrone", "/collections/clearance", "newbeedrone", "https://newbeedrone.com"),
        _shopify("DefianceRC", "/collections/discounted-products", "defiancerc", "https://www.defiancerc.com"),
        _shopify("TinyWhoop", "/collections/clearance", "tinywhoop", "https://www.tinywhoop.com"),
        _shopify("Wrekd", "/collections/clearance", "wrekd", "https://wrekd.com"),
        _shopify("Webleedfpv", "/collections/clearance-1", "webleedfpv", "https://webleedfpv.com"),
        _shopify("Five33", "/collections/last-chance-sale", "five33", "https://flyfive33.com"),
        _shopify("BetaFPV", "/collections/on-sale", "betafpv", "https://betafpv.com"),
        _shopify("ProgressiveRC", "/collections/clearance", "progressiverc", "https://www.progressiverc.com"),
        _shopify("Emax USA", "/collections/clearance", "emax", "https://emax-usa.com"),
        _shopify("Rotor Riot", "/collections/clearance-sale", "rotorriot", "https://rotorriot.com"),
        _shopify(
            "Stan FPV",
            "/collections/black-friday-cyber-monday-sale-items",
            "stanfpv",
            "https://stanfpv.com",
        ),
        _shopify("Ovonic", "/collections/hot-sale", "ovonic", "https://us.ovonicshop.com"),
    )
    validate_registry(vendors)
    return vendors


VENDORS: Tuple[VendorSpec, ...] = _build_registry()


def list_vendors() -> Tuple[VendorSpec, ...]:
    """Return every configured vendor in dispatch order."""
    return VENDORS


def get_vendor_by_name(name: str) -> Optional[VendorSpec]:
    """Find a vendor by its exact display name.

    Returns:
        VendorSpec, or None if no vendor has that name
    """
    for vendor in VENDORS:
        if vendor.name == name:
            return vendor
    return None


def build_vendor_url(
    vendor: VendorSpec,
    query: Optional[str] = None,
    host: Optional[str] = None,
) -> str:
    """Build the listing URL to fetch for a vendor.

    Args:
        vendor: Vendor definition
        query: Optional search text; blank means the clearance listing
        host: Origin to fetch from, defaults to vendor.base_url

    Returns:
        Absolute URL (host + path, no path-joining)
    """
    origin = host or vendor.base_url
    if query and query.strip() and vendor.search_path:
        return origin + vendor.search_path.format(query=quote(query.strip(), safe=""))
    return origin + vendor.request_path
