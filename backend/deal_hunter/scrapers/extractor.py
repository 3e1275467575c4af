"""Generic product-card extraction driven by a vendor's SelectorSet."""

from typing import List, Optional

import structlog
from bs4 import BeautifulSoup, Tag

from deal_hunter.scrapers.base import DealItem, VendorSpec
from deal_hunter.scrapers.utils.normalizer import (
    PriceNormalizer,
    first_srcset_url,
    normalize_image_url,
    normalize_link,
)

logger = structlog.get_logger(__name__)

DEFAULT_TITLE = "Unknown"
DEFAULT_PRICE = "$0.00"
DEFAULT_LINK = "#"


def _select_cards(soup: BeautifulSoup, spec: VendorSpec) -> List[Tag]:
    for pattern in spec.selectors.patterns("card"):
        cards = pattern.select(soup)
        if cards:
            return cards
    return []


def _first_match(card: Tag, spec: VendorSpec, field: str) -> Optional[Tag]:
    for pattern in spec.selectors.patterns(field):
        match = pattern.select_one(card)
        if match is not None:
            return match
    return None


def _extract_title(card: Tag, spec: VendorSpec) -> str:
    # Image links often reuse the title class with no text of their own,
    # so take the first match that actually has text.
    for pattern in spec.selectors.patterns("title"):
        for elem in pattern.select(card):
            text = elem.get_text(strip=True)
            if text:
                return text
    return DEFAULT_TITLE


def _extract_price(card: Tag, spec: VendorSpec) -> str:
    elem = _first_match(card, spec, "price")
    if elem is None:
        return DEFAULT_PRICE
    return elem.get_text(strip=True) or DEFAULT_PRICE


def _extract_link(card: Tag, spec: VendorSpec) -> str:
    elem = _first_match(card, spec, "link")
    href = elem.get("href") if elem is not None else None
    return normalize_link(href or DEFAULT_LINK, spec.base_url)


def _extract_image(card: Tag, spec: VendorSpec) -> str:
    src = ""
    img = _first_match(card, spec, "image")
    if img is not None:
        src = (
            img.get("src")
            or img.get("data-src")
            or first_srcset_url(img.get("srcset"))
        )
    return normalize_image_url(src.strip() if src else "", spec.base_url)


def parse_card(card: Tag, spec: VendorSpec) -> Optional[DealItem]:
    """Read one product card into a DealItem.

    Returns:
        DealItem, or None when the card has no positive price
    """
    price_str = _extract_price(card, spec)
    price_val = PriceNormalizer.clean_price(price_str)
    if price_val <= 0:
        return None

    return DealItem(
        vendor=spec.name,
        title=_extract_title(card, spec),
        price_str=price_str,
        price_val=price_val,
        link=_extract_link(card, spec),
        image=_extract_image(card, spec),
    )


def extract(html: str, spec: VendorSpec) -> List[DealItem]:
    """Extract every priced product card from a vendor page.

    Args:
        html: Raw listing page HTML
        spec: Vendor whose selectors and base_url apply

    Returns:
        DealItems in page order, all with price_val > 0
    """
    soup = BeautifulSoup(html or "", "html.parser")
    cards = _select_cards(soup, spec)

    deals: List[DealItem] = []
    skipped = 0
    for card in cards:
        try:
            deal = parse_card(card, spec)
        except Exception as e:
            logger.warning("failed_to_parse_card", vendor=spec.name, error=str(e))
            continue
        if deal is None:
            skipped += 1
            continue
        deals.append(deal)

    logger.debug(
        "cards_extracted",
        vendor=spec.name,
        cards=len(cards),
        deals=len(deals),
        skipped_unpriced=skipped,
    )
    return deals
