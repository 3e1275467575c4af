"""Field normalization for extracted product cards.

Vendors render prices, links and images in many shapes: currency symbols
and thousands separators, relative paths, lazy-loaded or protocol-relative
image sources. Everything here maps those onto the canonical DealItem form.
"""

import math
import re
from typing import Optional

PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x300?text=No+Image"

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")


class PriceNormalizer:
    """Price parsing utilities."""

    @staticmethod
    def clean_price(raw: Optional[str]) -> float:
        """Parse a price string into a float.

        Only ASCII digits and "." are kept, everything else is discarded:
        - "$1,234.56" -> 1234.56
        - "Sale $29.99 USD" -> 29.99
        - "Contact for price" -> 0.0

        Args:
            raw: Raw price text as displayed by the vendor

        Returns:
            Parsed value, or 0.0 when nothing parseable remains
        """
        if not raw:
            return 0.0

        cleaned = _NON_PRICE_CHARS.sub("", raw)
        if not cleaned:
            return 0.0

        try:
            value = float(cleaned)
        except ValueError:
            # e.g. "1.2.3" from "v1.2 - 3 pack"
            return 0.0

        # Hundreds of digits overflow to inf, which JSON cannot carry
        return value if math.isfinite(value) else 0.0


def normalize_link(href: str, base_url: str) -> str:
    """Make a product link absolute.

    Values already starting with "http" are returned unchanged, anything
    else is appended to base_url as-is ("#" becomes base_url + "#").
    """
    if href.startswith("http"):
        return href
    return f"{base_url}{href}"


def normalize_image_url(src: Optional[str], base_url: Optional[str] = None) -> str:
    """Normalize an image source into an absolute URL.

    Args:
        src: Raw image source (may be empty, protocol-relative or relative)
        base_url: Vendor origin used for relative paths

    Returns:
        Absolute image URL, or PLACEHOLDER_IMAGE when src is empty
    """
    if not src:
        return PLACEHOLDER_IMAGE

    if src.startswith("//"):
        return f"https:{src}"

    if src.startswith("http"):
        return src

    if base_url:
        return f"{base_url}{src}"

    return src


def first_srcset_url(srcset: Optional[str]) -> str:
    """Return the first URL token of a srcset attribute.

    "a.jpg 1x, b.jpg 2x" -> "a.jpg"
    """
    if not srcset:
        return ""
    tokens = srcset.split(",")[0].split()
    return tokens[0] if tokens else ""
