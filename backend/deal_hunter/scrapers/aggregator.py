"""Merge per-vendor deal lists into one price-sorted feed."""

from itertools import chain
from typing import List, Sequence, Tuple

from deal_hunter.scrapers.base import DealItem, VendorSpec


def aggregate(
    per_vendor_results: Sequence[Tuple[VendorSpec, Sequence[DealItem]]],
) -> List[DealItem]:
    """Concatenate vendor results and sort by price, cheapest first.

    Vendors are taken in the order given (registry order) and each vendor's
    card order is kept. sorted() is stable, so equal prices keep that
    relative order from run to run. Listings are not de-duplicated across
    vendors.
    """
    merged = chain.from_iterable(deals for _, deals in per_vendor_results)
    return sorted(merged, key=lambda deal: deal.price_val)
