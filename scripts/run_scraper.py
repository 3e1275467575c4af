"""Manual pipeline runner for testing and debugging vendor selectors.

Runs one live fetch/extract/aggregate pass and prints the deals, so a
selector change can be checked against the real storefront.

Usage:
    python scripts/run_scraper.py
    python scripts/run_scraper.py --vendor GetFPV
    python scripts/run_scraper.py --query battery --limit 5
    python scripts/run_scraper.py --json > deals.json
"""

import asyncio
import argparse
import sys
import os

# Add backend to path so we can import deal_hunter modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from deal_hunter.scrapers.aggregator import aggregate
from deal_hunter.scrapers.vendors import get_vendor_by_name, list_vendors
from deal_hunter.services.deal_service import DealService
from deal_hunter.services.serializer import render_deals


async def run_scraper(vendor_name: str = None, query: str = None, limit: int = 10, as_json: bool = False):
    """Run the pipeline and display the results.

    Args:
        vendor_name: Restrict the run to one vendor (exact name)
        query: Optional search text instead of clearance listings
        limit: Maximum number of deals to display (default: 10)
        as_json: Print the /api/deals payload instead of a summary
    """
    if vendor_name:
        vendor = get_vendor_by_name(vendor_name)
        if not vendor:
            print(f"\nError: Unknown vendor '{vendor_name}'")
            print("\nAvailable vendors:")
            for v in list_vendors():
                print(f"   - {v.name}")
            return
        vendors = [vendor]
    else:
        vendors = list_vendors()

    service = DealService(vendors=vendors)
    results = await service.collect(query=query)
    deals = aggregate([(r.vendor, r.deals) for r in results])

    if as_json:
        print(render_deals(deals).decode("utf-8"))
        return

    print(f"\n{'='*70}")
    print(f"  Vendors")
    print(f"{'='*70}")
    for result in results:
        status = "ok" if result.ok else f"FAILED ({result.error})"
        print(f"  {result.vendor.name:<16} {len(result.deals):>4} deals  {status}")
        print(f"  {'':<16} {result.url}")

    if not deals:
        print("\nNo deals found.\n")
        return

    print(f"\n{'='*70}")
    print(f"  Cheapest {min(limit, len(deals))} of {len(deals)} Deals")
    print(f"{'='*70}\n")

    for i, deal in enumerate(deals[:limit], 1):
        print(f"[{i}] {deal.title}")
        print(f"    Vendor: {deal.vendor}")
        print(f"    Price:  {deal.price_str} ({deal.price_val:.2f})")
        print(f"    URL:    {deal.link[:80]}")
        print(f"    Image:  {deal.image[:80]}")
        print()


def main():
    """Parse arguments and run the pipeline."""
    parser = argparse.ArgumentParser(
        description="Run the deal aggregation pipeline once",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/run_scraper.py
  python scripts/run_scraper.py --vendor Pyrodrone
  python scripts/run_scraper.py --query "5 inch frame" --limit 20
        """,
    )

    parser.add_argument(
        "--vendor",
        help="Vendor name (e.g., 'GetFPV', 'Rotor Riot')",
    )

    parser.add_argument(
        "--query",
        help="Search text; fetch vendor search pages instead of clearance",
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of deals to display (default: 10)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON payload served by /api/deals",
    )

    args = parser.parse_args()

    asyncio.run(run_scraper(args.vendor, args.query, args.limit, args.json))


if __name__ == "__main__":
    main()
