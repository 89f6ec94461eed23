"""
Command Line Interface
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from ..application.normalizer import RowNormalizer
from ..application.use_cases import ScrapeOpenOrdersUseCase, drop_summary
from ..domain.exceptions import ConfigurationError
from ..infrastructure.config import load_configuration, setup_logging
from ..infrastructure.scraping.authenticator import PlaywrightAuthenticator
from ..infrastructure.scraping.browser import PlaywrightSessionProvider
from ..infrastructure.scraping.table_extractor import PlaywrightTableExtractor
from .formatters import JsonOutputFormatter


def create_cli_app(argv: Optional[List[str]] = None) -> int:
    """Run one scrape from the command line; returns the exit code"""
    parser = argparse.ArgumentParser(
        description='Logisly Open Orders Scraper',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scrape and print a summary
  logisly-scraper

  # Save the JSON result
  logisly-scraper --output orders.json

  # Watch the browser
  logisly-scraper --headful
        """
    )
    parser.add_argument('--output', type=str, help='Write the JSON result to this file')
    parser.add_argument('--headful', action='store_true', help='Show the browser window')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else None)

    config = load_configuration()
    if args.headful:
        config = dataclasses.replace(config, headless=False)

    # Setup dependency injection
    use_case = ScrapeOpenOrdersUseCase(
        config=config,
        session_provider=PlaywrightSessionProvider(config),
        authenticator=PlaywrightAuthenticator(config),
        extractor=PlaywrightTableExtractor(config),
        normalizer=RowNormalizer(display_year=config.display_year),
    )

    print("=" * 70)
    print("LOGISLY OPEN ORDERS SCRAPER")
    print("=" * 70)

    try:
        result = use_case.execute()
    except ConfigurationError as e:
        print(f"\n[X] Configuration error: {e}")
        return 1

    formatter = JsonOutputFormatter()
    if args.output:
        if formatter.save(result, args.output):
            print(f"\n[OK] Result saved to: {args.output}")
        else:
            print(f"\n[X] Could not write {args.output}")

    if not result.success:
        print(f"\n[X] Failed at {result.failed_stage.value}: {result.error}")
        return 1

    print(f"\n[OK] Scraped {result.total_orders} orders")
    for reason, count in drop_summary(result.dropped).items():
        print(f"     Dropped ({reason}): {count}")
    for order in result.orders[:5]:
        print(f"  • {order.shipper}: {order.route} ({order.vehicle_type}) Rp {order.offered_price:,}")
    if result.total_orders > 5:
        print(f"  ... and {result.total_orders - 5} more")
    return 0


def main():
    sys.exit(create_cli_app())


if __name__ == "__main__":
    main()
