"""
Quick script to trigger one Logisly scrape
"""
import sys

from logisly_scraper.presentation.cli import create_cli_app

if __name__ == "__main__":
    # Usage: python scrape_now.py [--output orders.json] [--headful]
    sys.exit(create_cli_app(sys.argv[1:]))
