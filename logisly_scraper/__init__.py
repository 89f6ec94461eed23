"""
Logisly open orders scraper
"""

__version__ = "1.0.0"
