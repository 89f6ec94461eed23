"""
Prometheus metrics for monitoring
"""

from prometheus_client import Counter, Histogram, start_http_server
import logging

from ...domain.entities import ScrapeResult

logger = logging.getLogger(__name__)

# Scraping metrics
scrape_requests_total = Counter(
    'scrape_requests_total',
    'Total number of scrape requests',
    ['status']  # success, failed
)

scrape_duration_seconds = Histogram(
    'scrape_duration_seconds',
    'Time spent on one Logisly scrape',
    buckets=[5, 10, 30, 60, 120, 300]
)

# Row metrics
orders_extracted_total = Counter(
    'orders_extracted_total',
    'Total number of orders returned to callers'
)

rows_dropped_total = Counter(
    'rows_dropped_total',
    'Total number of listing rows dropped during normalization',
    ['reason']  # EmptyShipper, InvalidPrice, InsufficientCells
)


def record_scrape(result: ScrapeResult) -> None:
    """Record one finished scrape"""
    scrape_requests_total.labels(status='success' if result.success else 'failed').inc()
    if result.duration_seconds is not None:
        scrape_duration_seconds.observe(result.duration_seconds)
    orders_extracted_total.inc(result.total_orders)
    for reason, count in result.dropped.items():
        rows_dropped_total.labels(reason=reason.value).inc(count)


def start_metrics_server(port: int = 8000):
    """Start Prometheus metrics HTTP server"""
    try:
        start_http_server(port)
        logger.info(f"Prometheus metrics server started on port {port}")
    except Exception as e:
        logger.error(f"Failed to start metrics server: {e}", exc_info=True)
