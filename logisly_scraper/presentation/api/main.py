"""
FastAPI main application
"""

import logging
import threading
import time
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ... import __version__
from ...application.use_cases import ScrapeOpenOrdersUseCase
from ...domain.entities import format_timestamp
from ...domain.exceptions import ConfigurationError
from ...infrastructure.config import setup_logging
from ...infrastructure.monitoring.metrics import record_scrape, start_metrics_server
from .dependencies import ApiError, get_config, get_scrape_use_case, get_session_slots, verify_api_key
from .models import ErrorResponse, HealthResponse, ScrapeResponse

logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()

app = FastAPI(
    title="Logisly Scraper API",
    description="Scrapes Logisly open orders for n8n workflows",
    version=__version__
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.body.model_dump(exclude_none=True),
    )


@app.get("/", tags=["Health"])
async def root():
    """Service info"""
    return {
        "service": "Logisly Scraper API",
        "status": "running",
        "version": __version__,
        "endpoints": {
            "health": "GET /health",
            "scrape": "GET /scrape (requires X-API-Key header)"
        }
    }


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=format_timestamp(datetime.now(timezone.utc)),
        uptime=round(time.monotonic() - STARTED_AT, 3)
    )


@app.get(
    "/scrape",
    response_model=ScrapeResponse,
    tags=["Scraping"],
    dependencies=[Depends(verify_api_key)],
)
def scrape(
    use_case: ScrapeOpenOrdersUseCase = Depends(get_scrape_use_case),
    session_slots: threading.BoundedSemaphore = Depends(get_session_slots),
):
    """Log in to Logisly and return the current open orders"""
    logger.info("Received scrape request")
    try:
        with session_slots:
            result = use_case.execute()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        raise ApiError(
            500,
            ErrorResponse(error="Configuration error", message=str(e), orders=[]),
        )
    except Exception as e:
        logger.error(f"Request error: {e}", exc_info=True)
        raise ApiError(500, ErrorResponse(error=str(e), orders=[]))

    record_scrape(result)
    if not result.success:
        raise ApiError(500, ErrorResponse.from_failed_result(result))
    return ScrapeResponse.from_result(result)


def run_server():
    """Run the API with uvicorn"""
    import uvicorn

    setup_logging()
    config = get_config()
    get_session_slots()
    if config.metrics_port:
        start_metrics_server(config.metrics_port)

    logger.info("Logisly Scraper API starting")
    logger.info(f"Port: {config.port}")
    logger.info(f"Authentication: {'Enabled' if config.api_key_configured else 'Disabled'}")
    logger.info(f"Logisly Email: {config.credentials.email if config.credentials else 'NOT SET'}")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run_server()
