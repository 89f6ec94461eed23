import pytest

from logisly_scraper.domain.value_objects import Credentials, ScraperConfiguration


@pytest.fixture
def config():
    return ScraperConfiguration(
        login_url="https://logisly.test/login",
        orders_url="https://logisly.test/open-orders",
        credentials=Credentials(email="ops@example.com", password="s3cret"),
        api_key="test-key",
        login_form_timeout_ms=0,
        login_submit_timeout_ms=100,
        listing_timeout_ms=100,
        tab_settle_ms=10,
    )
