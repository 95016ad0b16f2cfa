import pytest
from datetime import datetime
from decimal import Decimal
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.core.config import settings
from app.schemas.pricing import PricingConfig, PricingRequest


# 2025-03-11 is a Tuesday with no public holiday
PLAIN_TUESDAY_10AM = datetime(2025, 3, 11, 10, 0)


@pytest.fixture
async def test_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def pricing_config():
    return PricingConfig()


@pytest.fixture
def make_request():
    def _make_request(**kwargs):
        data = {
            "base_rate_per_hour": Decimal("40"),
            "hours": Decimal("1"),
            "is_urgent": False,
            "distance_km": Decimal("0"),
            "request_timestamp": PLAIN_TUESDAY_10AM,
        }
        data.update(kwargs)
        return PricingRequest(**data)

    return _make_request


@pytest.fixture
def valid_pricing_data():
    return {
        "base_rate_per_hour": 40,
        "hours": 1,
        "is_urgent": False,
        "distance_km": 0,
        "request_timestamp": PLAIN_TUESDAY_10AM.isoformat(),
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )
    config.addinivalue_line(
        "markers", "calendar: marks tests related to Easter and public holidays"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
