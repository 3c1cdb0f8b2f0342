import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from rentquote import create_app
from rentquote.models.listing import PropertyListing, VehicleListing


@pytest.fixture
def app():
    return create_app({"TESTING": True, "QUOTE_TIMEZONE": "UTC"})


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def vehicle():
    """Vehicle with all three tiers priced."""
    return VehicleListing(daily_rate=500, weekly_rate=3000, monthly_rate=10000, security_deposit=2000)


@pytest.fixture
def apartment():
    return PropertyListing(monthly_rent=30000, security_deposit=5000)
