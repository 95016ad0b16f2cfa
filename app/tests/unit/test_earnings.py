import pytest
from decimal import Decimal

from app.schemas.pricing import PricingConfig
from app.services.earnings import compute_provider_earnings

pytestmark = [pytest.mark.unit, pytest.mark.pricing]


@pytest.mark.parametrize("gross,commission,net", [
    (10000, 1500, 8500),
    (6166, 925, 5241),
    (3, 0, 3),
    (10, 2, 8),
    (0, 0, 0),
])
def test_commission_and_net(gross, commission, net):
    earnings = compute_provider_earnings(gross)

    assert earnings.commission == commission
    assert earnings.net == net
    assert earnings.gross == earnings.commission + earnings.net


def test_formatted():
    earnings = compute_provider_earnings(6166)
    assert earnings.formatted == {"gross": "61.66", "commission": "9.25", "net": "52.41"}


def test_commission_rate_from_config():
    earnings = compute_provider_earnings(10000, PricingConfig(provider_commission_rate=Decimal("0.2")))
    assert earnings.net == 8000
