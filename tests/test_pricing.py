# tests/test_pricing.py
from decimal import Decimal

import pytest

from app.shared.services.pricing_service import (
    PricingService, pricing_service, calculate_profit_after_cut
)


def test_price_with_tax_adds_seven_and_a_half_percent():
    assert pricing_service.price_with_tax(100) == Decimal("107.5")


def test_selling_price_for_cost_100_margin_20():
    # 107.5 + 107.5 * 20 / 100 = 129 exacto
    assert pricing_service.calculate_selling_price(100, 20) == 129


def test_selling_price_rounds_up():
    # 10.75 sin margen
    assert pricing_service.calculate_selling_price(10, 0) == 11
    # 53.75 * 1.1 = 59.125
    assert pricing_service.calculate_selling_price(50, 10) == 60


def test_selling_price_accepts_decimal_strings_and_floats():
    assert pricing_service.calculate_selling_price("19.99", "15.5") == pricing_service.calculate_selling_price(19.99, 15.5)


def test_zero_cost_gives_zero_price():
    assert pricing_service.calculate_selling_price(0, 50) == 0


@pytest.mark.parametrize("cost,margin", [(-1, 10), (10, -5)])
def test_negative_inputs_are_rejected(cost, margin):
    with pytest.raises(ValueError):
        pricing_service.calculate_selling_price(cost, margin)


def test_price_is_monotonic_in_cost_and_margin():
    costs = [0, 1, 9.99, 10, 55.5, 100, 250]
    margins = [0, 1, 12.5, 20, 75]

    for margin in margins:
        prices = [pricing_service.calculate_selling_price(c, margin) for c in costs]
        assert prices == sorted(prices)

    for cost in costs:
        prices = [pricing_service.calculate_selling_price(cost, m) for m in margins]
        assert prices == sorted(prices)


def test_custom_tax_rate():
    assert PricingService(tax_rate="0").calculate_selling_price(100, 20) == 120


def test_profit_after_platform_cut_rounds_up():
    assert calculate_profit_after_cut(260, 200) == 56
    assert calculate_profit_after_cut(0, 0) == 0
