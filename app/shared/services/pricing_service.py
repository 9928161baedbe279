# app/shared/services/pricing_service.py
from decimal import Decimal, ROUND_CEILING
from typing import Union

from app.config.settings import settings

Number = Union[int, float, str, Decimal]


def _to_decimal(value: Number) -> Decimal:
    # str() evita arrastrar el error binario de los float
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _ceil(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))


class PricingService:
    """Cálculo del precio de venta a partir de costo, IVA y margen"""

    def __init__(self, tax_rate: Number = None):
        self.tax_rate = _to_decimal(tax_rate if tax_rate is not None else settings.tax_rate)

    def price_with_tax(self, cost: Number) -> Decimal:
        cost = _to_decimal(cost)
        return cost + cost * self.tax_rate

    def calculate_selling_price(self, cost: Number, profit_margin: Number) -> int:
        """
        Precio de venta redondeado hacia arriba.

        1. price_with_tax = cost + cost * tax_rate
        2. selling_price = ceil(price_with_tax + price_with_tax * margin / 100)

        Raises:
            ValueError: si el costo o el margen son negativos
        """
        cost = _to_decimal(cost)
        margin = _to_decimal(profit_margin)

        if cost < 0:
            raise ValueError("El costo no puede ser negativo")
        if margin < 0:
            raise ValueError("El margen de ganancia no puede ser negativo")

        with_tax = self.price_with_tax(cost)
        return _ceil(with_tax + with_tax * margin / Decimal("100"))


def calculate_profit_after_cut(total_sales: Number, total_invest: Number, platform_cut: Number = None) -> int:
    """Ganancia del vendedor después de la comisión de la plataforma, redondeada a su favor"""
    cut = _to_decimal(platform_cut if platform_cut is not None else settings.platform_cut)
    gross = _to_decimal(total_sales) - _to_decimal(total_invest)
    return _ceil(gross * (Decimal("1") - cut))


pricing_service = PricingService()
