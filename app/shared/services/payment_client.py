# app/shared/services/payment_client.py
import httpx
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, Optional
from fastapi import HTTPException
from app.config.settings import settings

logger = logging.getLogger(__name__)

class PaymentClient:
    """Cliente para el proveedor de payment intents (API compatible con Stripe)"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.stripe_api_url
        self.secret_key = settings.stripe_secret_key
        self.currency = settings.payment_currency
        self.timeout = settings.payment_timeout
        self.transport = transport

    def _get_headers(self) -> Dict[str, str]:
        """Headers para autenticación"""
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if self.secret_key:
            headers["Authorization"] = f"Bearer {self.secret_key}"
        return headers

    @staticmethod
    def to_minor_units(price: Decimal) -> int:
        """Precio en centavos, como lo espera el proveedor"""
        cents = (Decimal(str(price)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return int(cents)

    async def create_payment_intent(self, price: Decimal) -> Dict[str, Any]:
        """
        Crear un payment intent por el precio indicado
        """
        amount = self.to_minor_units(price)
        data = {
            "amount": str(amount),
            "currency": self.currency,
            "payment_method_types[]": "card"
        }

        try:
            logger.info(f"Creando payment intent por {amount} {self.currency}")

            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/v1/payment_intents",
                    data=data,
                    headers=self._get_headers()
                )

            if response.status_code == 200:
                result = response.json()
                logger.info(f"Payment intent creado: {result.get('id')}")
                return {
                    "client_secret": result.get("client_secret"),
                    "payment_intent_id": result.get("id"),
                    "amount": amount,
                    "currency": self.currency
                }

            error_msg = f"Error del proveedor de pagos: {response.status_code} - {response.text}"
            logger.error(error_msg)
            raise HTTPException(status_code=502, detail=error_msg)

        except HTTPException:
            raise
        except httpx.TimeoutException:
            logger.error("Timeout creando payment intent")
            raise HTTPException(status_code=504, detail="Timeout con el proveedor de pagos")
        except Exception as e:
            error_msg = f"Error comunicándose con el proveedor de pagos: {str(e)}"
            logger.error(error_msg)
            raise HTTPException(status_code=502, detail=error_msg)


def get_payment_client() -> PaymentClient:
    """Dependency del cliente de pagos"""
    return PaymentClient()
