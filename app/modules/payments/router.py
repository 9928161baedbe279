# app/modules/payments/router.py
from fastapi import APIRouter, Depends

from app.core.auth.dependencies import get_current_user
from app.shared.database.models import User
from app.shared.services.payment_client import PaymentClient, get_payment_client
from .schemas import PaymentIntentRequest, PaymentIntentResponse

router = APIRouter()

@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: PaymentIntentRequest,
    current_user: User = Depends(get_current_user),
    payment_client: PaymentClient = Depends(get_payment_client)
):
    """
    Crear payment intent por el precio indicado

    El monto se envía al proveedor en centavos.
    """
    result = await payment_client.create_payment_intent(request.price)
    return PaymentIntentResponse(
        clientSecret=result["client_secret"],
        payment_intent_id=result["payment_intent_id"],
        amount=result["amount"],
        currency=result["currency"]
    )
