# app/modules/payments/schemas.py
from pydantic import BaseModel, Field
from decimal import Decimal

class PaymentIntentRequest(BaseModel):
    price: Decimal = Field(..., gt=0, description="Precio a cobrar")

class PaymentIntentResponse(BaseModel):
    clientSecret: str
    payment_intent_id: str
    amount: int
    currency: str
