# app/modules/shops/schemas.py
from pydantic import BaseModel, Field, validator
from typing import Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse

class ShopCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nombre de la tienda")
    logo: Optional[str] = Field(None, max_length=500, description="URL del logo")
    description: Optional[str] = Field(None, max_length=1000)
    location: Optional[str] = Field(None, max_length=255)

    @validator('name')
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('El nombre no puede estar vacío')
        return v.strip()

class ShopInfo(BaseModel):
    id: int
    owner_email: str
    owner_name: Optional[str] = None
    name: str
    logo: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    product_limit: int
    product_count: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ShopResponse(BaseResponse):
    shop: ShopInfo

class ProductLimitIncreaseRequest(BaseModel):
    increase_by: int = Field(..., gt=0, description="Productos adicionales permitidos")
    amount: Decimal = Field(..., ge=0, description="Monto pagado, se abona a la cuenta admin")

class ProductLimitIncreaseResponse(BaseResponse):
    shop: ShopInfo
    income_credited: Decimal
