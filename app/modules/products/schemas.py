# app/modules/products/schemas.py
from pydantic import BaseModel, Field, validator
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse

# selling_price no es un campo de entrada: siempre se calcula

class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    image_url: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    quantity: int = Field(0, ge=0, description="Cantidad disponible")
    cost: Decimal = Field(..., ge=0, description="Costo de producción")
    profit_margin: Decimal = Field(..., ge=0, description="Margen de ganancia en %")

    @validator('name')
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('El nombre no puede estar vacío')
        return v.strip()

class ProductUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    image_url: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    quantity: Optional[int] = Field(None, ge=0)
    cost: Optional[Decimal] = Field(None, ge=0)
    profit_margin: Optional[Decimal] = Field(None, ge=0)

class ProductInfo(BaseModel):
    id: int
    shop_id: int
    owner_email: str
    name: str
    image_url: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    cost: Decimal
    profit_margin: Decimal
    selling_price: int
    quantity: int
    sales_count: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ProductResponse(BaseResponse):
    product: ProductInfo

class ProductListResponse(BaseResponse):
    products: List[ProductInfo]
    count: int
    product_limit: Optional[int] = None
