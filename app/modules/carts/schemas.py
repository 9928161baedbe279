# app/modules/carts/schemas.py
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse

class CartUpsertRequest(BaseModel):
    product_id: int = Field(..., gt=0, description="Producto a agregar al carrito")

class CartItemInfo(BaseModel):
    id: int
    owner_email: str
    shop_id: int
    product_id: int
    product_name: Optional[str] = None
    product_cost: Decimal
    selling_price: int
    sold_quantity: int
    added_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class CartItemResponse(BaseResponse):
    cart_item: CartItemInfo
    availability: Dict[str, Any]

class CartListResponse(BaseResponse):
    items: List[CartItemInfo]
    count: int
    total_amount: int
