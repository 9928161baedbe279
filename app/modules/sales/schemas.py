# app/modules/sales/schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse

class CheckoutLine(BaseModel):
    product_id: int = Field(..., description="ID del producto")
    product_name: Optional[str] = Field(None, max_length=255)
    product_cost: Decimal = Field(..., ge=0, description="Costo copiado al agregar al carrito")
    selling_price: int = Field(..., ge=0, description="Precio copiado al agregar al carrito")
    sold_quantity: int = Field(..., gt=0, description="Unidades vendidas")
    seller_name: Optional[str] = Field(None, max_length=255, description="Quién realizó la venta")

class CheckoutRequest(BaseModel):
    # None: se usan las líneas pendientes del carrito del usuario
    items: Optional[List[CheckoutLine]] = Field(None, description="Líneas a vender")

class CheckoutResponse(BaseResponse):
    sales: Dict[str, Any]
    inventory: List[Dict[str, Any]]
    cart: List[Dict[str, Any]]
    partial_failure: bool

class SaleItemInfo(BaseModel):
    id: int
    owner_email: str
    shop_id: int
    product_id: int
    product_name: Optional[str] = None
    product_cost: Decimal
    selling_price: int
    sold_quantity: int
    seller_name: Optional[str] = None
    sold_at: datetime

    class Config:
        from_attributes = True

class SalesListResponse(BaseResponse):
    sales: List[SaleItemInfo]
    count: int

class SellerSummary(BaseModel):
    seller_name: str
    units_sold: int
    total_sales: Decimal
    total_invest: Decimal
    total_profit: int

class ShopSalesSummaryResponse(BaseResponse):
    shop_id: int
    shop_name: str
    sellers: List[SellerSummary]
    totals: Dict[str, Any]
    sales: List[SaleItemInfo] = []
