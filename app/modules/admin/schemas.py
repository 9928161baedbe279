# app/modules/admin/schemas.py
from pydantic import BaseModel, Field
from typing import List
from decimal import Decimal
from app.shared.schemas.common import BaseResponse
from app.modules.shops.schemas import ShopInfo

class IncomeIncreaseRequest(BaseModel):
    income: Decimal = Field(..., gt=0, description="Monto a abonar a la cuenta admin")

class IncomeResponse(BaseResponse):
    admin_email: str
    income: Decimal

class AdminSalesSummaryResponse(BaseResponse):
    total_sales: int
    total_units_sold: int
    total_products: int
    total_shops: int
    total_users: int
    income: Decimal

class ShopsListResponse(BaseResponse):
    shops: List[ShopInfo]
    count: int
