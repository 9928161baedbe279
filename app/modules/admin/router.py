# app/modules/admin/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.auth.dependencies import get_admin_user
from app.shared.database.models import User
from .service import AdminService
from .schemas import (
    IncomeIncreaseRequest, IncomeResponse,
    AdminSalesSummaryResponse, ShopsListResponse
)

router = APIRouter()

@router.get("/salesSummary", response_model=AdminSalesSummaryResponse)
async def get_admin_sales_summary(
    current_user: User = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """
    Resumen global (solo admin)

    **Incluye:**
    - Ventas totales de la plataforma (Σ sales_count * selling_price)
    - Ingresos de la cuenta admin
    - Conteo de productos, tiendas y usuarios
    """
    service = AdminService(db)
    return await service.get_sales_summary()

@router.get("/shops", response_model=ShopsListResponse)
async def get_shops(
    current_user: User = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """Listar todas las tiendas (solo admin)"""
    service = AdminService(db)
    return await service.list_shops()

@router.patch("/increaseIncome", response_model=IncomeResponse)
async def increase_income(
    request: IncomeIncreaseRequest,
    db: Session = Depends(get_db)
):
    """Abonar un monto a los ingresos de la cuenta admin"""
    service = AdminService(db)
    return await service.increase_income(request)
