# app/modules/sales/router.py
from fastapi import APIRouter, Depends
from typing import Optional
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.shared.database.models import User
from .service import SalesService
from .schemas import (
    CheckoutRequest, CheckoutResponse,
    SalesListResponse, ShopSalesSummaryResponse
)

router = APIRouter()

@router.post("/sales", response_model=CheckoutResponse)
async def checkout(
    request: Optional[CheckoutRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Checkout: registrar las líneas del carrito como ventas

    **Incluye:**
    - Registro del lote de ventas con fecha automática (todo o nada)
    - Actualización de inventario por línea
    - Limpieza del carrito por línea

    Sin body o sin `items` se venden las líneas pendientes del carrito.

    **Fallos parciales:**
    - Una línea que no actualiza inventario o carrito no revierte la venta;
      se reporta en `inventory` / `cart` y en `partial_failure`
    """
    service = SalesService(db)
    return await service.checkout(request or CheckoutRequest(), current_user)

@router.get("/sales", response_model=SalesListResponse)
async def get_sales(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Historial de ventas de la tienda del usuario"""
    service = SalesService(db)
    return await service.list_sales(current_user)

@router.get("/salesSummary", response_model=ShopSalesSummaryResponse)
async def get_sales_summary(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Resumen de ventas por vendedor

    - total_sales = Σ sold_quantity * selling_price
    - total_invest = Σ sold_quantity * product_cost
    - total_profit = ceil((total_sales - total_invest) * 0.925)
    """
    service = SalesService(db)
    return await service.get_sales_summary(current_user)
