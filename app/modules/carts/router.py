# app/modules/carts/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.shared.database.models import User
from .service import CartsService
from .schemas import CartUpsertRequest, CartItemResponse, CartListResponse

router = APIRouter()

@router.get("/carts", response_model=CartListResponse)
async def get_cart(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Líneas pendientes de venta del usuario actual"""
    service = CartsService(db)
    return await service.list_cart(current_user)

@router.put("/carts", response_model=CartItemResponse)
async def upsert_cart_item(
    request: CartUpsertRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Agregar producto al carrito

    - Si ya está en el carrito suma 1 unidad
    - Si no, crea la línea con 1 unidad
    """
    service = CartsService(db)
    return await service.add_to_cart(request.product_id, current_user)

@router.delete("/carts/{product_id}")
async def remove_cart_item(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Quitar producto del carrito (sin error si no estaba)"""
    service = CartsService(db)
    return await service.remove_from_cart(product_id, current_user)
