# app/modules/shops/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.shared.database.models import User
from .service import ShopsService
from .schemas import (
    ShopCreateRequest, ShopResponse,
    ProductLimitIncreaseRequest, ProductLimitIncreaseResponse
)

router = APIRouter()

@router.post("/shops", response_model=ShopResponse, status_code=201)
async def create_shop(
    shop_data: ShopCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Crear tienda para el usuario actual

    **Reglas:**
    - Una sola tienda por propietario (403 si ya existe)
    - Límite inicial de productos: 3
    """
    service = ShopsService(db)
    return await service.create_shop(shop_data, current_user)

@router.get("/shops/me", response_model=ShopResponse)
async def get_my_shop(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Obtener la tienda del usuario actual"""
    service = ShopsService(db)
    return await service.get_my_shop(current_user)

@router.put("/shops/increaseProductLimit", response_model=ProductLimitIncreaseResponse)
async def increase_product_limit(
    request: ProductLimitIncreaseRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Aumentar el límite de productos de la tienda

    El monto pagado se abona a los ingresos de la cuenta admin.
    """
    service = ShopsService(db)
    return await service.increase_product_limit(request, current_user)
