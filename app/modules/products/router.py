# app/modules/products/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.shared.database.models import User
from .service import ProductsService
from .schemas import (
    ProductCreateRequest, ProductUpdateRequest,
    ProductResponse, ProductListResponse
)

router = APIRouter()

@router.get("/products", response_model=ProductListResponse)
async def get_products(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Listar productos del usuario actual"""
    service = ProductsService(db)
    return await service.list_products(current_user)

@router.post("/products", response_model=ProductResponse, status_code=201)
async def create_product(
    product_data: ProductCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Crear producto

    **Precio de venta:**
    - price_with_tax = cost + cost * 7.5%
    - selling_price = ceil(price_with_tax + price_with_tax * margin / 100)

    **Validaciones:**
    - 403 si la tienda alcanzó su límite de productos
    """
    service = ProductsService(db)
    return await service.create_product(product_data, current_user)

@router.get("/product/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Obtener un producto del usuario actual"""
    service = ProductsService(db)
    return await service.get_product(product_id, current_user)

@router.put("/product/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Actualizar producto (el precio de venta se recalcula)"""
    service = ProductsService(db)
    return await service.update_product(product_id, product_data, current_user)

@router.delete("/product/{product_id}")
async def delete_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    """Eliminar producto"""
    service = ProductsService(db)
    return await service.delete_product(product_id)
