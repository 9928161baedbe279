# app/modules/products/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Dict, Any
import logging

from .repository import ProductsRepository
from .schemas import (
    ProductCreateRequest, ProductUpdateRequest,
    ProductInfo, ProductResponse, ProductListResponse
)
from app.modules.shops.repository import ShopsRepository
from app.shared.database.models import User
from app.shared.services.pricing_service import pricing_service

logger = logging.getLogger(__name__)

class ProductsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductsRepository(db)
        self.shops_repository = ShopsRepository(db)
        self.pricing = pricing_service

    async def list_products(self, current_user: User) -> ProductListResponse:
        products = self.repository.list_by_owner(current_user.email)
        shop = self.shops_repository.get_by_owner(current_user.email)

        return ProductListResponse(
            success=True,
            message="Productos obtenidos",
            products=[ProductInfo.model_validate(p) for p in products],
            count=len(products),
            product_limit=shop.product_limit if shop else None
        )

    async def get_product(self, product_id: int, current_user: User) -> ProductResponse:
        product = self.repository.get_owner_product(product_id, current_user.email)
        if not product:
            raise HTTPException(status_code=404, detail=f"Producto {product_id} no encontrado")

        return ProductResponse(
            success=True,
            message="Producto obtenido",
            product=ProductInfo.model_validate(product)
        )

    async def create_product(self, product_data: ProductCreateRequest, current_user: User) -> ProductResponse:
        """
        Crear producto

        - Requiere tienda
        - Respeta el límite de productos de la tienda (403)
        - Calcula el precio de venta
        """
        shop = self.shops_repository.get_by_owner(current_user.email)
        if not shop:
            raise HTTPException(status_code=404, detail="Debes crear una tienda antes de agregar productos")

        selling_price = self._calculate_price(product_data.cost, product_data.profit_margin)

        try:
            product = self.repository.create_product(
                product_data=product_data.model_dump(),
                shop=shop,
                selling_price=selling_price
            )
        except Exception as e:
            logger.exception("Error creando producto")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error creando producto: {str(e)}")

        if product is None:
            logger.info(f"Límite de productos alcanzado en tienda {shop.id}")
            raise HTTPException(
                status_code=403,
                detail="Límite de productos alcanzado. Aumenta el límite para agregar más."
            )

        logger.info(f"Producto {product.id} creado en tienda {shop.id} - precio {selling_price}")
        return ProductResponse(
            success=True,
            message="Producto creado exitosamente",
            product=ProductInfo.model_validate(product)
        )

    async def update_product(
        self,
        product_id: int,
        product_data: ProductUpdateRequest,
        current_user: User
    ) -> ProductResponse:
        """Actualizar producto; el precio de venta se recalcula siempre"""
        product = self.repository.get_owner_product(product_id, current_user.email)
        if not product:
            raise HTTPException(status_code=404, detail=f"Producto {product_id} no encontrado")

        fields = product_data.model_dump(exclude_unset=True, exclude_none=True)

        cost = fields.get('cost', product.cost)
        margin = fields.get('profit_margin', product.profit_margin)
        fields['selling_price'] = self._calculate_price(cost, margin)

        try:
            product = self.repository.update_product(product, fields)
        except Exception as e:
            logger.exception("Error actualizando producto")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error actualizando producto: {str(e)}")

        return ProductResponse(
            success=True,
            message="Producto actualizado exitosamente",
            product=ProductInfo.model_validate(product)
        )

    async def delete_product(self, product_id: int) -> Dict[str, Any]:
        try:
            deleted = self.repository.delete_product(product_id)
        except Exception as e:
            logger.exception("Error eliminando producto")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error eliminando producto: {str(e)}")

        return {
            "success": True,
            "message": "Producto eliminado" if deleted else "Producto no encontrado",
            "deleted_count": 1 if deleted else 0
        }

    def _calculate_price(self, cost, profit_margin) -> int:
        try:
            return self.pricing.calculate_selling_price(cost, profit_margin)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
