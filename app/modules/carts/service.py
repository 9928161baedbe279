# app/modules/carts/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Dict, Any
import logging

from .repository import CartsRepository
from .schemas import CartItemInfo, CartItemResponse, CartListResponse
from app.modules.products.repository import ProductsRepository
from app.shared.database.models import User
from app.shared.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

class CartsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = CartsRepository(db)
        self.products_repository = ProductsRepository(db)
        self.inventory_service = InventoryService()

    async def list_cart(self, current_user: User) -> CartListResponse:
        lines = self.repository.list_lines(current_user.email)
        items = [CartItemInfo.model_validate(line) for line in lines]

        return CartListResponse(
            success=True,
            message="Carrito obtenido",
            items=items,
            count=len(items),
            total_amount=sum(i.selling_price * i.sold_quantity for i in items)
        )

    async def add_to_cart(self, product_id: int, current_user: User) -> CartItemResponse:
        """
        Agregar una unidad del producto al carrito.

        Costo y precio de venta se copian en este momento: ediciones posteriores
        del producto no cambian las líneas pendientes.
        """
        product = self.products_repository.get_owner_product(product_id, current_user.email)
        if not product:
            raise HTTPException(status_code=404, detail=f"Producto {product_id} no encontrado")

        snapshot = {
            "shop_id": product.shop_id,
            "product_name": product.name,
            "product_cost": product.cost,
            "selling_price": product.selling_price
        }

        try:
            line = self.repository.upsert_line(current_user.email, product_id, snapshot)
        except Exception as e:
            logger.exception("Error agregando al carrito")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error agregando al carrito: {str(e)}")

        availability = self.inventory_service.check_product_availability(self.db, product_id)
        message = "Producto agregado al carrito"
        if line.sold_quantity > availability["quantity"]:
            message = (
                f"Producto agregado al carrito. Atención: {line.sold_quantity} unidades "
                f"en el carrito y {availability['quantity']} en stock"
            )
            logger.warning(
                f"Carrito de {current_user.email}: {line.sold_quantity} unidades de "
                f"producto {product_id} con stock {availability['quantity']}"
            )

        return CartItemResponse(
            success=True,
            message=message,
            cart_item=CartItemInfo.model_validate(line),
            availability=availability
        )

    async def remove_from_cart(self, product_id: int, current_user: User) -> Dict[str, Any]:
        """Quitar la línea del carrito (idempotente)"""
        try:
            deleted = self.repository.remove_line(current_user.email, product_id)
        except Exception as e:
            logger.exception("Error quitando del carrito")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error quitando del carrito: {str(e)}")

        return {
            "success": True,
            "message": "Línea eliminada" if deleted else "La línea no estaba en el carrito",
            "deleted_count": deleted
        }
