# app/shared/services/inventory_service.py
from typing import Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy import and_
import logging

from app.shared.database.models import Product

logger = logging.getLogger(__name__)

class InventoryService:
    """Ledger de inventario: cantidad disponible y ventas acumuladas por producto"""

    @staticmethod
    def apply_sale(db: Session, product_id: int, sold_quantity: int) -> int:
        """
        Aplicar una venta al producto en un único UPDATE condicional.

        La guarda solo exige quantity > 0: un producto agotado nunca se modifica,
        pero una venta mayor que el stock disponible sí se aplica y puede dejar
        la cantidad en negativo.

        Args:
            db: Sesión de base de datos
            product_id: ID del producto
            sold_quantity: Unidades vendidas

        Returns:
            int: filas modificadas (0 si el producto no existe o está agotado)
        """
        modified = db.query(Product).filter(
            and_(
                Product.id == product_id,
                Product.quantity > 0
            )
        ).update(
            {
                Product.sales_count: Product.sales_count + sold_quantity,
                Product.quantity: Product.quantity - sold_quantity
            },
            synchronize_session=False
        )
        db.commit()

        if not modified:
            logger.warning(f"Producto {product_id} no modificado (inexistente o agotado)")

        return modified

    @staticmethod
    def check_product_availability(db: Session, product_id: int) -> Dict[str, Any]:
        """Verificar disponibilidad sin modificar (solo lectura)"""
        product = db.query(Product).filter(Product.id == product_id).first()

        if not product:
            return {"available": False, "quantity": 0, "can_sell": False}

        return {
            "available": product.quantity > 0,
            "quantity": product.quantity,
            "can_sell": product.quantity > 0
        }
