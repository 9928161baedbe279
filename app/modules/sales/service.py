# app/modules/sales/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Any, Dict, List
from decimal import Decimal
import asyncio
import logging

from .repository import SalesRepository
from .schemas import (
    CheckoutRequest, CheckoutResponse, SaleItemInfo,
    SalesListResponse, SellerSummary, ShopSalesSummaryResponse
)
from app.modules.carts.repository import CartsRepository
from app.modules.shops.repository import ShopsRepository
from app.shared.database.models import User, Shop
from app.shared.services.inventory_service import InventoryService
from app.shared.services.pricing_service import calculate_profit_after_cut

logger = logging.getLogger(__name__)

class SalesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)
        self.carts_repository = CartsRepository(db)
        self.shops_repository = ShopsRepository(db)
        self.inventory_service = InventoryService()

    async def checkout(self, request: CheckoutRequest, current_user: User) -> CheckoutResponse:
        """
        Convertir líneas del carrito en ventas.

        Pasos:
        1. Registrar el lote de ventas (todo o nada). Si falla, 500 sin efectos.
        2. Aplicar cada línea al inventario.
        3. Quitar cada línea del carrito.
        4. Responder con el resultado del lote y de cada línea.

        Los pasos 2 y 3 intentan todas las líneas: un fallo individual queda en
        su resultado y no revierte la venta registrada.

        Las corrutinas de cada línea comparten la sesión síncrona del request y
        no ceden el control, así que gather las ejecuta una tras otra; gather
        solo garantiza que se recojan todos los resultados sin cortar en el
        primer error.
        """
        lines = self._resolve_lines(request, current_user)
        logger.info(f"Checkout de {current_user.email} - {len(lines)} líneas")

        # PASO 1: Registrar ventas
        try:
            sale_items = self.repository.commit_batch(lines)
            inserted_ids = [sale.id for sale in sale_items]
        except Exception as e:
            logger.error(f"Checkout abortado para {current_user.email}: {e}")
            raise HTTPException(status_code=500, detail=f"Error registrando ventas: {str(e)}")

        # PASO 2: Inventario
        inventory_results = await asyncio.gather(
            *(self._apply_to_inventory(line) for line in lines),
            return_exceptions=True
        )
        inventory = [
            self._as_outcome(line, result, "modified_count")
            for line, result in zip(lines, inventory_results)
        ]

        # PASO 3: Carrito
        cart_results = await asyncio.gather(
            *(self._clear_cart_line(current_user.email, line) for line in lines),
            return_exceptions=True
        )
        cart = [
            self._as_outcome(line, result, "deleted_count")
            for line, result in zip(lines, cart_results)
        ]

        partial_failure = any(
            outcome["error"] or not outcome["modified_count"] for outcome in inventory
        ) or any(outcome["error"] for outcome in cart)

        if partial_failure:
            logger.warning(f"Checkout de {current_user.email} con fallos parciales")

        return CheckoutResponse(
            success=True,
            message="Venta registrada exitosamente",
            sales={
                "inserted_count": len(inserted_ids),
                "inserted_ids": inserted_ids
            },
            inventory=inventory,
            cart=cart,
            partial_failure=partial_failure
        )

    async def list_sales(self, current_user: User) -> SalesListResponse:
        shop = self._get_shop(current_user)
        sales = self.repository.list_by_shop(shop.id)

        return SalesListResponse(
            success=True,
            message="Ventas de la tienda",
            sales=[SaleItemInfo.model_validate(s) for s in sales],
            count=len(sales)
        )

    async def get_sales_summary(self, current_user: User) -> ShopSalesSummaryResponse:
        """Resumen de ventas, inversión y ganancia por vendedor de la tienda"""
        shop = self._get_shop(current_user)
        sellers = self.repository.get_sales_summary_by_seller(shop.id)
        sales = self.repository.list_by_shop(shop.id)

        total_sales = sum((s['total_sales'] for s in sellers), Decimal('0'))
        total_invest = sum((s['total_invest'] for s in sellers), Decimal('0'))

        return ShopSalesSummaryResponse(
            success=True,
            message=f"Resumen de ventas de {shop.name}",
            shop_id=shop.id,
            shop_name=shop.name,
            sellers=[SellerSummary(**s) for s in sellers],
            totals={
                "units_sold": sum(s['units_sold'] for s in sellers),
                "total_sales": float(total_sales),
                "total_invest": float(total_invest),
                "total_profit": calculate_profit_after_cut(total_sales, total_invest)
            },
            sales=[SaleItemInfo.model_validate(s) for s in sales]
        )

    # MÉTODOS PRIVADOS HELPERS

    def _get_shop(self, current_user: User) -> Shop:
        shop = self.shops_repository.get_by_owner(current_user.email)
        if not shop:
            raise HTTPException(status_code=404, detail="El usuario no tiene tienda")
        return shop

    def _resolve_lines(self, request: CheckoutRequest, current_user: User) -> List[Dict[str, Any]]:
        """Líneas a vender: las del request o, si no vienen, las del carrito"""
        if request.items is None:
            return [
                {
                    "owner_email": current_user.email,
                    "shop_id": line.shop_id,
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "product_cost": line.product_cost,
                    "selling_price": line.selling_price,
                    "sold_quantity": line.sold_quantity,
                    "seller_name": current_user.name
                }
                for line in self.carts_repository.list_lines(current_user.email)
            ]

        if not request.items:
            return []

        shop = self._get_shop(current_user)
        return [
            {
                **item.model_dump(),
                "owner_email": current_user.email,
                "shop_id": shop.id,
                "seller_name": item.seller_name or current_user.name
            }
            for item in request.items
        ]

    async def _apply_to_inventory(self, line: Dict[str, Any]) -> Dict[str, Any]:
        try:
            modified = self.inventory_service.apply_sale(
                self.db, line["product_id"], line["sold_quantity"]
            )
            return {"product_id": line["product_id"], "modified_count": modified, "error": None}
        except Exception as e:
            logger.error(f"Error actualizando inventario del producto {line['product_id']}: {e}")
            self.db.rollback()
            return {"product_id": line["product_id"], "modified_count": 0, "error": str(e)}

    async def _clear_cart_line(self, owner_email: str, line: Dict[str, Any]) -> Dict[str, Any]:
        try:
            deleted = self.carts_repository.remove_line(owner_email, line["product_id"])
            return {"product_id": line["product_id"], "deleted_count": deleted, "error": None}
        except Exception as e:
            logger.error(f"Error limpiando carrito del producto {line['product_id']}: {e}")
            self.db.rollback()
            return {"product_id": line["product_id"], "deleted_count": 0, "error": str(e)}

    @staticmethod
    def _as_outcome(line: Dict[str, Any], result: Any, count_key: str) -> Dict[str, Any]:
        if isinstance(result, BaseException):
            return {"product_id": line["product_id"], count_key: 0, "error": str(result)}
        return result
