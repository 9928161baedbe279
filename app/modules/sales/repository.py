from sqlalchemy.orm import Session
from typing import Dict, Any, List
from datetime import datetime
from decimal import Decimal
import logging

from app.shared.database.models import SaleItem
from app.shared.services.pricing_service import calculate_profit_after_cut

logger = logging.getLogger(__name__)

ANONYMOUS_SELLER = "anonymous"

class SalesRepository:
    def __init__(self, db: Session):
        self.db = db

    def commit_batch(self, line_items: List[Dict[str, Any]]) -> List[SaleItem]:
        """
        Registrar un lote de ventas en una sola transacción.

        Cada línea recibe `sold_at`. Si alguna falla no queda ninguna insertada.

        Returns:
            List[SaleItem]: ventas registradas, con ID
        """
        if not line_items:
            return []

        sold_at = datetime.now()
        sale_items = []

        try:
            for item in line_items:
                item['sold_at'] = sold_at
                sale_items.append(SaleItem(
                    owner_email=item['owner_email'],
                    shop_id=item['shop_id'],
                    product_id=item['product_id'],
                    product_name=item.get('product_name'),
                    product_cost=item['product_cost'],
                    selling_price=item['selling_price'],
                    sold_quantity=item['sold_quantity'],
                    seller_name=item.get('seller_name'),
                    sold_at=sold_at
                ))

            self.db.add_all(sale_items)
            self.db.flush()
            self.db.commit()

            logger.info(f"{len(sale_items)} ventas registradas")
            return sale_items

        except Exception:
            logger.exception("Error registrando lote de ventas")
            self.db.rollback()
            raise

    def list_by_shop(self, shop_id: int) -> List[SaleItem]:
        return self.db.query(SaleItem).filter(
            SaleItem.shop_id == shop_id
        ).order_by(SaleItem.sold_at.desc(), SaleItem.id.desc()).all()

    def get_sales_summary_by_seller(self, shop_id: int) -> List[Dict[str, Any]]:
        """
        Resumen de ventas de la tienda agrupado por vendedor.

        total_profit = ceil((total_sales - total_invest) * (1 - comisión))
        """
        sales = self.list_by_shop(shop_id)

        seller_totals = {}
        for sale in sales:
            seller = sale.seller_name or ANONYMOUS_SELLER
            if seller not in seller_totals:
                seller_totals[seller] = {
                    'units_sold': 0,
                    'total_sales': Decimal('0'),
                    'total_invest': Decimal('0')
                }

            data = seller_totals[seller]
            data['units_sold'] += sale.sold_quantity
            data['total_sales'] += sale.sold_quantity * Decimal(sale.selling_price)
            data['total_invest'] += sale.sold_quantity * Decimal(str(sale.product_cost))

        return sorted(
            [
                {
                    'seller_name': seller,
                    'units_sold': data['units_sold'],
                    'total_sales': data['total_sales'],
                    'total_invest': data['total_invest'],
                    'total_profit': calculate_profit_after_cut(data['total_sales'], data['total_invest'])
                }
                for seller, data in seller_totals.items()
            ],
            key=lambda x: x['total_sales'],
            reverse=True
        )
