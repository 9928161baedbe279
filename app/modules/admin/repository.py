# app/modules/admin/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import and_, func
from typing import Dict, Any, List, Optional
from decimal import Decimal

from app.config.settings import settings
from app.shared.database.models import User, Shop, Product

class AdminRepository:
    """Acceso a datos de la cuenta admin y totales de la plataforma"""

    def __init__(self, db: Session):
        self.db = db
        self.admin_email = settings.admin_email

    def get_admin_account(self) -> Optional[User]:
        """La cuenta admin es la configurada en settings, no 'el primer admin'"""
        return self.db.query(User).filter(
            and_(
                User.email == self.admin_email,
                User.role == 'admin'
            )
        ).first()

    def credit_income(self, amount: Decimal) -> int:
        """
        Sumar ingresos a la cuenta admin en un único UPDATE.

        No hace commit: el llamador decide la transacción.
        """
        return self.db.query(User).filter(
            and_(
                User.email == self.admin_email,
                User.role == 'admin'
            )
        ).update(
            {User.income: User.income + amount},
            synchronize_session=False
        )

    def get_lifetime_totals(self) -> Dict[str, Any]:
        """Totales desde los contadores vivos de productos (no desde el log de ventas)"""
        totals = self.db.query(
            func.coalesce(func.sum(Product.sales_count * Product.selling_price), 0).label('total_sales'),
            func.coalesce(func.sum(Product.sales_count), 0).label('total_units_sold'),
            func.count(Product.id).label('total_products')
        ).first()

        return {
            "total_sales": int(totals.total_sales or 0),
            "total_units_sold": int(totals.total_units_sold or 0),
            "total_products": int(totals.total_products or 0),
            "total_shops": self.db.query(func.count(Shop.id)).scalar() or 0,
            "total_users": self.db.query(func.count(User.id)).scalar() or 0
        }

    def list_shops(self) -> List[Shop]:
        return self.db.query(Shop).order_by(Shop.id).all()
