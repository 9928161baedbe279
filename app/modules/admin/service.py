# app/modules/admin/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from decimal import Decimal
import logging

from .repository import AdminRepository
from .schemas import (
    IncomeIncreaseRequest, IncomeResponse,
    AdminSalesSummaryResponse, ShopsListResponse
)
from app.modules.shops.schemas import ShopInfo

logger = logging.getLogger(__name__)

class AdminService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = AdminRepository(db)

    async def get_sales_summary(self) -> AdminSalesSummaryResponse:
        """
        Totales de la plataforma.

        total_sales usa sales_count * selling_price de cada producto, así que
        refleja ventas de toda la vida aunque se borren registros de venta.
        """
        totals = self.repository.get_lifetime_totals()
        admin = self.repository.get_admin_account()

        return AdminSalesSummaryResponse(
            success=True,
            message="Resumen global de ventas",
            income=admin.income if admin else Decimal("0"),
            **totals
        )

    async def increase_income(self, request: IncomeIncreaseRequest) -> IncomeResponse:
        """Abonar un monto a los ingresos de la cuenta admin"""
        try:
            credited = self.repository.credit_income(request.income)
            if not credited:
                self.db.rollback()
                raise HTTPException(status_code=404, detail="Cuenta admin no encontrada")
            self.db.commit()
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Error abonando ingresos")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error abonando ingresos: {str(e)}")

        admin = self.repository.get_admin_account()
        logger.info(f"Ingreso admin +{request.income} (total: {admin.income})")

        return IncomeResponse(
            success=True,
            message="Ingreso registrado",
            admin_email=admin.email,
            income=admin.income
        )

    async def list_shops(self) -> ShopsListResponse:
        shops = self.repository.list_shops()
        return ShopsListResponse(
            success=True,
            message="Tiendas registradas",
            shops=[ShopInfo.model_validate(s) for s in shops],
            count=len(shops)
        )
