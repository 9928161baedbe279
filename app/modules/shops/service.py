# app/modules/shops/service.py
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from .repository import ShopsRepository
from .schemas import (
    ShopCreateRequest, ShopInfo, ShopResponse,
    ProductLimitIncreaseRequest, ProductLimitIncreaseResponse
)
from app.config.settings import settings
from app.modules.admin.repository import AdminRepository
from app.shared.database.models import User, Shop

logger = logging.getLogger(__name__)

class ShopsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ShopsRepository(db)
        self.admin_repository = AdminRepository(db)

    def get_owner_shop(self, owner_email: str) -> Shop:
        """Tienda del propietario o 404"""
        shop = self.repository.get_by_owner(owner_email)
        if not shop:
            raise HTTPException(status_code=404, detail="El usuario no tiene tienda")
        return shop

    async def create_shop(self, shop_data: ShopCreateRequest, current_user: User) -> ShopResponse:
        """Crear la tienda del usuario actual (solo una por propietario)"""
        try:
            shop = self.repository.create_shop(
                shop_data=shop_data.model_dump(),
                owner_email=current_user.email,
                owner_name=current_user.name,
                product_limit=settings.default_product_limit
            )
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Tienda duplicada rechazada para {current_user.email}")
            raise HTTPException(
                status_code=403,
                detail="Forbidden, no puedes crear más de una tienda"
            )
        except Exception as e:
            logger.exception("Error creando tienda")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error creando tienda: {str(e)}")

        logger.info(f"Tienda {shop.id} creada para {current_user.email}")
        return ShopResponse(
            success=True,
            message="Tienda creada exitosamente",
            shop=ShopInfo.model_validate(shop)
        )

    async def get_my_shop(self, current_user: User) -> ShopResponse:
        shop = self.get_owner_shop(current_user.email)
        return ShopResponse(
            success=True,
            message="Tienda obtenida",
            shop=ShopInfo.model_validate(shop)
        )

    async def increase_product_limit(
        self,
        request: ProductLimitIncreaseRequest,
        current_user: User
    ) -> ProductLimitIncreaseResponse:
        """
        Aumentar el límite de productos y abonar el pago a la cuenta admin.

        Ambos UPDATE van en la misma transacción: o se aplican los dos o ninguno.
        """
        try:
            modified = self.repository.increase_product_limit(current_user.email, request.increase_by)
            if not modified:
                self.db.rollback()
                raise HTTPException(status_code=404, detail="El usuario no tiene tienda")

            credited = self.admin_repository.credit_income(request.amount)
            if not credited:
                self.db.rollback()
                raise HTTPException(status_code=404, detail="Cuenta admin no encontrada")

            self.db.commit()

        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Error aumentando límite de productos")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error aumentando límite: {str(e)}")

        shop = self.get_owner_shop(current_user.email)
        logger.info(
            f"Límite de tienda {shop.id} aumentado en {request.increase_by} "
            f"(nuevo límite: {shop.product_limit}), ingreso admin +{request.amount}"
        )

        return ProductLimitIncreaseResponse(
            success=True,
            message="Límite de productos aumentado",
            shop=ShopInfo.model_validate(shop),
            income_credited=request.amount
        )
