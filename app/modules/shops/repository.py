# app/modules/shops/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import and_
from typing import Dict, Any, Optional

from app.shared.database.models import Shop

class ShopsRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_owner(self, owner_email: str) -> Optional[Shop]:
        return self.db.query(Shop).filter(Shop.owner_email == owner_email).first()

    def create_shop(self, shop_data: Dict[str, Any], owner_email: str, owner_name: Optional[str], product_limit: int) -> Shop:
        """
        Crear tienda. La unicidad por propietario la garantiza el índice único
        de owner_email: un duplicado lanza IntegrityError.
        """
        shop = Shop(
            owner_email=owner_email,
            owner_name=owner_name,
            name=shop_data['name'],
            logo=shop_data.get('logo'),
            description=shop_data.get('description'),
            location=shop_data.get('location'),
            product_limit=product_limit,
            product_count=0
        )

        self.db.add(shop)
        self.db.commit()
        self.db.refresh(shop)
        return shop

    def reserve_product_slot(self, shop_id: int) -> int:
        """Ocupar un cupo de producto solo si queda espacio (sin commit)"""
        return self.db.query(Shop).filter(
            and_(
                Shop.id == shop_id,
                Shop.product_count < Shop.product_limit
            )
        ).update(
            {Shop.product_count: Shop.product_count + 1},
            synchronize_session=False
        )

    def release_product_slot(self, shop_id: int) -> int:
        """Liberar un cupo de producto (sin commit)"""
        return self.db.query(Shop).filter(
            and_(
                Shop.id == shop_id,
                Shop.product_count > 0
            )
        ).update(
            {Shop.product_count: Shop.product_count - 1},
            synchronize_session=False
        )

    def increase_product_limit(self, owner_email: str, increase_by: int) -> int:
        """Aumentar el límite de productos (sin commit)"""
        return self.db.query(Shop).filter(Shop.owner_email == owner_email).update(
            {Shop.product_limit: Shop.product_limit + increase_by},
            synchronize_session=False
        )
