# app/modules/products/repository.py
from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional
import logging

from app.shared.database.models import Product, Shop
from app.modules.shops.repository import ShopsRepository

logger = logging.getLogger(__name__)

class ProductsRepository:
    def __init__(self, db: Session):
        self.db = db
        self.shops_repository = ShopsRepository(db)

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def get_owner_product(self, product_id: int, owner_email: str) -> Optional[Product]:
        return self.db.query(Product).filter(
            Product.id == product_id,
            Product.owner_email == owner_email
        ).first()

    def list_by_owner(self, owner_email: str) -> List[Product]:
        return self.db.query(Product).filter(
            Product.owner_email == owner_email
        ).order_by(Product.created_at.desc(), Product.id.desc()).all()

    def create_product(self, product_data: Dict[str, Any], shop: Shop, selling_price: int) -> Optional[Product]:
        """
        Crear producto ocupando un cupo de la tienda.

        El cupo se toma con un UPDATE condicional en la misma transacción que
        el INSERT. Returns None si la tienda ya alcanzó su límite.
        """
        if not self.shops_repository.reserve_product_slot(shop.id):
            self.db.rollback()
            return None

        product = Product(
            shop_id=shop.id,
            owner_email=shop.owner_email,
            name=product_data['name'],
            image_url=product_data.get('image_url'),
            location=product_data.get('location'),
            description=product_data.get('description'),
            quantity=product_data.get('quantity', 0),
            cost=product_data['cost'],
            profit_margin=product_data['profit_margin'],
            selling_price=selling_price,
            sales_count=0
        )

        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product: Product, fields: Dict[str, Any]) -> Product:
        for field, value in fields.items():
            setattr(product, field, value)

        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: int) -> bool:
        """Eliminar producto y liberar su cupo en la tienda"""
        product = self.get_by_id(product_id)
        if not product:
            return False

        shop_id = product.shop_id
        self.db.delete(product)
        self.shops_repository.release_product_slot(shop_id)
        self.db.commit()
        return True
