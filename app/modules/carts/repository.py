# app/modules/carts/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError
from typing import Dict, Any, List, Optional

from app.shared.database.models import CartItem

class CartsRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_line(self, owner_email: str, product_id: int) -> Optional[CartItem]:
        return self.db.query(CartItem).filter(
            and_(
                CartItem.owner_email == owner_email,
                CartItem.product_id == product_id
            )
        ).first()

    def list_lines(self, owner_email: str) -> List[CartItem]:
        """Líneas pendientes del propietario (sin orden garantizado)"""
        return self.db.query(CartItem).filter(CartItem.owner_email == owner_email).all()

    def _increment_line(self, owner_email: str, product_id: int) -> int:
        return self.db.query(CartItem).filter(
            and_(
                CartItem.owner_email == owner_email,
                CartItem.product_id == product_id
            )
        ).update(
            {CartItem.sold_quantity: CartItem.sold_quantity + 1},
            synchronize_session=False
        )

    def upsert_line(self, owner_email: str, product_id: int, item: Dict[str, Any]) -> CartItem:
        """
        Agregar producto al carrito.

        Si la línea existe suma exactamente 1 a sold_quantity; si no, la crea
        con sold_quantity = 1 y la copia de precios de `item`.
        """
        if not self._increment_line(owner_email, product_id):
            line = CartItem(
                owner_email=owner_email,
                product_id=product_id,
                shop_id=item['shop_id'],
                product_name=item.get('product_name'),
                product_cost=item['product_cost'],
                selling_price=item['selling_price'],
                sold_quantity=1
            )
            self.db.add(line)
            try:
                self.db.commit()
            except IntegrityError:
                # La línea se creó en paralelo: incrementar la existente
                self.db.rollback()
                self._increment_line(owner_email, product_id)
                self.db.commit()
        else:
            self.db.commit()

        return self.get_line(owner_email, product_id)

    def remove_line(self, owner_email: str, product_id: int) -> int:
        """Eliminar la línea; si no existe no hace nada. Returns filas eliminadas."""
        deleted = self.db.query(CartItem).filter(
            and_(
                CartItem.owner_email == owner_email,
                CartItem.product_id == product_id
            )
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted
