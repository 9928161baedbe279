# app/modules/users/repository.py
from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional

from app.shared.database.models import User

class UsersRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

    def create_user(self, user_data: Dict[str, Any]) -> User:
        """Crear usuario con rol por defecto"""
        user = User(
            email=user_data['email'],
            name=user_data.get('name'),
            photo_url=user_data.get('photo_url'),
            role='user',
            income=0
        )

        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_shop_info(self, email: str, shop_info: Dict[str, Any]) -> int:
        """Combinar campos de tienda en el registro del usuario"""
        if not shop_info:
            return 0

        updated = self.db.query(User).filter(User.email == email).update(
            shop_info, synchronize_session=False
        )
        self.db.commit()
        return updated
