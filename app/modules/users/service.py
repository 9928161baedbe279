# app/modules/users/service.py
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Dict, Any
import logging

from .repository import UsersRepository
from .schemas import UserCreateRequest, ShopInfoUpdateRequest, UserInfo, UserResponse
from app.shared.database.models import User

logger = logging.getLogger(__name__)

class UsersService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = UsersRepository(db)

    async def create_user(self, user_data: UserCreateRequest) -> UserResponse:
        """Crear usuario; si el email ya existe se devuelve el registro actual"""
        existing = self.repository.get_by_email(user_data.email)
        if existing:
            return UserResponse(
                success=True,
                message="El usuario ya existe",
                created=False,
                user=UserInfo.model_validate(existing)
            )

        try:
            user = self.repository.create_user(user_data.model_dump())
        except IntegrityError:
            # Otro request registró el mismo email en paralelo
            self.db.rollback()
            user = self.repository.get_by_email(user_data.email)
            return UserResponse(
                success=True,
                message="El usuario ya existe",
                created=False,
                user=UserInfo.model_validate(user)
            )
        except Exception as e:
            logger.exception("Error creando usuario")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error creando usuario: {str(e)}")

        logger.info(f"Usuario creado: {user.email}")
        return UserResponse(
            success=True,
            message="Usuario creado exitosamente",
            created=True,
            user=UserInfo.model_validate(user)
        )

    async def add_shop_info(self, current_user: User, shop_info: ShopInfoUpdateRequest) -> Dict[str, Any]:
        """Vincular datos de la tienda al usuario actual"""
        fields = shop_info.model_dump(exclude_unset=True)

        try:
            modified = self.repository.update_shop_info(current_user.email, fields)
        except Exception as e:
            logger.exception("Error actualizando usuario")
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error actualizando usuario: {str(e)}")

        return {
            "success": True,
            "message": "Información de tienda actualizada",
            "modified_count": modified,
            "updated_fields": sorted(fields.keys())
        }

    async def list_users(self) -> Dict[str, Any]:
        users = self.repository.list_users()
        return {
            "success": True,
            "users": [UserInfo.model_validate(u).model_dump() for u in users],
            "count": len(users)
        }
