# app/modules/users/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user, get_admin_user
from app.shared.database.models import User
from .service import UsersService
from .schemas import UserCreateRequest, ShopInfoUpdateRequest, UserInfo, UserResponse

router = APIRouter()

@router.get("/users")
async def get_users(
    current_user: User = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """Listar todos los usuarios (solo admin)"""
    service = UsersService(db)
    return await service.list_users()

@router.post("/users", response_model=UserResponse)
async def create_user(
    user_data: UserCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Registrar usuario

    - El email es único: un segundo registro devuelve el usuario existente
    - El rol siempre inicia como `user`
    """
    service = UsersService(db)
    return await service.create_user(user_data)

@router.get("/user/me", response_model=UserInfo)
async def get_me(current_user: User = Depends(get_current_user)):
    """Obtener información del usuario actual"""
    return UserInfo.model_validate(current_user)

@router.put("/user/addShopInfo")
async def add_shop_info(
    shop_info: ShopInfoUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Combinar campos de la tienda en el registro del usuario actual"""
    service = UsersService(db)
    return await service.add_shop_info(current_user, shop_info)
