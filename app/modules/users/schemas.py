# app/modules/users/schemas.py
from pydantic import BaseModel, Field, validator
from typing import Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse

class UserCreateRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255, description="Email del usuario")
    name: Optional[str] = Field(None, max_length=255, description="Nombre visible")
    photo_url: Optional[str] = Field(None, max_length=500, description="Foto de perfil")

    @validator('email')
    def validate_email(cls, v):
        v = v.strip().lower()
        if '@' not in v:
            raise ValueError('Email inválido')
        return v

class ShopInfoUpdateRequest(BaseModel):
    shop_id: Optional[int] = Field(None, description="ID de la tienda")
    shop_name: Optional[str] = Field(None, max_length=255)
    shop_logo: Optional[str] = Field(None, max_length=500)

class UserInfo(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    photo_url: Optional[str] = None
    role: str
    shop_id: Optional[int] = None
    shop_name: Optional[str] = None
    shop_logo: Optional[str] = None
    income: Decimal = Decimal("0")
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class UserResponse(BaseResponse):
    created: bool = False
    user: UserInfo
