from pydantic import BaseModel, Field, validator
from typing import Optional

class TokenRequest(BaseModel):
    """Schema para emitir el token de sesión"""
    email: str = Field(..., min_length=3, description="Email del usuario")
    name: Optional[str] = Field(None, description="Nombre visible")

    @validator('email')
    def normalize_email(cls, v):
        # Mismo formato con el que se guardan los usuarios
        return v.strip().lower()

    class Config:
        json_schema_extra = {
            "example": {
                "email": "owner@shop.com",
                "name": "Shop Owner"
            }
        }

class TokenResponse(BaseModel):
    """Schema para respuesta de token"""
    message: str
    userToken: str
    token_type: str = "bearer"
    expires_in_hours: int

    class Config:
        json_schema_extra = {
            "example": {
                "message": "Token generado exitosamente",
                "userToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in_hours": 1
            }
        }
