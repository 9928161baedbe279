# app/api/auth.py
from fastapi import APIRouter, HTTPException, Response
import logging

from app.config.settings import settings
from app.core.auth.service import AuthService
from app.core.auth.schemas import TokenRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/jwt", response_model=TokenResponse)
async def create_token(user_info: TokenRequest, response: Response):
    """
    Emitir token de sesión firmado

    **Body:**
    ```json
        {
            "email": "owner@shop.com"
        }
    ```

    El token se guarda en una cookie HTTP-only, `SameSite=None`, `Secure`.
    """
    try:
        token_data = {"email": user_info.email}
        if user_info.name:
            token_data["name"] = user_info.name

        token = AuthService.create_access_token(data=token_data)
    except Exception as e:
        logger.error(f"Error generando token: {e}")
        raise HTTPException(status_code=500, detail="Error generando token")

    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        httponly=True,
        samesite="none",
        secure=True,
        max_age=settings.access_token_expire_hours * 3600
    )

    return TokenResponse(
        message="Token generado exitosamente",
        userToken=token,
        expires_in_hours=settings.access_token_expire_hours
    )

@router.post("/logout")
async def logout(response: Response):
    """Eliminar la cookie de sesión"""
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        samesite="none",
        secure=True
    )
    return {"message": "Logout exitoso"}
