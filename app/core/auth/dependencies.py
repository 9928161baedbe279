from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from app.config.settings import settings
from app.shared.database.models import User
from app.core.auth.service import AuthService

# El token viaja en cookie HTTP-only; el header Bearer se acepta como alternativa
security = HTTPBearer(auto_error=False)

class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Not Authorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Forbidden"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )

def get_token_payload(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> dict:
    """Extraer y verificar el token de sesión"""
    token = request.cookies.get(settings.cookie_name)
    if not token and credentials:
        token = credentials.credentials

    if not token:
        raise AuthenticationError("Not Authorized")

    payload = AuthService.verify_token(token)
    if payload is None:
        raise AuthenticationError("Token inválido o expirado")

    if not payload.get("email"):
        raise AuthenticationError("Payload del token inválido")

    return payload

async def get_current_user(
    payload: dict = Depends(get_token_payload),
    db: Session = Depends(get_db)
) -> User:
    """Obtener usuario actual desde el token"""
    email = payload["email"].strip().lower()
    user = db.query(User).filter(User.email == email).first()

    if user is None:
        raise AuthenticationError("Usuario no encontrado")

    return user

def require_roles(allowed_roles: List[str]):
    """Factory para crear dependency que requiere roles específicos"""
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            raise AuthorizationError(
                f"Rol '{current_user.role}' no autorizado. Roles permitidos: {allowed_roles}"
            )
        return current_user
    return role_checker

def get_admin_user(current_user: User = Depends(require_roles(["admin"]))):
    """Dependency para administradores"""
    return current_user
