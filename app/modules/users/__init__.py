# app/modules/users/__init__.py
"""
Módulo de Usuarios

- Registro de usuarios (email único)
- Vínculo del usuario con su tienda

Arquitectura:
- router.py: Endpoints de usuarios
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import UsersService
from .repository import UsersRepository

__all__ = [
    "router",
    "UsersService",
    "UsersRepository"
]
