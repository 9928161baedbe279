# app/modules/admin/__init__.py

"""
Módulo Admin - Funcionalidades del Administrador

- Resumen global de ventas desde los contadores de productos
- Ingresos de la cuenta admin (comisión por aumento de límites)
- Listado de tiendas

La cuenta admin es explícita: el usuario con rol `admin` cuyo email es
`settings.admin_email`.

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as admin_router
from .service import AdminService
from .repository import AdminRepository

__all__ = [
    "admin_router",
    "AdminService",
    "AdminRepository"
]
