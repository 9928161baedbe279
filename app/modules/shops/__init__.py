# app/modules/shops/__init__.py
"""
Módulo de Tiendas

- Una tienda por propietario
- Límite de productos por tienda
- Aumento de límite con comisión para la cuenta admin
"""

from .router import router
from .service import ShopsService
from .repository import ShopsRepository

__all__ = [
    "router",
    "ShopsService",
    "ShopsRepository"
]
