# app/modules/products/__init__.py
"""
Módulo de Productos

- CRUD de productos de la tienda
- Precio de venta calculado desde costo + IVA + margen
- Límite de productos por tienda

Arquitectura:
- router.py: Endpoints de productos
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import ProductsService
from .repository import ProductsRepository

__all__ = [
    "router",
    "ProductsService",
    "ProductsRepository"
]
