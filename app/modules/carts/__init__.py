# app/modules/carts/__init__.py
"""
Módulo de Carrito - Líneas pendientes de venta

- Una línea por (propietario, producto): agregar de nuevo suma 1 unidad
- Los precios se copian del producto al agregar la línea
- Las líneas se eliminan al confirmar la venta o manualmente
"""

from .router import router
from .service import CartsService
from .repository import CartsRepository

__all__ = [
    "router",
    "CartsService",
    "CartsRepository"
]
