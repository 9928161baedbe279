# app/modules/sales/__init__.py
"""
Módulo de Ventas - Checkout y Reportes

Este módulo maneja el ciclo de venta:
- Checkout: carrito -> registro de ventas -> inventario -> limpieza del carrito
- Historial de ventas de la tienda (solo inserción)
- Resumen de ventas y ganancias por vendedor

Arquitectura:
- router.py: Endpoints de ventas
- service.py: Orquestación del checkout y reportes
- repository.py: Registro de ventas y agregaciones
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "router",
    "SalesService",
    "SalesRepository"
]
