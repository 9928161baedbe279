# app/modules/payments/__init__.py
"""
Módulo de Pagos - Payment intents con el proveedor externo
"""

from .router import router

__all__ = [
    "router"
]
