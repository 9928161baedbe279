# app/api/router.py
from fastapi import APIRouter
from app.api.auth import router as auth_router
from app.modules.users.router import router as users_router
from app.modules.shops.router import router as shops_router
from app.modules.products.router import router as products_router
from app.modules.carts.router import router as carts_router
from app.modules.sales.router import router as sales_router
from app.modules.payments.router import router as payments_router

from app.modules.admin import admin_router


# Router principal de la API
api_router = APIRouter()

api_router.include_router(auth_router, tags=["authentication"])

api_router.include_router(users_router, tags=["Users"])

api_router.include_router(shops_router, tags=["Shops"])

api_router.include_router(products_router, tags=["Products"])

api_router.include_router(carts_router, tags=["Carts"])

api_router.include_router(sales_router, tags=["Sales"])

api_router.include_router(payments_router, tags=["Payments"])

api_router.include_router(
    admin_router,
    prefix="/admin",
    tags=["Admin"]
)
