# app/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.config.settings import settings
from app.config.database import Base, engine
from app.core.middleware import setup_middleware
from app.api.router import api_router
# Registrar modelos en Base.metadata
from app.shared.database import models  # noqa: F401

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    print("🚀 Inventory Management API Starting...")
    print(f"📍 Version: {settings.version}")
    print(f"🌍 Environment: {'Development' if settings.debug else 'Production'}")
    print(f"⏰ Token Expire: {settings.access_token_expire_hours} hours")
    print(f"👤 Admin account: {settings.admin_email}")

    Base.metadata.create_all(bind=engine)

    yield

    # Shutdown
    print("🛑 Inventory Management API Shutting down...")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Gestión de tiendas, productos, carrito y ventas",
    docs_url="/docs",
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Inventory Management API - Server is running",
        "version": settings.version,
        "status": "running",
        "environment": "production" if not settings.debug else "development",
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.version,
        "app": settings.app_name
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
