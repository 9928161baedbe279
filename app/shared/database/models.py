# app/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Numeric, ForeignKey,
    UniqueConstraint, func
)
from sqlalchemy.orm import relationship

from app.config.database import Base


# =====================================================
# USUARIOS
# =====================================================

class User(Base):
    """Modelo de Usuario"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(255))
    photo_url = Column(String(500))
    role = Column(String(50), default='user', nullable=False)

    # Vínculo con la tienda (PUT /user/addShopInfo)
    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=True)
    shop_name = Column(String(255))
    shop_logo = Column(String(500))

    # Solo la cuenta admin acumula ingresos
    income = Column(Numeric(12, 2), default=0, nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


# =====================================================
# TIENDAS
# =====================================================

class Shop(Base):
    """Modelo de Tienda (una por propietario)"""
    __tablename__ = "shops"

    id = Column(Integer, primary_key=True, index=True)
    owner_email = Column(String(255), nullable=False, unique=True, index=True)
    owner_name = Column(String(255))
    name = Column(String(255), nullable=False)
    logo = Column(String(500))
    description = Column(Text)
    location = Column(String(255))

    # Límite de productos y contador que lo respalda
    product_limit = Column(Integer, nullable=False, default=3)
    product_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    # Relationships
    products = relationship("Product", back_populates="shop")

    @property
    def is_at_product_limit(self) -> bool:
        return self.product_count >= self.product_limit


# =====================================================
# PRODUCTOS
# =====================================================

class Product(Base):
    """Modelo de Producto"""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False, index=True)
    owner_email = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    image_url = Column(String(500))
    location = Column(String(255))
    description = Column(Text)

    # Precio: selling_price siempre se calcula desde cost + profit_margin
    cost = Column(Numeric(12, 2), nullable=False)
    profit_margin = Column(Numeric(6, 2), nullable=False)
    selling_price = Column(Integer, nullable=False)

    # Ledger de inventario
    quantity = Column(Integer, nullable=False, default=0)
    sales_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    # Relationships
    shop = relationship("Shop", back_populates="products")


# =====================================================
# CARRITO
# =====================================================

class CartItem(Base):
    """Línea pendiente de venta. Copia precios del producto al agregarla."""
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    owner_email = Column(String(255), nullable=False, index=True)
    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False)
    product_id = Column(Integer, nullable=False)
    product_name = Column(String(255))
    product_cost = Column(Numeric(12, 2), nullable=False)
    selling_price = Column(Integer, nullable=False)
    sold_quantity = Column(Integer, nullable=False, default=1)
    added_at = Column(DateTime, server_default=func.current_timestamp())

    __table_args__ = (
        UniqueConstraint('owner_email', 'product_id', name='cart_items_unique_per_owner'),
    )


# =====================================================
# VENTAS
# =====================================================

class SaleItem(Base):
    """Registro histórico de venta. Solo inserción."""
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    owner_email = Column(String(255), nullable=False, index=True)
    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    product_name = Column(String(255))
    product_cost = Column(Numeric(12, 2), nullable=False)
    selling_price = Column(Integer, nullable=False)
    sold_quantity = Column(Integer, nullable=False)
    seller_name = Column(String(255))
    sold_at = Column(DateTime, nullable=False)
