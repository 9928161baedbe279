# tests/conftest.py
import os

# Configuración de pruebas antes de importar la app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_EMAIL"] = "admin@inventory.com"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.config.database import Base, engine, SessionLocal
from app.core.auth.service import AuthService
from app.main import app
from app.shared.database.models import User, Shop, Product
from app.shared.services.pricing_service import pricing_service

OWNER_EMAIL = "owner@shop.com"
ADMIN_EMAIL = "admin@inventory.com"


def auth_headers(email: str) -> dict:
    token = AuthService.create_access_token({"email": email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    # https: la cookie de sesión es Secure
    return TestClient(app, base_url="https://testserver")


@pytest.fixture
def owner(db):
    user = User(email=OWNER_EMAIL, name="Owner", role="user", income=0)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def owner_headers(owner):
    return auth_headers(owner.email)


@pytest.fixture
def admin(db):
    user = User(email=ADMIN_EMAIL, name="Admin", role="admin", income=0)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin.email)


@pytest.fixture
def shop(db, owner):
    shop = Shop(
        owner_email=owner.email,
        owner_name=owner.name,
        name="Corner Shop",
        product_limit=3,
        product_count=0
    )
    db.add(shop)
    db.commit()
    db.refresh(shop)
    return shop


@pytest.fixture
def make_product(db, shop):
    def _make(name="Widget", cost="100", margin="20", quantity=5, sales_count=0):
        product = Product(
            shop_id=shop.id,
            owner_email=shop.owner_email,
            name=name,
            cost=Decimal(cost),
            profit_margin=Decimal(margin),
            selling_price=pricing_service.calculate_selling_price(cost, margin),
            quantity=quantity,
            sales_count=sales_count
        )
        db.add(product)
        shop.product_count += 1
        db.commit()
        db.refresh(product)
        return product
    return _make
