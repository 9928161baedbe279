# tests/test_shops_products.py
from decimal import Decimal

from app.shared.database.models import Shop


def _create_product(client, headers, name="Widget", cost="100", margin="20", **extra):
    payload = {"name": name, "cost": cost, "profit_margin": margin, "quantity": 5, **extra}
    return client.post("/products", json=payload, headers=headers)


def test_create_shop(client, owner_headers):
    response = client.post("/shops", json={"name": "Corner Shop", "location": "Dhaka"}, headers=owner_headers)

    assert response.status_code == 201
    shop = response.json()["shop"]
    assert shop["owner_email"] == "owner@shop.com"
    assert shop["product_limit"] == 3
    assert shop["product_count"] == 0


def test_second_shop_for_same_owner_is_forbidden(client, db, owner_headers):
    client.post("/shops", json={"name": "First"}, headers=owner_headers)
    response = client.post("/shops", json={"name": "Second"}, headers=owner_headers)

    assert response.status_code == 403
    assert db.query(Shop).count() == 1


def test_create_product_computes_selling_price(client, owner_headers, shop):
    response = _create_product(client, owner_headers, selling_price=1)

    assert response.status_code == 201
    product = response.json()["product"]
    assert product["selling_price"] == 129
    assert product["sales_count"] == 0
    assert product["shop_id"] == shop.id


def test_product_limit_is_enforced(client, db, owner_headers, shop):
    for i in range(3):
        assert _create_product(client, owner_headers, name=f"P{i}").status_code == 201

    response = _create_product(client, owner_headers, name="P3")

    assert response.status_code == 403
    db.refresh(shop)
    assert shop.product_count == 3
    assert len(client.get("/products", headers=owner_headers).json()["products"]) == 3


def test_create_product_without_shop_is_404(client, owner_headers):
    assert _create_product(client, owner_headers).status_code == 404


def test_negative_margin_is_rejected(client, owner_headers, shop):
    assert _create_product(client, owner_headers, margin="-5").status_code == 422


def test_update_recomputes_selling_price(client, owner_headers, make_product):
    product = make_product(cost="100", margin="20")

    response = client.put(
        f"/product/{product.id}",
        json={"profit_margin": "0", "quantity": 9, "selling_price": 1},
        headers=owner_headers
    )

    assert response.status_code == 200
    body = response.json()["product"]
    assert body["selling_price"] == 108
    assert body["quantity"] == 9


def test_update_missing_product_is_404(client, owner_headers, shop):
    response = client.put("/product/999", json={"name": "x"}, headers=owner_headers)
    assert response.status_code == 404


def test_delete_product_releases_slot(client, db, owner_headers, shop, make_product):
    product = make_product()

    response = client.delete(f"/product/{product.id}")

    assert response.json()["deleted_count"] == 1
    db.refresh(shop)
    assert shop.product_count == 0
    assert client.get(f"/product/{product.id}", headers=owner_headers).status_code == 404


def test_increase_product_limit_credits_admin(client, db, owner_headers, shop, admin):
    response = client.put(
        "/shops/increaseProductLimit",
        json={"increase_by": 200, "amount": "10"},
        headers=owner_headers
    )

    assert response.status_code == 200
    assert response.json()["shop"]["product_limit"] == 203

    db.refresh(admin)
    assert admin.income == Decimal("10")


def test_increase_limit_without_admin_account_changes_nothing(client, db, owner_headers, shop):
    response = client.put(
        "/shops/increaseProductLimit",
        json={"increase_by": 200, "amount": "10"},
        headers=owner_headers
    )

    assert response.status_code == 404
    db.refresh(shop)
    assert shop.product_limit == 3


def test_increase_income(client, db, admin):
    client.patch("/admin/increaseIncome", json={"income": "15.50"})
    response = client.patch("/admin/increaseIncome", json={"income": "4.50"})

    assert response.status_code == 200
    assert Decimal(str(response.json()["income"])) == Decimal("20")


def test_admin_lists_shops(client, admin_headers, shop):
    body = client.get("/admin/shops", headers=admin_headers).json()
    assert body["count"] == 1
    assert body["shops"][0]["name"] == "Corner Shop"
