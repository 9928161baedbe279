# tests/test_carts.py
from decimal import Decimal

from app.modules.carts.repository import CartsRepository
from app.shared.database.models import CartItem

OWNER = "owner@shop.com"


def _snapshot(product):
    return {
        "shop_id": product.shop_id,
        "product_name": product.name,
        "product_cost": product.cost,
        "selling_price": product.selling_price
    }


def test_upsert_same_product_twice_keeps_one_line(db, make_product):
    product = make_product()
    repository = CartsRepository(db)

    repository.upsert_line(OWNER, product.id, _snapshot(product))
    line = repository.upsert_line(OWNER, product.id, _snapshot(product))

    assert line.sold_quantity == 2
    assert db.query(CartItem).count() == 1


def test_lines_are_per_owner(db, make_product):
    product = make_product()
    repository = CartsRepository(db)

    repository.upsert_line(OWNER, product.id, _snapshot(product))
    repository.upsert_line("other@shop.com", product.id, _snapshot(product))

    assert len(repository.list_lines(OWNER)) == 1
    assert len(repository.list_lines("other@shop.com")) == 1


def test_remove_missing_line_is_a_noop(db):
    assert CartsRepository(db).remove_line(OWNER, 12345) == 0


def test_remove_line(db, make_product):
    product = make_product()
    repository = CartsRepository(db)
    repository.upsert_line(OWNER, product.id, _snapshot(product))

    assert repository.remove_line(OWNER, product.id) == 1
    assert repository.list_lines(OWNER) == []


def test_put_carts_adds_and_increments(client, owner_headers, make_product):
    product = make_product(quantity=10)

    first = client.put("/carts", json={"product_id": product.id}, headers=owner_headers)
    second = client.put("/carts", json={"product_id": product.id}, headers=owner_headers)

    assert first.status_code == 200
    assert first.json()["cart_item"]["sold_quantity"] == 1
    assert second.json()["cart_item"]["sold_quantity"] == 2
    assert second.json()["availability"]["quantity"] == 10

    listing = client.get("/carts", headers=owner_headers).json()
    assert listing["count"] == 1
    assert listing["total_amount"] == 2 * product.selling_price


def test_put_carts_beyond_stock_warns_in_message(client, owner_headers, make_product):
    product = make_product(quantity=1)

    first = client.put("/carts", json={"product_id": product.id}, headers=owner_headers)
    second = client.put("/carts", json={"product_id": product.id}, headers=owner_headers)

    assert "stock" not in first.json()["message"]
    assert second.status_code == 200
    assert second.json()["cart_item"]["sold_quantity"] == 2
    assert "2 unidades en el carrito y 1 en stock" in second.json()["message"]


def test_put_carts_unknown_product_is_404(client, owner_headers, shop):
    response = client.put("/carts", json={"product_id": 777}, headers=owner_headers)
    assert response.status_code == 404


def test_delete_cart_line_is_idempotent(client, owner_headers, make_product):
    product = make_product()
    client.put("/carts", json={"product_id": product.id}, headers=owner_headers)

    first = client.delete(f"/carts/{product.id}", headers=owner_headers)
    second = client.delete(f"/carts/{product.id}", headers=owner_headers)

    assert first.json()["deleted_count"] == 1
    assert second.status_code == 200
    assert second.json()["deleted_count"] == 0


def test_cart_price_is_frozen_when_product_changes(client, owner_headers, make_product):
    product = make_product(cost="100", margin="20")
    client.put("/carts", json={"product_id": product.id}, headers=owner_headers)

    update = client.put(
        f"/product/{product.id}",
        json={"cost": "200"},
        headers=owner_headers
    )
    assert update.status_code == 200
    assert update.json()["product"]["selling_price"] == 258

    line = client.get("/carts", headers=owner_headers).json()["items"][0]
    assert line["selling_price"] == 129
    assert Decimal(str(line["product_cost"])) == Decimal("100")
