# tests/test_auth_users.py
from app.config.settings import Settings, settings
from app.core.auth.service import AuthService
from app.shared.database.models import User


def test_jwt_sets_http_only_cookie(client):
    response = client.post("/jwt", json={"email": "owner@shop.com"})

    assert response.status_code == 200
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{settings.cookie_name}=")
    assert "HttpOnly" in set_cookie
    assert "Secure" in set_cookie
    assert "samesite=none" in set_cookie.lower()

    payload = AuthService.verify_token(response.json()["userToken"])
    assert payload["email"] == "owner@shop.com"


def test_cookie_session_is_accepted(client, owner):
    client.post("/jwt", json={"email": owner.email})

    response = client.get("/user/me")

    assert response.status_code == 200
    assert response.json()["email"] == owner.email


def test_missing_or_invalid_token_is_401(client, owner):
    assert client.get("/user/me").status_code == 401
    bad = {"Authorization": "Bearer not-a-token"}
    assert client.get("/user/me", headers=bad).status_code == 401


def test_token_for_unknown_user_is_401(client, db):
    token = AuthService.create_access_token({"email": "ghost@shop.com"})
    response = client.get("/user/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_create_user_is_unique_by_email(client, db):
    first = client.post("/users", json={"email": "New@Shop.com", "name": "New"})
    second = client.post("/users", json={"email": "new@shop.com", "name": "Other"})

    assert first.json()["created"] is True
    assert first.json()["user"]["role"] == "user"
    assert second.json()["created"] is False
    assert second.json()["user"]["name"] == "New"
    assert db.query(User).count() == 1


def test_add_shop_info_merges_fields(client, db, owner, owner_headers):
    response = client.put(
        "/user/addShopInfo",
        json={"shop_id": 7, "shop_name": "Corner Shop"},
        headers=owner_headers
    )

    assert response.status_code == 200
    assert response.json()["modified_count"] == 1

    db.refresh(owner)
    assert owner.shop_id == 7
    assert owner.shop_name == "Corner Shop"
    assert owner.shop_logo is None


def test_list_users_is_admin_only(client, owner_headers, admin_headers):
    assert client.get("/users", headers=owner_headers).status_code == 403

    response = client.get("/users", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["count"] == 2


def test_session_works_with_mixed_case_email(client, db):
    client.post("/users", json={"email": "Owner2@Shop.com", "name": "Owner Two"})
    client.post("/jwt", json={"email": "Owner2@Shop.com"})

    response = client.get("/user/me")

    assert response.status_code == 200
    assert response.json()["email"] == "owner2@shop.com"


def test_mixed_case_token_email_finds_user(client, owner):
    token = AuthService.create_access_token({"email": "OWNER@Shop.com"})
    response = client.get("/user/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200


def test_admin_email_setting_is_normalized():
    assert Settings(admin_email="  Admin@Inventory.COM ").admin_email == "admin@inventory.com"
