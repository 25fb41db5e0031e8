"""Tests for the grocery ledger: create, partial update, delete and the API surface."""

from datetime import date

import pytest

from src.models.grocery import GroceryItem
from src.models.pantry import PantryItem
from src.services.exceptions import InvalidInput, NotFound


def test_create_applies_defaults(grocery_service, user):
    item = grocery_service.create(user.id, "  Whole Milk ")

    assert item.name == "Whole Milk"
    assert item.name_key == "whole milk"
    assert item.quantity == 1
    assert item.unit == "piece"
    assert item.checked is False
    assert item.pantry_item_id is not None


def test_create_links_existing_pantry_item(grocery_service, pantry_service, user, db):
    pantry_item = pantry_service.resolve(user.id, "Eggs")

    item = grocery_service.create(user.id, "EGGS", quantity=12, unit="egg")

    assert item.pantry_item_id == pantry_item.id
    assert item.quantity == 12
    assert db.query(PantryItem).count() == 1


def test_create_with_brand_links_branded_identity(grocery_service, user):
    plain = grocery_service.create(user.id, "Butter")
    branded = grocery_service.create(user.id, "Butter", brand="Kerrygold")

    assert plain.pantry_item_id != branded.pantry_item_id
    assert branded.brand == "Kerrygold"


@pytest.mark.parametrize("name", ["", "   "])
def test_create_rejects_empty_name(grocery_service, user, db, name):
    with pytest.raises(InvalidInput):
        grocery_service.create(user.id, name)
    assert db.query(PantryItem).count() == 0


@pytest.mark.parametrize("quantity", [0, -2])
def test_create_rejects_non_positive_quantity_before_store_access(
    grocery_service, user, db, quantity
):
    with pytest.raises(InvalidInput):
        grocery_service.create(user.id, "Milk", quantity=quantity)
    assert db.query(PantryItem).count() == 0
    assert db.query(GroceryItem).count() == 0


def test_update_only_touches_present_fields(grocery_service, user):
    item = grocery_service.create(
        user.id, "Greek Yogurt", label="Dairy", expiration_date=date(2026, 11, 1)
    )

    updated = grocery_service.update(user.id, item.id, {"quantity": 3})

    assert updated.quantity == 3
    assert updated.label == "Dairy"
    assert updated.expiration_date == date(2026, 11, 1)


def test_update_explicit_none_clears_field(grocery_service, user):
    item = grocery_service.create(
        user.id, "Greek Yogurt", label="Dairy", expiration_date=date(2026, 11, 1)
    )

    updated = grocery_service.update(user.id, item.id, {"label": None, "expiration_date": None})

    assert updated.label is None
    assert updated.expiration_date is None


def test_rename_keeps_pantry_link(grocery_service, user, db):
    item = grocery_service.create(user.id, "Yogurt")
    pantry_item_id = item.pantry_item_id

    updated = grocery_service.update(user.id, item.id, {"name": "  Plain   Yogurt "})

    assert updated.name == "Plain   Yogurt"
    assert updated.name_key == "plain yogurt"
    assert updated.pantry_item_id == pantry_item_id
    assert db.query(PantryItem).count() == 1


@pytest.mark.parametrize(
    "changes",
    [{"name": "  "}, {"quantity": 0}, {"unit": " "}, {"pantry_item_id": 5}, {"checked": True}],
)
def test_update_rejects_invalid_changes(grocery_service, user, changes):
    item = grocery_service.create(user.id, "Milk")

    with pytest.raises(InvalidInput):
        grocery_service.update(user.id, item.id, changes)


def test_other_users_items_are_not_found(grocery_service, user, other_user):
    item = grocery_service.create(user.id, "Milk")

    with pytest.raises(NotFound):
        grocery_service.get(other_user.id, item.id)
    with pytest.raises(NotFound):
        grocery_service.update(other_user.id, item.id, {"quantity": 2})
    with pytest.raises(NotFound):
        grocery_service.delete(other_user.id, item.id)
    with pytest.raises(NotFound):
        grocery_service.toggle(other_user.id, item.id)


def test_delete_keeps_pantry_item(grocery_service, user, db):
    item = grocery_service.create(user.id, "Milk")

    deleted = grocery_service.delete(user.id, item.id)

    assert deleted.id == item.id
    assert db.query(GroceryItem).count() == 0
    assert db.query(PantryItem).count() == 1


def test_list_newest_first(grocery_service, user, other_user):
    first = grocery_service.create(user.id, "Milk")
    second = grocery_service.create(user.id, "Eggs")
    grocery_service.create(other_user.id, "Tea")

    assert [item.id for item in grocery_service.list_for_user(user.id)] == [second.id, first.id]


# --- API ---


def test_create_grocery_item_endpoint(client, auth_headers):
    response = client.post(
        "/api/v1/groceries",
        json={"name": "Whole Milk", "quantity": 1, "unit": "gallon", "label": "Dairy"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Whole Milk"
    assert data["name_key"] == "whole milk"
    assert data["unit"] == "gallon"
    assert data["checked"] is False
    assert data["user_id"] == auth_headers.user_id


def test_create_grocery_item_validation(client, auth_headers):
    assert client.post("/api/v1/groceries", json={"name": ""}, headers=auth_headers).status_code == 422
    assert (
        client.post(
            "/api/v1/groceries", json={"name": "Milk", "quantity": 0}, headers=auth_headers
        ).status_code
        == 422
    )

    response = client.post("/api/v1/groceries", json={"name": "   "}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Name is required"


def test_patch_distinguishes_omitted_and_null(client, auth_headers):
    created = client.post(
        "/api/v1/groceries",
        json={"name": "Bread", "label": "Bakery", "brand": "Acme"},
        headers=auth_headers,
    ).json()

    response = client.patch(
        f"/api/v1/groceries/{created['id']}", json={"label": None}, headers=auth_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["label"] is None
    assert data["brand"] == "Acme"
    assert data["pantry_item_id"] == created["pantry_item_id"]


def test_grocery_items_are_private(client, auth_headers, other_auth_headers):
    created = client.post("/api/v1/groceries", json={"name": "Milk"}, headers=auth_headers).json()

    assert client.get("/api/v1/groceries", headers=other_auth_headers).json() == []
    response = client.patch(
        f"/api/v1/groceries/{created['id']}", json={"quantity": 2}, headers=other_auth_headers
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Grocery item not found"
    assert (
        client.delete(f"/api/v1/groceries/{created['id']}", headers=other_auth_headers).status_code
        == 404
    )


def test_delete_grocery_item_endpoint(client, auth_headers):
    created = client.post("/api/v1/groceries", json={"name": "Milk"}, headers=auth_headers).json()

    response = client.delete(f"/api/v1/groceries/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Deleted", "id": created["id"]}
    assert client.get("/api/v1/groceries", headers=auth_headers).json() == []


def test_invalid_token_rejected(client):
    response = client.get("/api/v1/groceries", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
