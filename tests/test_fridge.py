"""Tests for the fridge ledger."""

from datetime import date

import pytest

from src.models.fridge import FridgeItem
from src.services.exceptions import InvalidInput, NotFound


def test_create_manual_item(fridge_service, pantry_service, user):
    item = fridge_service.create(
        user.id, "Cheddar", quantity=200, unit="g", expiration_date=date(2026, 12, 24)
    )

    assert item.added_manually is True
    assert item.added_from_grocery_item_id is None
    assert item.name_key == "cheddar"
    assert item.expiration_date == date(2026, 12, 24)
    assert item.pantry_item_id == pantry_service.resolve(user.id, "cheddar").id


def test_create_applies_defaults(fridge_service, user):
    item = fridge_service.create(user.id, "Lemon")

    assert item.quantity == 1
    assert item.unit == "piece"


def test_create_rejects_bad_input(fridge_service, user, db):
    with pytest.raises(InvalidInput):
        fridge_service.create(user.id, "  ")
    with pytest.raises(InvalidInput):
        fridge_service.create(user.id, "Lemon", quantity=-1)
    assert db.query(FridgeItem).count() == 0


def test_update_and_delete(fridge_service, user, other_user):
    item = fridge_service.create(user.id, "Lemon", label="Produce")

    updated = fridge_service.update(user.id, item.id, {"quantity": 4, "label": None})
    assert updated.quantity == 4
    assert updated.label is None

    with pytest.raises(NotFound):
        fridge_service.delete(other_user.id, item.id)

    fridge_service.delete(user.id, item.id)
    assert fridge_service.list_for_user(user.id) == []


def test_delete_linked_to_ignores_manual_rows(fridge_service, user, db):
    item = fridge_service.create(user.id, "Lemon")
    # A manual row can never carry a grocery link, force one to check the guard
    item.added_from_grocery_item_id = 99
    db.commit()

    assert fridge_service.delete_linked_to(user.id, 99) is None
    assert db.query(FridgeItem).count() == 1


# --- API ---


def test_fridge_crud_endpoints(client, auth_headers, other_auth_headers):
    response = client.post(
        "/api/v1/fridge",
        json={"name": "Cheddar", "quantity": 200, "unit": "g", "expiration_date": "2026-12-24"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    created = response.json()
    assert created["added_manually"] is True
    assert created["expiration_date"] == "2026-12-24"

    response = client.put(
        f"/api/v1/fridge/{created['id']}", json={"quantity": 150}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["quantity"] == 150
    assert response.json()["unit"] == "g"

    assert client.get("/api/v1/fridge", headers=other_auth_headers).json() == []
    response = client.delete(f"/api/v1/fridge/{created['id']}", headers=other_auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Fridge item not found"

    response = client.delete(f"/api/v1/fridge/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get("/api/v1/fridge", headers=auth_headers).json() == []


def test_fridge_update_rejects_empty_unit(client, auth_headers):
    created = client.post("/api/v1/fridge", json={"name": "Lemon"}, headers=auth_headers).json()

    response = client.put(f"/api/v1/fridge/{created['id']}", json={"unit": " "}, headers=auth_headers)

    assert response.status_code == 400
