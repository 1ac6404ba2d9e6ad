"""Tests for menu endpoints"""

import json
import os

import pytest
from httpx import AsyncClient
from uuid import uuid4

from app.config import settings
from tests.conftest import API


def _error_fields(response):
    return {error["field"] for error in response.json()["errors"]}


@pytest.mark.asyncio
async def test_list_menu_sorted_by_category_then_name(client: AsyncClient, menu_items):
    """Menu is unpaginated and ordered by category, then name"""
    response = await client.get(f"{API}/menu")

    assert response.status_code == 200
    names = [item["name"] for item in response.json()]
    assert names == ["Fresh Lemonade", "Chocolate Fudge", "Vanilla Dream", "Waffle Cone"]


@pytest.mark.asyncio
async def test_list_menu_filters(client: AsyncClient, menu_items):
    """Category and flag filters narrow the list"""
    response = await client.get(f"{API}/menu", params={"category": "ice-cream"})
    assert {item["name"] for item in response.json()} == {"Vanilla Dream", "Chocolate Fudge"}

    response = await client.get(f"{API}/menu", params={"available": "false"})
    assert [item["name"] for item in response.json()] == ["Fresh Lemonade"]

    response = await client.get(f"{API}/menu", params={"special": "true", "available": "true"})
    assert [item["name"] for item in response.json()] == ["Chocolate Fudge"]


@pytest.mark.asyncio
async def test_list_menu_search_matches_words(client: AsyncClient, menu_items):
    """Search matches whole-word prefixes in name or description"""
    response = await client.get(f"{API}/menu", params={"search": "fudge"})
    assert [item["name"] for item in response.json()] == ["Chocolate Fudge"]

    response = await client.get(f"{API}/menu", params={"search": "crispy lemonade"})
    assert {item["name"] for item in response.json()} == {"Waffle Cone", "Fresh Lemonade"}

    # "nilla" is inside a word, not at its start
    response = await client.get(f"{API}/menu", params={"search": "nilla"})
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_menu_ignores_unknown_params(client: AsyncClient, menu_items):
    response = await client.get(f"{API}/menu", params={"colour": "pink"})

    assert response.status_code == 200
    assert len(response.json()) == 4


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [
    {"category": "pizza"},
    {"available": "yes"},
    {"special": "1"},
])
async def test_list_menu_rejects_invalid_filters(client: AsyncClient, params):
    response = await client.get(f"{API}/menu", params=params)

    assert response.status_code == 400
    assert _error_fields(response) == set(params)


@pytest.mark.asyncio
async def test_get_menu_item(client: AsyncClient, menu_items):
    item = menu_items[1]
    response = await client.get(f"{API}/menu/{item.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Chocolate Fudge"
    assert data["isSpecial"] is True
    assert data["allergens"] == ["dairy"]
    assert "createdAt" in data and "updatedAt" in data


@pytest.mark.asyncio
async def test_get_menu_item_not_found(client: AsyncClient):
    response = await client.get(f"{API}/menu/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Menu item not found"


@pytest.mark.asyncio
async def test_create_requires_admin(client: AsyncClient, staff_client: AsyncClient):
    payload = {"name": "Pistachio", "description": "Nutty", "price": 5}

    assert (await client.post(f"{API}/menu", json=payload)).status_code == 401
    assert (await staff_client.post(f"{API}/menu", json=payload)).status_code == 403


@pytest.mark.asyncio
async def test_vanilla_dream_availability_flow(admin_client: AsyncClient, client: AsyncClient):
    """Create, toggle availability, and check both availability filters"""
    response = await admin_client.post(
        f"{API}/menu",
        json={
            "name": "Vanilla Dream",
            "description": "Classic vanilla",
            "price": 4.99,
            "category": "ice-cream",
        },
    )
    assert response.status_code == 201
    item = response.json()
    assert item["isAvailable"] is True
    assert item["isSpecial"] is False

    response = await admin_client.patch(f"{API}/menu/{item['id']}/availability")
    assert response.status_code == 200
    assert response.json()["isAvailable"] is False

    available = await client.get(f"{API}/menu", params={"available": "true"})
    assert item["id"] not in [i["id"] for i in available.json()]

    unavailable = await client.get(f"{API}/menu", params={"available": "false"})
    assert item["id"] in [i["id"] for i in unavailable.json()]


@pytest.mark.asyncio
async def test_toggle_availability_twice_restores(admin_client: AsyncClient, menu_items):
    item = menu_items[0]

    first = await admin_client.patch(f"{API}/menu/{item.id}/availability")
    second = await admin_client.patch(f"{API}/menu/{item.id}/availability")

    assert first.json()["isAvailable"] is False
    assert second.json()["isAvailable"] is True


@pytest.mark.asyncio
async def test_toggle_availability_not_found(admin_client: AsyncClient):
    response = await admin_client.patch(f"{API}/menu/{uuid4()}/availability")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_negative_price_persists_nothing(admin_client: AsyncClient, client: AsyncClient):
    response = await admin_client.post(
        f"{API}/menu",
        json={"name": "Freebie", "description": "Costs less than nothing", "price": -1},
    )

    assert response.status_code == 400
    assert _error_fields(response) == {"price"}
    assert (await client.get(f"{API}/menu")).json() == []


@pytest.mark.asyncio
async def test_create_reports_every_invalid_field(admin_client: AsyncClient):
    response = await admin_client.post(
        f"{API}/menu",
        json={
            "description": "x" * 501,
            "price": -3,
            "category": "pizza",
            "allergens": ["dairy", "shellfish"],
            "nutritionInfo": {"calories": -10},
        },
    )

    assert response.status_code == 400
    fields = _error_fields(response)
    assert {"name", "description", "price", "category", "nutritionInfo.calories"} <= fields
    assert any(field.startswith("allergens") for field in fields)


@pytest.mark.asyncio
async def test_create_multipart_with_image(admin_client: AsyncClient):
    """Form bodies carry arrays/objects as JSON strings next to the image file"""
    response = await admin_client.post(
        f"{API}/menu",
        data={
            "name": "Brownie Sundae",
            "description": "Warm brownie topped with ice cream",
            "price": "7.99",
            "category": "snacks",
            "isSpecial": "true",
            "allergens": json.dumps(["gluten", "eggs", "dairy"]),
            "nutritionInfo": json.dumps({"calories": 450, "fat": 22}),
        },
        files={"image": ("sundae.png", b"\x89PNG\r\n\x1a\nfake", "image/png")},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["price"] == 7.99
    assert data["isSpecial"] is True
    assert data["allergens"] == ["gluten", "eggs", "dairy"]
    assert data["nutritionInfo"]["calories"] == 450
    assert data["imageUrl"].startswith(f"{settings.upload_url_prefix}/")

    stored = os.path.join(settings.upload_dir, data["imageUrl"].rsplit("/", 1)[1])
    assert os.path.exists(stored)


@pytest.mark.asyncio
async def test_create_multipart_rejects_malformed_json_field(admin_client: AsyncClient):
    response = await admin_client.post(
        f"{API}/menu",
        data={"name": "Cone", "description": "Crispy", "price": "2", "allergens": "dairy,"},
    )

    assert response.status_code == 400
    assert _error_fields(response) == {"allergens"}


@pytest.mark.asyncio
async def test_create_rejects_non_image_upload(admin_client: AsyncClient, client: AsyncClient):
    response = await admin_client.post(
        f"{API}/menu",
        data={"name": "Cone", "description": "Crispy", "price": "2"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert (await client.get(f"{API}/menu")).json() == []


@pytest.mark.asyncio
async def test_update_changes_only_supplied_fields(admin_client: AsyncClient, menu_items):
    item = menu_items[0]

    response = await admin_client.put(f"{API}/menu/{item.id}", json={"price": 5.25})

    assert response.status_code == 200
    data = response.json()
    assert data["price"] == 5.25
    assert data["name"] == "Vanilla Dream"
    assert data["description"] == item.description
    assert data["allergens"] == ["dairy"]


@pytest.mark.asyncio
async def test_update_validates_changed_fields(admin_client: AsyncClient, client: AsyncClient, menu_items):
    item = menu_items[0]

    response = await admin_client.put(
        f"{API}/menu/{item.id}", json={"category": "pizza", "name": None, "price": 1}
    )

    assert response.status_code == 400
    assert _error_fields(response) == {"category", "name"}

    unchanged = await client.get(f"{API}/menu/{item.id}")
    assert unchanged.json()["price"] == 4.99


@pytest.mark.asyncio
async def test_update_not_found(admin_client: AsyncClient):
    response = await admin_client.put(f"{API}/menu/{uuid4()}", json={"price": 1})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_menu_item(admin_client: AsyncClient, client: AsyncClient, menu_items):
    item = menu_items[2]

    response = await admin_client.delete(f"{API}/menu/{item.id}")
    assert response.status_code == 200
    assert response.json()["message"] == "Menu item deleted successfully"

    assert (await client.get(f"{API}/menu/{item.id}")).status_code == 404
    assert (await admin_client.delete(f"{API}/menu/{item.id}")).status_code == 404


@pytest.mark.asyncio
async def test_multipart_empty_json_fields_count_as_omitted(admin_client: AsyncClient):
    response = await admin_client.post(
        f"{API}/menu",
        data={"name": "Cone", "description": "Crispy", "price": "2", "allergens": "", "nutritionInfo": ""},
    )

    assert response.status_code == 201
    assert response.json()["allergens"] == []
    assert response.json()["nutritionInfo"] is None

    update = await admin_client.put(
        f"{API}/menu/{response.json()['id']}",
        data={"price": "2.5", "allergens": ""},
    )

    assert update.status_code == 200
    assert update.json()["price"] == 2.5
    assert update.json()["allergens"] == []
