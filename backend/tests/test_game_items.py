"""Tests for game item accessors and endpoints."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.models.enums import GameType
from app.schemas.game_items import GameItemCreate, GameItemUpdate
from app.services.game_items import (
    create_game_item,
    get_all_game_items,
    get_game_items_by_type,
    get_game_item_by_id,
    update_game_item,
)


def _item_data(**overrides) -> GameItemCreate:
    data = {
        "title": "Royal Flush Chips",
        "description": "Premium casino-grade poker chips",
        "detailed_description": "Elevate your poker experience with these premium chips.",
        "price": Decimal("49.99"),
        "game_type": GameType.POKER,
        "image_url": "https://example.com/chips.png",
    }
    data.update(overrides)
    return GameItemCreate(**data)


@pytest.mark.asyncio
async def test_create_game_item(test_db):
    """Test creating an item sets id, defaults and both timestamps."""
    item = await create_game_item(test_db, _item_data())

    assert isinstance(item.id, int)
    assert item.title == "Royal Flush Chips"
    assert item.price == Decimal("49.99")
    assert item.game_type == GameType.POKER
    assert item.is_available is True
    assert item.created_at is not None
    assert item.created_at == item.updated_at


@pytest.mark.asyncio
@pytest.mark.parametrize("price", ["0.01", "19.99", "29.99", "100.10", "12345678.99"])
async def test_price_round_trips_to_the_cent(test_db, price):
    """Test prices read back from the store equal what was written."""
    item = await create_game_item(test_db, _item_data(price=Decimal(price)))
    item_id = item.id

    test_db.expire_all()
    stored = await get_game_item_by_id(test_db, item_id)

    assert stored.price == Decimal(price)


@pytest.mark.asyncio
async def test_get_all_game_items_excludes_unavailable(test_db, test_item, unavailable_item):
    """Test listing never returns unavailable items."""
    items = await get_all_game_items(test_db)

    assert [i.id for i in items] == [test_item.id]
    assert all(i.is_available for i in items)


@pytest.mark.asyncio
async def test_get_game_items_by_type(test_db, test_item):
    """Test filtering by game type."""
    poker = await create_game_item(test_db, _item_data())
    await create_game_item(test_db, _item_data(title="Hidden Poker Item", is_available=False))

    gostop_items = await get_game_items_by_type(test_db, GameType.GOSTOP)
    poker_items = await get_game_items_by_type(test_db, GameType.POKER)

    assert [i.id for i in gostop_items] == [test_item.id]
    assert [i.id for i in poker_items] == [poker.id]


@pytest.mark.asyncio
async def test_get_game_item_by_id(test_db, test_item, unavailable_item):
    """Test fetching by id hides missing and unavailable items alike."""
    found = await get_game_item_by_id(test_db, test_item.id)

    assert found is not None
    assert found.title == "Golden Dragon Card"
    assert await get_game_item_by_id(test_db, unavailable_item.id) is None
    assert await get_game_item_by_id(test_db, 99999) is None


@pytest.mark.asyncio
async def test_update_game_item_partial(test_db, test_item):
    """Test unsupplied fields keep their values and updated_at advances."""
    before_updated_at = test_item.updated_at
    before_created_at = test_item.created_at

    updated = await update_game_item(
        test_db, test_item.id, GameItemUpdate(title="Platinum Dragon Card", price=Decimal("39.95"))
    )

    assert updated is not None
    assert updated.title == "Platinum Dragon Card"
    assert updated.price == Decimal("39.95")
    assert updated.description == "Rare golden card with dragon design"
    assert updated.detailed_description == "A legendary artifact in the world of Gostop."
    assert updated.game_type == GameType.GOSTOP
    assert updated.image_url == "https://example.com/dragon.png"
    assert updated.is_available is True
    assert updated.created_at == before_created_at
    assert updated.updated_at > before_updated_at


@pytest.mark.asyncio
async def test_update_game_item_no_fields_advances_timestamp(test_db, test_item):
    """Test an empty update still moves updated_at forward."""
    before_updated_at = test_item.updated_at

    updated = await update_game_item(test_db, test_item.id, GameItemUpdate())

    assert updated.title == "Golden Dragon Card"
    assert updated.updated_at > before_updated_at


@pytest.mark.asyncio
async def test_update_game_item_image_url_absent_vs_null(test_db, test_item):
    """Test omitting image_url keeps it while an explicit null clears it."""
    updated = await update_game_item(test_db, test_item.id, GameItemUpdate(title="Renamed"))
    assert updated.image_url == "https://example.com/dragon.png"

    updated = await update_game_item(test_db, test_item.id, GameItemUpdate(image_url=None))
    assert updated.image_url is None
    assert updated.title == "Renamed"


@pytest.mark.asyncio
async def test_update_game_item_availability(test_db, test_item):
    """Test hiding an item removes it from reads and it can be restored."""
    await update_game_item(test_db, test_item.id, GameItemUpdate(is_available=False))
    assert await get_game_item_by_id(test_db, test_item.id) is None
    assert await get_all_game_items(test_db) == []

    restored = await update_game_item(test_db, test_item.id, GameItemUpdate(is_available=True))
    assert restored.is_available is True
    assert await get_game_item_by_id(test_db, test_item.id) is not None


@pytest.mark.asyncio
async def test_update_game_item_not_found(test_db):
    """Test updating a missing item returns None."""
    assert await update_game_item(test_db, 99999, GameItemUpdate(title="Ghost")) is None


def test_game_item_update_rejects_null_for_required_fields():
    """Test only image_url accepts an explicit null."""
    with pytest.raises(ValidationError):
        GameItemUpdate(title=None)
    with pytest.raises(ValidationError):
        GameItemUpdate(price=None)

    assert GameItemUpdate(image_url=None).changes() == {"image_url": None}
    assert GameItemUpdate().changes() == {}


def test_game_item_create_validation():
    """Test price must be positive and titles non-empty."""
    with pytest.raises(ValidationError):
        _item_data(price=Decimal("0"))
    with pytest.raises(ValidationError):
        _item_data(price=Decimal("-5.00"))
    with pytest.raises(ValidationError):
        _item_data(price=Decimal("1.999"))
    with pytest.raises(ValidationError):
        _item_data(title="")


def test_create_game_item_endpoint(client):
    """Test creating an item over HTTP returns numeric price and default availability."""
    response = client.post(
        "/api/game-items",
        json={
            "title": "Cherry Blossom Set",
            "description": "Beautiful spring-themed card collection",
            "detailed_description": "Experience the beauty of spring.",
            "price": 19.99,
            "game_type": "gostop",
            "image_url": None,
        }
    )

    assert response.status_code == 201
    data = response.json()
    assert data["price"] == 19.99
    assert data["is_available"] is True
    assert data["game_type"] == "gostop"


def test_create_game_item_endpoint_invalid_type(client):
    """Test unknown game types are rejected."""
    response = client.post(
        "/api/game-items",
        json={
            "title": "Chess Set",
            "description": "Wrong game",
            "detailed_description": "Not sold here.",
            "price": 10.0,
            "game_type": "chess",
        }
    )

    assert response.status_code == 422


def test_list_game_items_endpoints(client, test_item, unavailable_item):
    """Test catalog listing endpoints only return available items."""
    response = client.get("/api/game-items")
    assert response.status_code == 200
    data = response.json()
    assert [i["id"] for i in data] == [test_item.id]
    assert data[0]["price"] == 29.99

    response = client.get("/api/game-items/type/poker")
    assert response.status_code == 200
    assert response.json() == []

    response = client.get("/api/game-items/type/gostop")
    assert [i["title"] for i in response.json()] == ["Golden Dragon Card"]


def test_get_game_item_endpoint(client, test_item, unavailable_item):
    """Test item detail returns null for unavailable items."""
    response = client.get(f"/api/game-items/{test_item.id}")
    assert response.status_code == 200
    assert response.json()["title"] == "Golden Dragon Card"

    response = client.get(f"/api/game-items/{unavailable_item.id}")
    assert response.status_code == 200
    assert response.json() is None


def test_update_game_item_endpoint(client, test_item):
    """Test a PATCH only touches the supplied fields."""
    response = client.patch(
        f"/api/game-items/{test_item.id}",
        json={"price": 24.5, "image_url": None}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["price"] == 24.5
    assert data["image_url"] is None
    assert data["title"] == "Golden Dragon Card"


def test_update_game_item_endpoint_not_found(client):
    """Test updating a missing item returns null."""
    response = client.patch("/api/game-items/99999", json={"title": "Ghost"})

    assert response.status_code == 200
    assert response.json() is None
