"""Tests for the wine maker endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_wine_makers_empty(client: AsyncClient) -> None:
    """Test listing wine makers when none exist."""
    response = await client.get("/api/winemakers")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_wine_maker(client: AsyncClient) -> None:
    """Test creating a wine maker returns it with a Location header."""
    response = await client.post(
        "/api/winemakers",
        json={"name": "Penfolds", "address": "Magill, South Australia"},
    )
    assert response.status_code == 201

    data = response.json()
    assert data["id"] > 0
    assert data["name"] == "Penfolds"
    assert data["address"] == "Magill, South Australia"
    assert data["bottles"] == []
    assert response.headers["location"] == f"http://test/api/winemakers/{data['id']}"


@pytest.mark.asyncio
async def test_create_wine_maker_without_address(client: AsyncClient) -> None:
    """Test the address is optional."""
    response = await client.post("/api/winemakers", json={"name": "Henschke"})
    assert response.status_code == 201
    assert response.json()["address"] is None


@pytest.mark.asyncio
async def test_get_wine_maker(client: AsyncClient, create_wine_maker) -> None:
    """Test fetching a wine maker by id."""
    created = await create_wine_maker()

    response = await client.get(f"/api/winemakers/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_wine_maker_not_found(client: AsyncClient) -> None:
    """Test fetching an unknown wine maker returns 404."""
    response = await client.get("/api/winemakers/999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_duplicate_wine_maker(client: AsyncClient, create_wine_maker) -> None:
    """Test creating a second maker with the same name is rejected."""
    await create_wine_maker(name="Penfolds")

    response = await client.post("/api/winemakers", json={"name": "Penfolds"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Wine maker already exists"

    listing = await client.get("/api/winemakers")
    assert len(listing.json()) == 1


@pytest.mark.asyncio
async def test_wine_maker_names_are_case_sensitive(client: AsyncClient, create_wine_maker) -> None:
    """Test names differing only in case are distinct makers."""
    await create_wine_maker(name="Penfolds")

    response = await client.post("/api/winemakers", json={"name": "PENFOLDS"})
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_create_wine_maker_null_body(client: AsyncClient) -> None:
    """Test a request without a body is rejected."""
    response = await client.post("/api/winemakers")
    assert response.status_code == 400
    assert response.json()["detail"] == "Wine maker is empty"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"name": ""},
        {"name": "x" * 101},
        {"name": "Penfolds", "address": "x" * 201},
        {"address": "No name"},
    ],
)
async def test_create_wine_maker_invalid(client: AsyncClient, payload: dict) -> None:
    """Test field validation failures are reported as 400."""
    response = await client.post("/api/winemakers", json=payload)
    assert response.status_code == 400

    listing = await client.get("/api/winemakers")
    assert listing.json() == []


@pytest.mark.asyncio
async def test_list_wine_makers_with_bottles(
    client: AsyncClient, create_wine_maker, create_wine_bottle
) -> None:
    """Test makers are listed with their bottles and the maker name on each bottle."""
    penfolds = await create_wine_maker(name="Penfolds")
    henschke = await create_wine_maker(name="Henschke")
    await create_wine_bottle(penfolds["id"], name="Grange")
    await create_wine_bottle(penfolds["id"], name="Bin 389")

    response = await client.get("/api/winemakers")
    assert response.status_code == 200

    data = response.json()
    assert [maker["name"] for maker in data] == ["Penfolds", "Henschke"]
    assert [bottle["name"] for bottle in data[0]["bottles"]] == ["Grange", "Bin 389"]
    assert all(bottle["wineMakerName"] == "Penfolds" for bottle in data[0]["bottles"])
    assert all(bottle["wineMakerId"] == penfolds["id"] for bottle in data[0]["bottles"])
    assert data[1]["id"] == henschke["id"]
    assert data[1]["bottles"] == []


@pytest.mark.asyncio
async def test_get_wine_maker_includes_bottles(
    client: AsyncClient, create_wine_maker, create_wine_bottle
) -> None:
    """Test fetching a maker includes its bottles."""
    maker = await create_wine_maker()
    bottle = await create_wine_bottle(maker["id"])

    response = await client.get(f"/api/winemakers/{maker['id']}")
    assert response.status_code == 200
    assert response.json()["bottles"] == [bottle]


@pytest.mark.asyncio
async def test_delete_wine_maker(client: AsyncClient, create_wine_maker) -> None:
    """Test deleting a maker without bottles."""
    maker = await create_wine_maker()

    response = await client.delete(f"/api/winemakers/{maker['id']}")
    assert response.status_code == 204
    assert response.content == b""

    response = await client.get(f"/api/winemakers/{maker['id']}")
    assert response.status_code == 404

    response = await client.delete(f"/api/winemakers/{maker['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_wine_maker_not_found(client: AsyncClient) -> None:
    """Test deleting an unknown maker returns 404."""
    response = await client.delete("/api/winemakers/999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_wine_maker_with_bottles(
    client: AsyncClient, create_wine_maker, create_wine_bottle
) -> None:
    """Test a maker that still owns bottles cannot be deleted."""
    maker = await create_wine_maker()
    bottle = await create_wine_bottle(maker["id"])

    response = await client.delete(f"/api/winemakers/{maker['id']}")
    assert response.status_code == 409

    # Nothing was removed
    response = await client.get(f"/api/winemakers/{maker['id']}")
    assert response.status_code == 200
    assert response.json()["bottles"] == [bottle]

    # Once its bottles are gone the maker can be deleted
    response = await client.delete(f"/api/winebottles/{bottle['id']}")
    assert response.status_code == 204
    response = await client.delete(f"/api/winemakers/{maker['id']}")
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_wine_maker_id_must_be_integer(client: AsyncClient) -> None:
    """Test a non-numeric id is rejected as a bad request."""
    response = await client.get("/api/winemakers/abc")
    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "DELETE"])
@pytest.mark.parametrize("wine_maker_id", [2**63, -(2**63) - 1, 99999999999999999999])
async def test_out_of_range_wine_maker_id(
    client: AsyncClient, method: str, wine_maker_id: int
) -> None:
    """Test ids that cannot be stored as a 64-bit INTEGER are bad requests."""
    response = await client.request(method, f"/api/winemakers/{wine_maker_id}")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_largest_wine_maker_id_is_not_found(client: AsyncClient) -> None:
    response = await client.get(f"/api/winemakers/{2**63 - 1}")
    assert response.status_code == 404
