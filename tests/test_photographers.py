"""
Photographer endpoint tests: CRUD contract, duplicate email, password handling.
"""
import pytest
from sqlalchemy import select

from snapshare.models import Photographer
from snapshare.utils.security import verify_password


class TestCreatePhotographer:

    @pytest.mark.asyncio
    async def test_create_returns_id(self, client, photographer_payload):
        response = await client.post("/photographers", json=photographer_payload)

        assert response.status_code == 201
        assert response.json() == {"id": 1}

    @pytest.mark.asyncio
    async def test_duplicate_email_is_storage_error(self, client, photographer_payload):
        await client.post("/photographers", json=photographer_payload)

        response = await client.post("/photographers", json=photographer_payload)

        assert response.status_code == 500
        assert "UNIQUE constraint failed" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_missing_field_is_rejected(self, client, photographer_payload):
        payload = dict(photographer_payload)
        del payload["company_name"]

        response = await client.post("/photographers", json=payload)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, app, client, photographer_payload):
        await client.post("/photographers", json=photographer_payload)

        async with app.state.database.session_maker() as session:
            result = await session.execute(select(Photographer))
            stored = result.scalar_one()

        assert stored.password != photographer_payload["password"]
        assert verify_password(photographer_payload["password"], stored.password)


class TestReadPhotographer:

    @pytest.mark.asyncio
    async def test_round_trip(self, client, photographer_id, photographer_payload):
        response = await client.get(f"/photographers/{photographer_id}")

        assert response.status_code == 200
        body = response.json()
        expected = {k: v for k, v in photographer_payload.items() if k != "password"}
        assert body == {"id": photographer_id, **expected}
        assert "password" not in body

    @pytest.mark.asyncio
    async def test_unknown_id(self, client):
        response = await client.get("/photographers/42")

        assert response.status_code == 404
        assert response.json() == {"message": "Photographer not found"}

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self, client, photographer_payload):
        for i in range(3):
            payload = dict(photographer_payload, email=f"p{i}@a.com", name=f"P{i}")
            await client.post("/photographers", json=payload)

        response = await client.get("/photographers")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["P0", "P1", "P2"]
        assert all("password" not in p for p in response.json())

    @pytest.mark.asyncio
    async def test_list_empty(self, client):
        response = await client.get("/photographers")

        assert response.status_code == 200
        assert response.json() == []


class TestUpdatePhotographer:

    @pytest.mark.asyncio
    async def test_full_replace(self, client, photographer_id, photographer_payload):
        payload = dict(photographer_payload, name="B", logo="new.png", description="portraits")

        response = await client.put(f"/photographers/{photographer_id}", json=payload)

        assert response.status_code == 200
        assert response.json() == {"updated": 1}
        body = (await client.get(f"/photographers/{photographer_id}")).json()
        assert body["name"] == "B"
        assert body["logo"] == "new.png"
        assert body["description"] == "portraits"

    @pytest.mark.asyncio
    async def test_unknown_id_never_creates(self, client, photographer_payload):
        response = await client.put("/photographers/7", json=photographer_payload)

        assert response.status_code == 404
        assert response.json() == {"message": "Photographer not found"}
        assert (await client.get("/photographers")).json() == []

    @pytest.mark.asyncio
    async def test_partial_body_is_rejected(self, client, photographer_id):
        response = await client.put(f"/photographers/{photographer_id}", json={"name": "B"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_email_taken_by_another(self, client, photographer_id, photographer_payload):
        other = dict(photographer_payload, email="b@b.com")
        other_id = (await client.post("/photographers", json=other)).json()["id"]

        response = await client.put(f"/photographers/{other_id}", json=photographer_payload)

        assert response.status_code == 500
        assert "UNIQUE constraint failed" in response.json()["error"]


class TestDeletePhotographer:

    @pytest.mark.asyncio
    async def test_delete_twice(self, client, photographer_id):
        first = await client.delete(f"/photographers/{photographer_id}")
        second = await client.delete(f"/photographers/{photographer_id}")

        assert first.status_code == 200
        assert first.json() == {"deleted": 1}
        assert second.status_code == 404
        assert second.json() == {"message": "Photographer not found"}

    @pytest.mark.asyncio
    async def test_folders_survive(self, client, photographer_id, folder_id):
        await client.delete(f"/photographers/{photographer_id}")

        response = await client.get(f"/folders/{folder_id}")

        assert response.status_code == 200
        assert response.json()["photographer_id"] == photographer_id


class TestPhotographerIdBounds:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["get", "delete"])
    async def test_id_beyond_int64_is_rejected(self, client, method):
        response = await getattr(client, method)(f"/photographers/{10**20}")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_id_beyond_int64_is_rejected(self, client, photographer_payload):
        response = await client.put(f"/photographers/{10**20}", json=photographer_payload)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_largest_int64_id_is_not_found(self, client):
        response = await client.get(f"/photographers/{2**63 - 1}")

        assert response.status_code == 404
