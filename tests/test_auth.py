"""
Login tests: reduced projection on success, a single 401 answer for every
failure reason.
"""
import pytest


class TestLogin:

    @pytest.mark.asyncio
    async def test_success(self, client, photographer_id):
        response = await client.post(
            "/photographers/login", json={"email": "a@a.com", "password": "p"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": "Login successful.",
            "photographer": {"id": photographer_id, "name": "A", "email": "a@a.com"},
        }

    @pytest.mark.asyncio
    async def test_wrong_password(self, client, photographer_id):
        response = await client.post(
            "/photographers/login", json={"email": "a@a.com", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials."}

    @pytest.mark.asyncio
    async def test_unknown_email_same_answer(self, client, photographer_id):
        unknown = await client.post(
            "/photographers/login", json={"email": "nobody@a.com", "password": "p"}
        )
        wrong = await client.post(
            "/photographers/login", json={"email": "a@a.com", "password": "x"}
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    @pytest.mark.asyncio
    async def test_email_match_is_exact(self, client, photographer_id):
        response = await client.post(
            "/photographers/login", json={"email": "A@A.COM", "password": "p"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_new_password_after_update(self, client, photographer_id, photographer_payload):
        payload = dict(photographer_payload, password="changed")
        await client.put(f"/photographers/{photographer_id}", json=payload)

        old = await client.post(
            "/photographers/login", json={"email": "a@a.com", "password": "p"}
        )
        new = await client.post(
            "/photographers/login", json={"email": "a@a.com", "password": "changed"}
        )

        assert old.status_code == 401
        assert new.status_code == 200

    @pytest.mark.asyncio
    async def test_missing_password_is_rejected(self, client):
        response = await client.post("/photographers/login", json={"email": "a@a.com"})

        assert response.status_code == 422
