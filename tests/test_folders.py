"""
Folder endpoint tests, including the folders-by-photographer and
albums-by-folder listings.
"""
import pytest


class TestFolderCrud:

    @pytest.mark.asyncio
    async def test_round_trip(self, client, photographer_id):
        created = await client.post(
            "/folders", json={"name": "Weddings", "photographer_id": photographer_id}
        )
        folder_id = created.json()["id"]

        response = await client.get(f"/folders/{folder_id}")

        assert created.status_code == 201
        assert response.json() == {
            "id": folder_id,
            "name": "Weddings",
            "photographer_id": photographer_id,
        }

    @pytest.mark.asyncio
    async def test_unknown_photographer_is_accepted(self, client):
        response = await client.post("/folders", json={"name": "Loose", "photographer_id": 99})

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_list(self, client, folder_id):
        response = await client.get("/folders")

        assert response.status_code == 200
        assert [f["id"] for f in response.json()] == [folder_id]

    @pytest.mark.asyncio
    async def test_get_unknown(self, client):
        response = await client.get("/folders/5")

        assert response.status_code == 404
        assert response.json() == {"message": "Folder not found"}

    @pytest.mark.asyncio
    async def test_update(self, client, folder_id, photographer_id):
        response = await client.put(
            f"/folders/{folder_id}", json={"name": "Winter", "photographer_id": photographer_id}
        )

        assert response.json() == {"updated": 1}
        assert (await client.get(f"/folders/{folder_id}")).json()["name"] == "Winter"

    @pytest.mark.asyncio
    async def test_update_unknown(self, client):
        response = await client.put("/folders/5", json={"name": "Winter", "photographer_id": 1})

        assert response.status_code == 404
        assert (await client.get("/folders")).json() == []

    @pytest.mark.asyncio
    async def test_delete_twice_keeps_albums(self, client, folder_id, album_id):
        first = await client.delete(f"/folders/{folder_id}")
        second = await client.delete(f"/folders/{folder_id}")

        assert first.json() == {"deleted": 1}
        assert second.status_code == 404
        assert (await client.get(f"/albums/{album_id}")).status_code == 200


class TestFoldersByPhotographer:

    @pytest.mark.asyncio
    async def test_returns_only_matching(self, client, photographer_id, photographer_payload):
        other = dict(photographer_payload, email="b@b.com")
        other_id = (await client.post("/photographers", json=other)).json()["id"]
        for name, owner in (("One", photographer_id), ("Two", other_id), ("Three", photographer_id)):
            await client.post("/folders", json={"name": name, "photographer_id": owner})

        response = await client.get(f"/folders/{photographer_id}/folders")

        assert response.status_code == 200
        assert [f["name"] for f in response.json()] == ["One", "Three"]
        assert all(f["photographer_id"] == photographer_id for f in response.json())

    @pytest.mark.asyncio
    async def test_unknown_photographer(self, client):
        response = await client.get("/folders/77/folders")

        assert response.status_code == 404
        assert response.json() == {"message": "Photographer not found"}

    @pytest.mark.asyncio
    async def test_photographer_without_folders(self, client, photographer_id):
        response = await client.get(f"/folders/{photographer_id}/folders")

        assert response.status_code == 404
        assert response.json() == {"message": "No folders found for photographer"}


class TestAlbumsByFolder:

    @pytest.mark.asyncio
    async def test_projection(self, client, folder_id, album_id):
        response = await client.get(f"/folders/{folder_id}/albums")

        assert response.status_code == 200
        [album] = response.json()
        assert set(album) == {"id", "access_hash", "download_count", "download_limit", "folder_id"}
        assert album["id"] == album_id
        assert album["folder_id"] == folder_id

    @pytest.mark.asyncio
    async def test_unknown_folder(self, client):
        response = await client.get("/folders/8/albums")

        assert response.status_code == 404
        assert response.json() == {"message": "Folder not found"}

    @pytest.mark.asyncio
    async def test_folder_without_albums(self, client, folder_id):
        response = await client.get(f"/folders/{folder_id}/albums")

        assert response.status_code == 404
        assert response.json() == {"message": "No albums found for folder"}

    @pytest.mark.asyncio
    async def test_orphans_still_listed(self, client, folder_id, album_id):
        await client.delete(f"/folders/{folder_id}")

        response = await client.get(f"/folders/{folder_id}/albums")

        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [album_id]


class TestFolderIdBounds:

    @pytest.mark.asyncio
    async def test_photographer_id_beyond_int64_is_rejected(self, client):
        response = await client.post("/folders", json={"name": "x", "photographer_id": 10**20})

        assert response.status_code == 422
        assert (await client.get("/folders")).json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        [f"/folders/{10**20}", f"/folders/{10**20}/folders", f"/folders/{-(10**20)}/albums"],
    )
    async def test_path_id_beyond_int64_is_rejected(self, client, path):
        response = await client.get(path)

        assert response.status_code == 422
