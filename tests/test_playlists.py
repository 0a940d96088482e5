"""
Playlist endpoint tests
"""

from fastapi.testclient import TestClient

from audioryx.main import create_app


def create_playlist(client, headers, name="Road trip"):
    response = client.post("/api/v1/playlists", json={"name": name}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestCreateAndList:
    def test_created_empty(self, client, register, bearer):
        headers = bearer(register("a@x.com")["token"])
        created = create_playlist(client, headers)
        assert created["name"] == "Road trip"

        listing = client.get("/api/v1/playlists", headers=headers).json()
        assert listing == [{"id": created["id"], "name": "Road trip", "version": 1, "tracks": []}]

    def test_blank_name_rejected(self, client, register, bearer):
        headers = bearer(register("a@x.com")["token"])
        response = client.post("/api/v1/playlists", json={"name": ""}, headers=headers)
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_input"

    def test_owners_are_isolated(self, client, register, bearer):
        headers_a = bearer(register("a@x.com")["token"])
        headers_b = bearer(register("b@x.com")["token"])
        create_playlist(client, headers_a)
        assert client.get("/api/v1/playlists", headers=headers_b).json() == []

    def test_requires_authentication(self, client):
        assert client.post("/api/v1/playlists", json={"name": "x"}).status_code == 401
        assert client.get("/api/v1/playlists").status_code == 401


class TestReplaceMetadata:
    def test_replaced_wholesale(self, client, register, bearer):
        headers = bearer(register("a@x.com")["token"])
        playlist_id = create_playlist(client, headers)["id"]

        client.put(
            f"/api/v1/playlists/{playlist_id}",
            json={"metadata": {"tracks": [3, 1], "cover": "sunset"}},
            headers=headers,
        )
        response = client.put(
            f"/api/v1/playlists/{playlist_id}",
            json={"metadata": {"tracks": ["t9"]}},
            headers=headers,
        )
        assert response.json() == {"ok": True}

        listing = client.get("/api/v1/playlists", headers=headers).json()
        assert listing == [{"id": playlist_id, "name": "Road trip", "version": 1, "tracks": ["t9"]}]

    def test_extra_keys_kept(self, client, register, bearer):
        headers = bearer(register("a@x.com")["token"])
        playlist_id = create_playlist(client, headers)["id"]
        client.put(
            f"/api/v1/playlists/{playlist_id}",
            json={"metadata": {"tracks": [1], "description": "for the drive"}},
            headers=headers,
        )
        listing = client.get("/api/v1/playlists", headers=headers).json()
        assert listing[0]["description"] == "for the drive"

    def test_malformed_metadata_rejected(self, client, register, bearer):
        headers = bearer(register("a@x.com")["token"])
        playlist_id = create_playlist(client, headers)["id"]
        for metadata in ({"tracks": "not-a-list"}, {"tracks": [{"id": 1}]}, {"version": 99}):
            response = client.put(
                f"/api/v1/playlists/{playlist_id}",
                json={"metadata": metadata},
                headers=headers,
            )
            assert response.status_code == 400
            assert response.json()["error"] == "invalid_input"

    def test_missing_metadata_keeps_tracks(self, client, register, bearer):
        headers = bearer(register("a@x.com")["token"])
        playlist_id = create_playlist(client, headers)["id"]
        client.put(
            f"/api/v1/playlists/{playlist_id}",
            json={"metadata": {"tracks": [1, 2]}},
            headers=headers,
        )
        for body in ({}, {"name": "renamed"}):
            response = client.put(f"/api/v1/playlists/{playlist_id}", json=body, headers=headers)
            assert response.status_code == 400
            assert response.json()["error"] == "invalid_input"
        assert client.get("/api/v1/playlists", headers=headers).json()[0]["tracks"] == [1, 2]

    def test_stored_with_defaults_filled_in(self, client, register, bearer):
        headers = bearer(register("a@x.com")["token"])
        playlist_id = create_playlist(client, headers)["id"]
        client.put(
            f"/api/v1/playlists/{playlist_id}",
            json={"metadata": {"cover": "sunset"}},
            headers=headers,
        )
        listing = client.get("/api/v1/playlists", headers=headers).json()
        assert listing == [
            {"id": playlist_id, "name": "Road trip", "version": 1, "tracks": [], "cover": "sunset"}
        ]

    def test_cross_owner_is_silent_noop(self, client, register, bearer):
        headers_a = bearer(register("a@x.com")["token"])
        headers_b = bearer(register("b@x.com")["token"])
        playlist_id = create_playlist(client, headers_b)["id"]

        response = client.put(
            f"/api/v1/playlists/{playlist_id}",
            json={"metadata": {"tracks": [666]}},
            headers=headers_a,
        )
        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert client.get("/api/v1/playlists", headers=headers_b).json()[0]["tracks"] == []


class TestDeletePlaylist:
    def test_delete_own(self, client, register, bearer):
        headers = bearer(register("a@x.com")["token"])
        playlist_id = create_playlist(client, headers)["id"]
        response = client.delete(f"/api/v1/playlists/{playlist_id}", headers=headers)
        assert response.json() == {"ok": True}
        assert client.get("/api/v1/playlists", headers=headers).json() == []

    def test_cross_owner_delete_keeps_row(self, client, register, bearer):
        headers_a = bearer(register("a@x.com")["token"])
        headers_b = bearer(register("b@x.com")["token"])
        playlist_id = create_playlist(client, headers_b)["id"]

        response = client.delete(f"/api/v1/playlists/{playlist_id}", headers=headers_a)
        assert response.json() == {"ok": True}
        assert len(client.get("/api/v1/playlists", headers=headers_b).json()) == 1


class TestStrictOwnership:
    def test_cross_owner_mutations_forbidden(self, settings):
        strict = settings.model_copy(update={"STRICT_PLAYLIST_OWNERSHIP": True})
        with TestClient(create_app(strict)) as client:
            def token_for(email):
                response = client.post("/api/v1/auth/register", json={"email": email, "password": "pw123"})
                return {"Authorization": f"Bearer {response.json()['token']}"}

            headers_a = token_for("a@x.com")
            headers_b = token_for("b@x.com")
            playlist_id = create_playlist(client, headers_b)["id"]

            put = client.put(
                f"/api/v1/playlists/{playlist_id}",
                json={"metadata": {"tracks": [1]}},
                headers=headers_a,
            )
            delete = client.delete(f"/api/v1/playlists/{playlist_id}", headers=headers_a)

            assert put.status_code == delete.status_code == 403
            assert put.json()["error"] == "forbidden"
            assert client.get("/api/v1/playlists", headers=headers_b).json()[0]["tracks"] == []
