"""
Track upload and listing tests
"""

from pathlib import Path


def upload(client, headers, filename="song.mp3", content=b"ID3\x03\x00fake-audio"):
    return client.post(
        "/api/v1/tracks/upload",
        files={"file": (filename, content, "audio/mpeg")},
        headers=headers,
    )


class TestUpload:
    def test_upload_records_track(self, client, register, bearer, settings):
        token = register("a@x.com")["token"]
        response = upload(client, bearer(token))
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "song"
        assert data["filename"].endswith("-song.mp3")
        assert data["url"] == f"/uploads/{data['filename']}"
        assert (Path(settings.UPLOAD_DIR) / data["filename"]).read_bytes() == b"ID3\x03\x00fake-audio"

    def test_uploaded_file_is_served(self, client, register, bearer):
        token = register("a@x.com")["token"]
        url = upload(client, bearer(token)).json()["url"]
        response = client.get(url)
        assert response.status_code == 200
        assert response.content == b"ID3\x03\x00fake-audio"

    def test_whitespace_and_paths_sanitized(self, client, register, bearer):
        token = register("a@x.com")["token"]
        data = upload(client, bearer(token), filename="../My Best  Song.mp3").json()
        assert data["filename"].endswith("-My_Best_Song.mp3")
        assert "/" not in data["filename"]
        assert data["title"] == "My Best  Song"

    def test_very_long_filename(self, client, register, bearer, settings):
        token = register("a@x.com")["token"]
        response = upload(client, bearer(token), filename="a" * 300 + ".mp3")
        assert response.status_code == 200
        data = response.json()
        assert data["filename"].endswith(".mp3")
        assert len(data["filename"].encode("utf-8")) <= 255
        assert data["title"] == "a" * 300
        assert (Path(settings.UPLOAD_DIR) / data["filename"]).exists()

    def test_storage_failure_reports_error_tag(self, client, register, bearer, settings):
        token = register("a@x.com")["token"]
        uploads = Path(settings.UPLOAD_DIR)
        uploads.rmdir()
        uploads.write_bytes(b"")
        response = upload(client, bearer(token))
        assert response.status_code == 500
        assert response.json()["error"] == "persistence_failure"
        assert client.get("/api/v1/tracks", headers=bearer(token)).json() == []

    def test_no_file(self, client, register, bearer):
        token = register("a@x.com")["token"]
        response = client.post(
            "/api/v1/tracks/upload",
            files={"attachment": ("song.mp3", b"data", "audio/mpeg")},
            headers=bearer(token),
        )
        assert response.status_code == 400
        assert response.json()["error"] == "no_file"

    def test_empty_file(self, client, register, bearer):
        token = register("a@x.com")["token"]
        response = upload(client, bearer(token), content=b"")
        assert response.status_code == 400
        assert response.json()["error"] == "no_file"

    def test_requires_authentication(self, client, settings):
        response = upload(client, {})
        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"
        assert not list(Path(settings.UPLOAD_DIR).iterdir())


class TestListTracks:
    def test_most_recent_first(self, client, register, bearer):
        token = register("a@x.com")["token"]
        upload(client, bearer(token), filename="first.mp3")
        upload(client, bearer(token), filename="second.mp3")

        response = client.get("/api/v1/tracks", headers=bearer(token))
        assert response.status_code == 200
        tracks = response.json()
        assert [t["title"] for t in tracks] == ["second", "first"]
        assert all(t["artist"] == "Local" for t in tracks)
        assert all(t["url"] == f"/uploads/{t['filename']}" for t in tracks)

    def test_owners_are_isolated(self, client, register, bearer):
        token_a = register("a@x.com")["token"]
        token_b = register("b@x.com")["token"]
        upload(client, bearer(token_a), filename="mine.mp3")

        assert client.get("/api/v1/tracks", headers=bearer(token_b)).json() == []
        assert [t["title"] for t in client.get("/api/v1/tracks", headers=bearer(token_a)).json()] == ["mine"]

    def test_requires_authentication(self, client):
        response = client.get("/api/v1/tracks", headers={"Authorization": "Bearer forged"})
        assert response.status_code == 401
        assert response.json()["detail"] == "invalid token"
