"""Tests for /api/profile."""


def test_get_profile_before_any_write_is_404(client):
    resp = client.get("/api/profile")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Profile not found"}


def test_first_update_creates_profile(client, profile_payload):
    resp = client.post("/api/profile", json=profile_payload)

    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["name"] == "Ada Lovelace"
    assert body["githubUrl"] == "https://github.com/ada"
    assert body["scholarUrl"] is None

    assert client.get("/api/profile").json() == body


def test_second_update_keeps_identity(client, storage, profile_payload):
    first = client.post("/api/profile", json=profile_payload).json()
    second = client.post(
        "/api/profile",
        json=dict(profile_payload, bio="Now working on compilers.", githubUrl=None),
    ).json()

    assert second["id"] == first["id"]
    assert second["bio"] == "Now working on compilers."
    assert second["githubUrl"] is None
    assert storage._profile["id"] == first["id"]


def test_update_missing_required_field_is_400(client, profile_payload):
    payload = dict(profile_payload)
    del payload["email"]

    resp = client.post("/api/profile", json=payload)

    assert resp.status_code == 400
    body = resp.json()
    assert body["field"] == "email"
    assert "email" in body["message"]
    assert client.get("/api/profile").status_code == 404


def test_update_empty_name_is_400(client, profile_payload):
    resp = client.post("/api/profile", json=dict(profile_payload, name=""))
    assert resp.status_code == 400
    assert resp.json()["field"] == "name"
