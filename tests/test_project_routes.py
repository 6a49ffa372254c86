"""Tests for /api/projects."""

PROJECT = {
    "title": "OpenGen",
    "description": "Generative art toolkit.",
    "technologies": "Python, PyTorch",
}


def test_create_and_list_projects(client):
    first = client.post("/api/projects", json=PROJECT)
    second = client.post("/api/projects", json=dict(PROJECT, title="Second", imageUrl="https://img"))

    assert first.status_code == 201
    assert second.json()["imageUrl"] == "https://img"
    titles = [row["title"] for row in client.get("/api/projects").json()]
    assert titles == ["OpenGen", "Second"]


def test_create_without_description_is_400(client):
    resp = client.post("/api/projects", json={"title": "No description"})

    assert resp.status_code == 400
    assert resp.json()["field"] == "description"
    assert client.get("/api/projects").json() == []


def test_update_project(client):
    created = client.post("/api/projects", json=PROJECT).json()

    resp = client.put(f"/api/projects/{created['id']}", json={"link": "https://github.com/opengen"})

    assert resp.status_code == 200
    assert resp.json()["link"] == "https://github.com/opengen"
    assert resp.json()["technologies"] == "Python, PyTorch"


def test_update_missing_project_is_404(client):
    resp = client.put("/api/projects/42", json={"title": "x"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Project not found"}


def test_delete_project(client):
    created = client.post("/api/projects", json=PROJECT).json()

    assert client.delete(f"/api/projects/{created['id']}").status_code == 204
    assert client.get("/api/projects").json() == []
    assert client.delete(f"/api/projects/{created['id']}").status_code == 404
