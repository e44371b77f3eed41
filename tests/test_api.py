"""HTTP tests for the Site Canvas server."""

import httpx
import pytest
from fastapi.testclient import TestClient

from sitecanvas.api import element_routes
from sitecanvas.services.content_client import ContentClient


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("SITECANVAS_SITES_DIR", str(tmp_path / "sites"))
    monkeypatch.delenv("UPLOAD_API_URL", raising=False)
    from sitecanvas.server import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_id(client):
    response = client.post("/api/canvas/session", json={
        "session_id": "s1",
        "elements": [
            {"id": "a", "type": "text", "content": "Alpha", "position": {"x": 0, "y": 0}},
            {"id": "b", "type": "button", "content": "Go", "position": {"x": 200, "y": 0}},
        ],
    })
    assert response.status_code == 200
    return response.json()["session_id"]


def test_health_and_info(client):
    assert client.get("/health").json()["status"] == "healthy"
    info = client.get("/api/info").json()
    assert len(info["element_types"]) == 20
    assert info["view_modes"]["tablet"] == {"width": 768, "height": 1024}
    hero = next(t for t in info["element_types"] if t["type"] == "hero")
    assert hero["default_size"] == {"width": 800, "height": 200}


def test_create_empty_session(client):
    session_id = client.post("/api/canvas/session").json()["session_id"]
    state = client.get(f"/api/canvas/state/{session_id}").json()
    assert state["elements"] == []
    assert state["snapshot"]["session"]["phase"] == "idle"


def test_duplicate_seed_ids_conflict(client):
    response = client.post("/api/canvas/session", json={
        "elements": [{"id": "a", "type": "text"}, {"id": "a", "type": "text"}],
    })
    assert response.status_code == 409


def test_unsafe_seed_id_is_rejected(client):
    response = client.post("/api/canvas/session", json={
        "elements": [{"id": 'x" onmouseover="alert(1)', "type": "text"}],
    })
    assert response.status_code == 422


def test_missing_session_is_404(client):
    assert client.get("/api/canvas/state/nope").status_code == 404
    assert client.get("/api/canvas/render/nope").status_code == 404
    assert client.post("/api/element/nope", json={"element_type": "text"}).status_code == 404


def test_update_position_command(client, session_id):
    snapshot = client.post(f"/api/element/{session_id}/commands", json={
        "type": "update_position",
        "element_id": "a",
        "position": {"x": 10, "y": 20},
    }).json()
    assert snapshot["applied"] is True
    elements = {e["id"]: e for e in snapshot["elements"]}
    assert elements["a"]["position"] == {"x": 10, "y": 20}
    assert elements["b"]["position"] == {"x": 200, "y": 0}

    state = client.get(f"/api/canvas/state/{session_id}").json()
    assert state["updated_at"] is not None


def test_command_on_unknown_element_not_applied(client, session_id):
    snapshot = client.post(f"/api/element/{session_id}/commands", json={
        "type": "delete", "element_id": "ghost",
    }).json()
    assert snapshot["applied"] is False
    assert len(snapshot["elements"]) == 2


def test_add_duplicate_and_remove_element(client, session_id):
    added = client.post(f"/api/element/{session_id}", json={"element_type": "hero"}).json()
    assert added["element"]["content"] == "Your Heading"
    assert added["element"]["position"] == {"x": 50, "y": 250}

    copy = client.post(f"/api/element/{session_id}/{added['element_id']}/duplicate").json()
    assert copy["element"]["position"] == {"x": 70, "y": 270}

    assert client.delete(f"/api/element/{session_id}/{copy['element_id']}").status_code == 200
    assert client.delete(f"/api/element/{session_id}/{copy['element_id']}").status_code == 404
    assert client.post(f"/api/element/{session_id}/ghost/duplicate").status_code == 404


def test_add_unknown_type_is_400(client, session_id):
    assert client.post(f"/api/element/{session_id}", json={"element_type": "hologram"}).status_code == 400


def test_render_marks_selection(client, session_id):
    client.post(f"/api/element/{session_id}/commands", json={"type": "select", "element_id": "b"})
    response = client.get(f"/api/canvas/render/{session_id}")
    assert response.headers["content-type"].startswith("text/html")
    assert response.text.count(" selected\"") == 1
    assert 'data-view-mode="desktop"' in response.text


def test_view_mode_and_background(client, session_id):
    frame = client.put(f"/api/canvas/view-mode/{session_id}", json={"view_mode": "mobile"}).json()
    assert frame["frame"] == {"width": 375, "height": 667}

    background = client.put(f"/api/canvas/background/{session_id}", json={
        "type": "gradient", "gradient": "linear-gradient(red, blue)",
    }).json()
    assert background["css"] == {"background": "linear-gradient(red, blue)"}
    assert "linear-gradient(red, blue)" in client.get(f"/api/canvas/render/{session_id}").text


def test_clear_canvas(client, session_id):
    assert client.delete(f"/api/canvas/state/{session_id}").status_code == 200
    assert client.get(f"/api/canvas/state/{session_id}").json()["elements"] == []


def test_image_upload_sets_inline_image(client, session_id):
    response = client.post(
        f"/api/element/{session_id}/a/image",
        files={"file": ("logo.png", b"\x89PNG-bytes", "image/png")},
    )
    assert response.status_code == 200
    element = next(e for e in response.json()["elements"] if e["id"] == "a")
    assert element["imageUrl"].startswith("data:image/png;base64,")


def test_image_upload_rejects_non_image(client, session_id):
    response = client.post(
        f"/api/element/{session_id}/a/image",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert client.post(
        f"/api/element/{session_id}/ghost/image",
        files={"file": ("a.png", b"x", "image/png")},
    ).status_code == 404


def test_generate_content(client, session_id):
    def handler(request):
        return httpx.Response(200, json={"success": True, "content": "Generated"})

    element_routes.content_client = ContentClient(
        "http://content.local", transport=httpx.MockTransport(handler)
    )
    snapshot = client.post(f"/api/element/{session_id}/a/generate", json={
        "prompt": "Write something", "generation_type": "content",
    }).json()
    element = next(e for e in snapshot["elements"] if e["id"] == "a")
    assert element["content"] == "Generated"


def test_generate_failure_is_502(client, session_id):
    def handler(request):
        return httpx.Response(500, text="down")

    element_routes.content_client = ContentClient(
        "http://content.local", transport=httpx.MockTransport(handler)
    )
    response = client.post(f"/api/element/{session_id}/a/generate", json={"prompt": "x"})
    assert response.status_code == 502


def test_serialize_endpoint(client):
    empty = client.post("/api/export/serialize")
    assert "No content available" in empty.text

    blocks = client.post("/api/export/serialize", json={"blocks": [{"type": "text", "content": "Hello"}]})
    assert '<div class="block" data-block-type="text">Hello</div>' in blocks.text


def test_export_download(client, session_id):
    response = client.get(f"/api/export/{session_id}", params={"title": "My Site"})
    assert response.headers["content-disposition"] == 'attachment; filename="website.html"'
    assert "<title>My Site</title>" in response.text
    assert "Alpha" in response.text


def test_save_and_load_site(client, session_id, tmp_path):
    saved = client.put(f"/api/export/{session_id}/sites/home", json={"settings": {"title": "Home"}})
    assert saved.status_code == 200
    assert (tmp_path / "sites" / "home.json").exists()

    page = client.get("/api/export/sites/home")
    assert "<title>Home</title>" in page.text
    assert ".element-a {" in page.text

    assert client.get("/api/export/sites/missing").status_code == 404
    assert client.put(f"/api/export/{session_id}/sites/bad%20id").status_code == 400
