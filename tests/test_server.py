"""Tests for the gallery web server."""

from craftgallery.config import STORAGE_KEY
from craftgallery.models import default_entries
from craftgallery.session import Mode


def test_index_lists_cards(client):
    response = client.get("/")
    assert response.status_code == 200
    for entry in default_entries():
        assert entry.title in response.text
    assert 'role="dialog"' not in response.text


def test_index_filters(client):
    response = client.get("/", params={"q": "JAR"})
    assert "Cotton Cloud Jar" in response.text
    assert "Paper Crown" not in response.text


def test_index_empty_result(client):
    response = client.get("/", params={"q": "xyz"})
    assert "No matching videos" in response.text


def test_titles_are_escaped(client, session):
    session.store.add(session.store.current()[0].model_copy(update={"title": "<b>bold</b>"}))
    response = client.get("/")
    assert "<b>bold</b>" not in response.text
    assert "&lt;b&gt;bold&lt;/b&gt;" in response.text


def test_missing_thumbnail_uses_placeholder(client, session):
    client.post("/add")
    client.post("/add/submit", data={"title": "No thumb", "video_url": "n.mp4"})
    assert 'src="/placeholder.png"' in client.get("/").text


def test_placeholder_png(client):
    response = client.get("/placeholder.png")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_open_and_close_player(client, session):
    response = client.post("/entries/0/open", data={"q": "paper"}, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/?q=paper"
    assert session.mode == Mode.VIEWING

    page = client.get("/").text
    assert 'type="video/mp4"' in page
    assert "videos/paper-crown.mp4" in page

    client.post("/close")
    assert session.mode == Mode.IDLE


def test_open_unknown_entry(client):
    assert client.post("/entries/99/open").status_code == 404


def test_add_flow(client, session, storage):
    client.post("/add")
    assert 'action="/add/submit"' in client.get("/").text
    response = client.post(
        "/add/submit",
        data={"title": " Snow ", "video_url": "http://x/s.mp4", "tags": "slime, , snow,  "},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert session.mode == Mode.IDLE
    assert session.store.current()[0].tags == ["slime", "snow"]
    assert storage.get_item(STORAGE_KEY) is not None


def test_add_incomplete_keeps_form(client, session):
    client.post("/add")
    response = client.post("/add/submit", data={"title": "", "video_url": "x.mp4"}, follow_redirects=False)
    assert response.headers["location"] == "/"
    assert session.mode == Mode.ADDING
    assert len(session.store) == 3


def test_add_form_save_starts_disabled(client):
    client.post("/add")
    page = client.get("/").text
    assert 'id="saveBtn" disabled>Save</button>' in page
    assert "addForm.addEventListener('input'" in page


def test_rejected_add_keeps_typed_values(client, session):
    client.post("/add")
    page = client.post(
        "/add/submit",
        data={"title": "   ", "video_url": "http://x/keep.mp4", "tags": "slime", "description": "a <b>note</b>"},
    ).text
    assert session.mode == Mode.ADDING
    assert 'value="http://x/keep.mp4"' in page
    assert 'value="slime"' in page
    assert 'value="a &lt;b&gt;note&lt;/b&gt;"' in page
    assert "Please fill in a title and a video URL." in page
    assert 'id="saveBtn" disabled>' in page

    client.post("/close")
    client.post("/add")
    assert "keep.mp4" not in client.get("/").text


def test_info_banner_explains_video_sources(client):
    page = client.get("/").text
    assert '<div class="info">' in page
    assert "<code>/videos</code>" in page
    assert "direct link" in page


def test_second_modal_conflicts(client):
    client.post("/add")
    assert client.post("/reset").status_code == 409


def test_reset_flow(client, session, storage):
    client.post("/add")
    client.post("/add/submit", data={"title": "A", "video_url": "a.mp4"})
    client.post("/reset")
    assert "Delete" in client.get("/").text
    client.post("/reset/confirm")
    assert session.mode == Mode.IDLE
    assert list(session.store.current()) == default_entries()
    assert storage.get_item(STORAGE_KEY) is None


def test_api_entries(client):
    assert len(client.get("/api/entries").json()) == 3
    assert client.get("/api/entries", params={"q": "glitter"}).json()[0]["videoUrl"] == "videos/slime-glitter.mp4"


def test_api_add_and_reset(client):
    response = client.post("/api/entries", json={"title": "A", "video_url": "a.mp4", "tags": "x,y"})
    assert response.status_code == 201
    assert response.json() == {"title": "A", "videoUrl": "a.mp4", "tags": ["x", "y"]}
    assert client.get("/api/entries").json()[0]["title"] == "A"

    assert client.post("/api/entries", json={"title": " ", "video_url": "a.mp4"}).status_code == 400

    assert len(client.post("/api/reset").json()) == 3


def test_api_session(client):
    client.post("/entries/2/open")
    state = client.get("/api/session").json()
    assert state["mode"] == "viewing"
    assert state["active"]["title"] == "Cotton Cloud Jar"
    assert state["count"] == 3


def test_media_served(client):
    response = client.get("/videos/paper-crown.mp4")
    assert response.status_code == 200


def test_api_reset_closes_open_player(client, session):
    client.post("/api/entries", json={"title": "A", "video_url": "a.mp4"})
    client.post("/entries/0/open")
    assert session.active.title == "A"

    client.post("/api/reset")
    state = client.get("/api/session").json()
    assert state["mode"] == "idle"
    assert state["active"] is None
    assert 'role="dialog"' not in client.get("/").text
