"""Tests for the static file fallback."""

import pytest
from fastapi.testclient import TestClient

from chartrelay.core.static import is_hidden_path


def test_serves_file_from_working_directory(client: TestClient, tmp_path, monkeypatch):
    """Files in the static directory are served as-is."""
    (tmp_path / "index.html").write_text("<h1>Trading Journal</h1>", encoding="utf-8")
    (tmp_path / "app.js").write_text("console.log('journal');", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    response = client.get("/app.js")
    assert response.status_code == 200
    assert response.text == "console.log('journal');"

    index = client.get("/")
    assert index.status_code == 200
    assert "Trading Journal" in index.text


def test_unknown_path_is_not_found(client: TestClient, tmp_path, monkeypatch):
    """Unmatched paths return 404."""
    monkeypatch.chdir(tmp_path)
    response = client.get("/no-such-file.html")
    assert response.status_code == 404


def test_dotfiles_are_hidden(client: TestClient, tmp_path, monkeypatch):
    """The .env next to the static files and VCS metadata are never served."""
    (tmp_path / ".env").write_text("SECRET_TOKEN=hunter2\n", encoding="utf-8")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("[core]\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    for path in ("/.env", "/.git/config", "/.git/"):
        response = client.get(path)
        assert response.status_code == 404, path
        assert "hunter2" not in response.text


def test_non_get_on_static_is_not_found(client: TestClient, tmp_path, monkeypatch):
    """Unknown POST/PUT paths are 404, like any other unmatched path."""
    (tmp_path / "index.html").write_text("<h1>Trading Journal</h1>", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert client.post("/unknown", json={}).status_code == 404
    assert client.put("/index.html", content=b"x").status_code == 404


@pytest.mark.parametrize(
    "path, hidden",
    [
        (".", False),
        ("index.html", False),
        ("css/site.css", False),
        (".env", True),
        (".git/config", True),
        ("assets/.secret/key", True),
    ],
)
def test_is_hidden_path(path, hidden):
    assert is_hidden_path(path) is hidden
