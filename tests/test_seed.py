from __future__ import annotations

from fastapi.testclient import TestClient

from api.app import app
from api.core.config import get_settings
from api.db.seed import SEED_POSTS, seed_posts
from api.db.session import get_sessionmaker
from api.repositories.post_repository import PostRepository


def test_seed_loads_five_posts(temp_db):
    repo = PostRepository(get_sessionmaker())
    repo.create(9, "stale")
    assert seed_posts(get_sessionmaker()) == 5
    posts = repo.list_posts()
    assert [(p.user_id, p.post_title, p.post_body) for p in posts] == [
        (row["user_id"], row["post_title"], row["post_body"]) for row in SEED_POSTS
    ]
    assert posts[-1].post_body is None


def test_seed_on_startup(temp_db, monkeypatch):
    monkeypatch.setenv("SEED_ON_STARTUP", "true")
    get_settings.cache_clear()
    with TestClient(app) as client:
        response = client.get("/api/posts")
    assert response.status_code == 200
    assert len(response.json()) == 5
