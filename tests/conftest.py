import pytest
from fastapi.testclient import TestClient

from blog_node.app_state import CommentStore, PostStore
from blog_node.blog_api import create_app
from blog_node.config import load_config


@pytest.fixture(scope="function")
def post_store():
    """Fresh post store per test"""
    return PostStore()


@pytest.fixture(scope="function")
def comment_store():
    """Fresh comment store per test"""
    return CommentStore()


@pytest.fixture(scope="function")
def client(tmp_path, monkeypatch, post_store, comment_store):
    """App wired to the test's stores, config isolated from the repo dir"""
    for var in ("BLOG_CONFIG", "BLOG_HOST", "BLOG_PORT", "BLOG_LOG_LEVEL", "BLOG_LOCK_TIMEOUT_SEC", "BLOG_CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    cfg = load_config(str(tmp_path / "missing.yaml"))
    app = create_app(cfg, post_store=post_store, comment_store=comment_store)
    with TestClient(app) as c:
        yield c
