from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_node.api import comments, frontend, health, posts
from blog_node.app_state import CommentStore, PostStore, StoreUnavailable
from blog_node.config import get_cors_origins, get_lock_timeout, load_config

log = logging.getLogger(__name__)


def create_app(
    cfg: Optional[Dict[str, Any]] = None,
    post_store: Optional[PostStore] = None,
    comment_store: Optional[CommentStore] = None,
) -> FastAPI:
    """
    Build the blog API around two explicitly owned stores.

    Stores are created here unless the caller passes its own; either way
    they hang off app.state and reach the handlers through Depends().
    """
    cfg = cfg if cfg is not None else load_config()
    timeout = get_lock_timeout(cfg)

    app = FastAPI(title="Blog Node API", version="0.1.0")
    app.state.config = cfg
    app.state.post_store = post_store if post_store is not None else PostStore(lock_timeout_sec=timeout)
    app.state.comment_store = comment_store if comment_store is not None else CommentStore(lock_timeout_sec=timeout)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(cfg),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreUnavailable)
    async def _store_unavailable(request: Request, exc: StoreUnavailable) -> JSONResponse:
        log.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "store_unavailable", "store": exc.store, "reason": exc.reason},
        )

    # Routers
    app.include_router(frontend.router)
    app.include_router(posts.router)
    app.include_router(comments.router)
    app.include_router(health.router)

    return app


app = create_app()
