# blog_node/api/health.py
from __future__ import annotations

"""
Health API for the blog node.

Routes
------
- GET /health
    Simple heartbeat endpoint.

- GET /health/summary
    Number of posts and comments currently held in memory.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from blog_node.api.deps import get_comment_store, get_post_store
from blog_node.app_state import CommentStore, PostStore

router = APIRouter(prefix="/health", tags=["health"])


class PingResponse(BaseModel):
    ok: bool = True


class HealthSummaryResponse(BaseModel):
    ok: bool = True
    posts: int
    comments: int


@router.get("", response_model=PingResponse)
def ping() -> PingResponse:
    return PingResponse()


@router.get("/summary", response_model=HealthSummaryResponse)
def summary(
    posts: PostStore = Depends(get_post_store),
    comments: CommentStore = Depends(get_comment_store),
) -> HealthSummaryResponse:
    """
    Counts per store. Each store is locked on its own, so the two numbers
    are not one atomic snapshot.
    """
    return HealthSummaryResponse(posts=len(posts), comments=len(comments))
