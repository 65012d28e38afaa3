from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response
from pydantic import BaseModel, Field

from blog_node.api.deps import U32_MAX, get_comment_store, get_post_store
from blog_node.app_state import CommentStore, PostStore

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])


# -----------------------------------------------------------
# Data Models
# -----------------------------------------------------------
class PostCreate(BaseModel):
    title: str = Field(..., strict=True)
    body: str = Field(..., strict=True)


class PostOut(BaseModel):
    id: int
    title: str
    body: str


class CommentOut(BaseModel):
    id: int
    post_id: int
    text: str


# -----------------------------------------------------------
# Routes
# -----------------------------------------------------------
@router.get("", response_model=List[PostOut])
def list_posts(posts: PostStore = Depends(get_post_store)):
    """All posts; order is not guaranteed."""
    return [p.to_dict() for p in posts.list()]


@router.post("", status_code=201, response_class=Response)
def create_post(payload: PostCreate, posts: PostStore = Depends(get_post_store)):
    post = posts.insert(payload.title, payload.body)
    log.debug("created post id=%s", post.id)
    return Response(status_code=201)


@router.get(
    "/{post_id}",
    response_model=PostOut,
    responses={404: {"description": "No post with this id (empty body)"}},
)
def get_post(post_id: int = Path(..., ge=0, le=U32_MAX), posts: PostStore = Depends(get_post_store)):
    post = posts.get(post_id)
    if post is None:
        return Response(status_code=404)
    return post.to_dict()


@router.get("/{post_id}/comments", response_model=List[CommentOut])
def list_post_comments(post_id: int = Path(..., ge=0, le=U32_MAX), comments: CommentStore = Depends(get_comment_store)):
    """Comments in the order they were added; empty list when there are none."""
    return [c.to_dict() for c in comments.list_for(post_id)]
