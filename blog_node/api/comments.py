from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from blog_node.api.deps import U32_MAX, get_comment_store
from blog_node.app_state import CommentStore

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/comments", tags=["comments"])


class CommentCreate(BaseModel):
    post_id: int = Field(..., ge=0, le=U32_MAX, strict=True)
    text: str = Field(..., strict=True)


@router.post("", status_code=201, response_class=Response)
def create_comment(body: CommentCreate, comments: CommentStore = Depends(get_comment_store)):
    # post_id is stored as given; it does not have to name an existing post.
    comment = comments.append(body.post_id, body.text)
    log.debug("created comment id=%s post_id=%s", comment.id, comment.post_id)
    return Response(status_code=201)
