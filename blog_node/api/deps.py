"""Shared API dependencies: the stores attached to app.state at startup."""

from fastapi import Request

from blog_node.app_state import CommentStore, PostStore

# Ids are unsigned 32-bit on the wire.
U32_MAX = 4294967295


def get_post_store(request: Request) -> PostStore:
    return request.app.state.post_store


def get_comment_store(request: Request) -> CommentStore:
    return request.app.state.comment_store
