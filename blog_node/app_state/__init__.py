# blog_node/app_state/__init__.py
"""
blog_node app_state package
Provides the lock-guarded post and comment stores shared by the API handlers.
"""

from blog_node.app_state.comments import Comment, CommentStore
from blog_node.app_state.locking import GuardedLock, StoreUnavailable
from blog_node.app_state.posts import Post, PostStore

__all__ = ["Comment", "CommentStore", "GuardedLock", "Post", "PostStore", "StoreUnavailable"]
