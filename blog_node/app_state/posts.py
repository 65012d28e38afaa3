#!/usr/bin/env python3
"""
blog_node.app_state.posts
-------------------------

In-memory post registry.

- Maps post id -> Post
- Ids come from a monotonic counter (1, 2, 3, ...), never from len()
- Every operation runs inside the store's GuardedLock
- Nothing is persisted; posts live as long as the process
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from blog_node.app_state.locking import GuardedLock


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    body: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "body": self.body}


class PostStore:
    def __init__(self, lock_timeout_sec: float = -1.0):
        self.guard = GuardedLock("posts", timeout_sec=lock_timeout_sec)
        self._posts: Dict[int, Post] = {}
        self._next_id = 1

    def insert(self, title: str, body: str) -> Post:
        title, body = str(title), str(body)
        with self.guard.hold():
            post = Post(id=self._next_id, title=title, body=body)
            self._posts[post.id] = post
            self._next_id += 1
            return post

    def get(self, post_id: int) -> Optional[Post]:
        """Return the post, or None when no post has this id."""
        post_id = int(post_id)
        with self.guard.hold():
            return self._posts.get(post_id)

    def list(self) -> List[Post]:
        # Snapshot under the lock; callers must not rely on the order.
        with self.guard.hold():
            return [p for p in self._posts.values()]

    def __len__(self) -> int:
        with self.guard.hold():
            return len(self._posts)
