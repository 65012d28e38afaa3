#!/usr/bin/env python3
"""
blog_node.app_state.comments
----------------------------

In-memory, append-only comment log keyed by post id.

- post_id is not checked against the post store; any id gets its own log
- comment ids count 1, 2, 3, ... separately for every post_id
- list_for() on an unknown post_id is an empty list, not an error
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, DefaultDict, Dict, List

from blog_node.app_state.locking import GuardedLock


@dataclass(frozen=True)
class Comment:
    id: int
    post_id: int
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "post_id": self.post_id, "text": self.text}


class CommentStore:
    def __init__(self, lock_timeout_sec: float = -1.0):
        self.guard = GuardedLock("comments", timeout_sec=lock_timeout_sec)
        self._comments: Dict[int, List[Comment]] = {}
        self._next_ids: DefaultDict[int, int] = defaultdict(lambda: 1)

    def append(self, post_id: int, text: str) -> Comment:
        post_id, text = int(post_id), str(text)
        # Conversions stay outside the lock so a bad argument cannot poison it.
        with self.guard.hold():
            comment = Comment(id=self._next_ids[post_id], post_id=post_id, text=text)
            self._comments.setdefault(post_id, []).append(comment)
            self._next_ids[post_id] += 1
            return comment

    def list_for(self, post_id: int) -> List[Comment]:
        post_id = int(post_id)
        with self.guard.hold():
            return list(self._comments.get(post_id, []))

    def __len__(self) -> int:
        with self.guard.hold():
            return sum(len(seq) for seq in self._comments.values())
