from __future__ import annotations

"""
Scoped exclusive access for the in-memory stores.

Every store owns one GuardedLock. Callers enter it with:

    with self.guard.hold():
        ...

Policy:
- the lock is released on every exit path
- a negative timeout waits forever; a non-negative one bounds the wait
- an exception escaping the critical section poisons the lock; every later
  hold() fails with StoreUnavailable until recover() is called
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

log = logging.getLogger(__name__)


class StoreUnavailable(RuntimeError):
    """A store could not be entered (lock timeout or poisoned lock)."""

    def __init__(self, store: str, reason: str) -> None:
        super().__init__(f"{store} store unavailable: {reason}")
        self.store = store
        self.reason = reason


class GuardedLock:
    def __init__(self, name: str, timeout_sec: float = -1.0) -> None:
        self.name = name
        self._timeout = float(timeout_sec) if float(timeout_sec) >= 0 else -1.0
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def timeout_sec(self) -> float:
        return self._timeout

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def hold(self) -> Iterator[None]:
        if not self._lock.acquire(timeout=self._timeout):
            raise StoreUnavailable(self.name, "lock_timeout")
        try:
            if self._poisoned:
                raise StoreUnavailable(self.name, "lock_poisoned")
            try:
                yield
            except Exception:
                self._poisoned = True
                log.exception("%s store lock poisoned", self.name)
                raise
        finally:
            self._lock.release()

    def recover(self) -> None:
        """Clear the poisoned flag so the store can be entered again."""
        with self._lock:
            if self._poisoned:
                log.warning("%s store lock recovered", self.name)
            self._poisoned = False
