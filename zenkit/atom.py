"""Thread-safe containers guarded by a lock."""

from __future__ import annotations

import threading
from collections import deque


class AtomQueue:
    """A double-ended queue whose operations hold a lock."""

    def __init__(self):
        self._queue = deque()
        self._lock = threading.Lock()

    def push_front(self, value):
        with self._lock:
            self._queue.appendleft(value)

    def push_back(self, value):
        with self._lock:
            self._queue.append(value)

    def pop_front(self):
        """Remove and return the first item; IndexError when empty."""
        with self._lock:
            return self._queue.popleft()

    def pop_back(self):
        """Remove and return the last item; IndexError when empty."""
        with self._lock:
            return self._queue.pop()

    def clear(self):
        with self._lock:
            self._queue.clear()

    def execute(self, run):
        """Call ``run`` with the underlying deque while holding the lock."""
        with self._lock:
            return run(self._queue)


class AtomConditionQueue:
    """A bounded FIFO queue: ``push`` waits while full, ``pop`` while empty."""

    def __init__(self, max_size=1 << 16):
        self.max_size = max_size
        self._queue = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def __len__(self):
        return len(self._queue)

    def push(self, value):
        with self._lock:
            while len(self._queue) >= self.max_size:
                self._not_full.wait()
            self._queue.append(value)
            self._not_empty.notify()

    def pop(self):
        with self._lock:
            while not self._queue:
                self._not_empty.wait()
            value = self._queue.popleft()
            self._not_full.notify()
            return value

    def pop_all(self):
        """Remove and return every queued item without waiting."""
        with self._lock:
            items, self._queue = self._queue, deque()
            self._not_full.notify_all()
            return items


class AtomMap:
    """A dictionary whose operations hold a lock."""

    def __init__(self):
        self._map = {}
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._map)

    def find(self, key, run):
        """Call ``run(value)`` under the lock if ``key`` exists; return whether it did."""
        with self._lock:
            if key not in self._map:
                return False
            run(self._map[key])
            return True

    def erase(self, key):
        """Remove ``key``; return False if it was absent."""
        with self._lock:
            if key not in self._map:
                return False
            del self._map[key]
            return True

    def insert(self, key, value):
        with self._lock:
            self._map[key] = value

    def clear(self):
        with self._lock:
            self._map.clear()

    def execute(self, run):
        """Call ``run`` with the underlying dict while holding the lock."""
        with self._lock:
            return run(self._map)


class AtomSet:
    """A set whose operations hold a lock."""

    def __init__(self):
        self._set = set()
        self._lock = threading.Lock()

    def insert(self, value):
        with self._lock:
            self._set.add(value)

    def execute(self, run):
        """Call ``run`` with the underlying set while holding the lock."""
        with self._lock:
            return run(self._set)

    def find(self, value):
        with self._lock:
            return value in self._set

    def erase(self, value):
        """Remove ``value``; return False if it was absent."""
        with self._lock:
            if value not in self._set:
                return False
            self._set.remove(value)
            return True