"""Readiness polling for sockets."""

from __future__ import annotations

import selectors
from enum import IntEnum

from .link import Link

MAX_EVENTS = 32


class PollEvent(IntEnum):
    """What a poll callback is told about a socket."""

    READ = 0
    WRITE = 1


def _fileno(sock):
    if isinstance(sock, Link):
        return sock.handle
    if isinstance(sock, int):
        return sock
    return sock.fileno()


class Poll:
    """Watches sockets for readability and reports them to a callback.

    Each registered socket carries a user object that is passed back to
    the callback together with the :class:`PollEvent`.
    """

    def __init__(self):
        self._selector = selectors.DefaultSelector()

    @property
    def closed(self):
        return self._selector is None

    def add(self, sock, data=None):
        """Watch ``sock`` for reading; re-adding replaces its data.

        Return False if the socket cannot be watched.
        """
        if self._selector is None:
            return False
        try:
            fd = _fileno(sock)
            try:
                self._selector.modify(fd, selectors.EVENT_READ, data)
            except KeyError:
                self._selector.register(fd, selectors.EVENT_READ, data)
        except (OSError, ValueError):
            return False
        return True

    def remove(self, sock):
        """Stop watching ``sock``; unknown sockets are ignored."""
        if self._selector is None:
            return
        try:
            self._selector.unregister(_fileno(sock))
        except (KeyError, ValueError, OSError):
            pass

    def wait(self, callback=None, timeout=-1):
        """Wait for events and return how many were reported.

        ``timeout`` is in milliseconds: 0 returns at once, a negative
        value waits until an event arrives.  At most 32 events are
        reported per call; ``callback(data, event)`` is called for each
        when given.  Returns 0 on timeout.
        """
        if self._selector is None:
            raise ValueError("poll is closed")
        seconds = None if timeout < 0 else timeout / 1000.0
        if not self._selector.get_map():
            # Selectors with nothing registered may not sleep; keep the timeout honest.
            if seconds is None:
                raise ValueError("waiting forever with no socket registered")
            events = []
            if seconds:
                import time

                time.sleep(seconds)
        else:
            events = self._selector.select(seconds)[:MAX_EVENTS]
        if callback is not None:
            for key, mask in events:
                event = PollEvent.READ if mask & selectors.EVENT_READ else PollEvent.WRITE
                callback(key.data, event)
        return len(events)

    def close(self):
        """Release the underlying selector."""
        if self._selector is None:
            return
        self._selector.close()
        self._selector = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()