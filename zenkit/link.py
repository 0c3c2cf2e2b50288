"""TCP connections, connectors and listeners over the socket module."""

from __future__ import annotations

import array
import errno
import logging
import socket
import struct
import sys
from enum import IntFlag

from .ip import Address, Config, Family, IPProto, MsgType, SockType

try:
    import fcntl
    import termios
except ImportError:  # pragma: no cover - platforms without ioctl
    fcntl = None
    termios = None

_log = logging.getLogger(__name__)

_TRANSIENT = {errno.EINTR, errno.EWOULDBLOCK, errno.EAGAIN}


def _is_transient(exc):
    if isinstance(exc, (BlockingIOError, InterruptedError, socket.timeout)):
        return True
    return exc.errno in _TRANSIENT


def _config_family(address):
    if address.family in (Family.INET, Family.INET6):
        return address.family
    return Family.UNSPEC


class LinkStatus(IntFlag):
    """Which directions of a link have been closed."""

    OK = 0
    SEND_CLOSED = 1
    RECV_CLOSED = 2


class Link:
    """One socket with its configuration and closed-direction status."""

    def __init__(self, config=None, sock=None):
        self._config = config if config is not None else Config()
        self._sock = sock
        self.status = LinkStatus.OK

    @property
    def config(self):
        return self._config

    @property
    def handle(self):
        """The socket's file descriptor, or -1 when there is none."""
        return self._sock.fileno() if self._sock is not None else -1

    @property
    def socket(self):
        return self._sock

    def is_valid_handle(self):
        return self._sock is not None

    def clear(self):
        """Reset the status to OK."""
        self.status = LinkStatus.OK

    def open(self):
        """Create the socket; False if it already exists or cannot be made."""
        if self._sock is not None:
            return False
        try:
            self._sock = socket.socket(
                int(self._config.family), int(self._config.type), int(self._config.ipp)
            )
        except OSError as exc:
            _log.error("socket open e:%s", exc.errno)
            return False
        self.clear()
        return True

    def close(self):
        """Close the socket; True when there is no socket left open."""
        if self._sock is None:
            return True
        try:
            self._sock.close()
        except OSError as exc:
            _log.error("socket:[%d] close e:%s", self.handle, exc.errno)
            return False
        self._sock = None
        return True

    def shutdown(self, how):
        if self._sock is None:
            return False
        try:
            self._sock.shutdown(int(how))
        except OSError as exc:
            _log.error("socket:[%d] shutdown e:%s", self.handle, exc.errno)
            return False
        return True

    def set_non_block(self, flag):
        if self._sock is None:
            return False
        try:
            self._sock.setblocking(not flag)
        except OSError:
            return False
        return True

    def set_reuseable(self, flag):
        if self._sock is None:
            return False
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1 if flag else 0)
        except OSError:
            return False
        return True

    def set_timeout(self, second, for_send, for_recv):
        """Set kernel send and/or receive timeouts in seconds."""
        if self._sock is None:
            return False
        if sys.platform == "win32":
            value = int(second * 1000)
        else:
            whole = int(second)
            value = struct.pack("@ll", whole, int((second - whole) * 1_000_000))
        options = []
        if for_send:
            options.append(socket.SO_SNDTIMEO)
        if for_recv:
            options.append(socket.SO_RCVTIMEO)
        ok = True
        for option in options:
            try:
                self._sock.setsockopt(socket.SOL_SOCKET, option, value)
            except OSError:
                ok = False
        return ok

    def recv(self, size, way=MsgType.DEFAULT):
        """Receive up to ``size`` bytes; empty when nothing is available.

        An orderly close by the peer or a hard error marks the receive
        direction closed.
        """
        if size == 0 or self._sock is None or self.status & LinkStatus.RECV_CLOSED:
            return b""
        try:
            data = self._sock.recv(size, int(way))
        except OSError as exc:
            if _is_transient(exc):
                return b""
            _log.error("socket:[%d] recv e:%s", self.handle, exc.errno)
            self.status |= LinkStatus.RECV_CLOSED
            return b""
        if not data:
            self.status |= LinkStatus.RECV_CLOSED
        return data

    def send(self, data, way=MsgType.DEFAULT):
        """Send bytes; return how many were sent (0 when none could be)."""
        if not data or self._sock is None or self.status & LinkStatus.SEND_CLOSED:
            return 0
        try:
            sent = self._sock.send(bytes(data), int(way))
        except OSError as exc:
            if _is_transient(exc):
                return 0
            _log.error("send error socket[%d], e:%s", self.handle, exc.errno)
            self.status |= LinkStatus.SEND_CLOSED
            return 0
        if sent == 0:
            self.status |= LinkStatus.SEND_CLOSED
        return sent

    def can_recv_size(self):
        """Number of bytes waiting to be read, or 0 if unknown."""
        if self._sock is None or fcntl is None:
            return 0
        buf = array.array("i", [0])
        try:
            fcntl.ioctl(self._sock.fileno(), termios.FIONREAD, buf, True)
        except OSError:
            return 0
        return buf[0]

    def local_address(self):
        if self._sock is None:
            return Address()
        try:
            return Address.from_sockaddr(self._sock.family, self._sock.getsockname())
        except OSError:
            return Address()

    def peer_address(self):
        if self._sock is None:
            return Address()
        try:
            return Address.from_sockaddr(self._sock.family, self._sock.getpeername())
        except OSError:
            return Address()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class TCPConnector:
    """Opens outgoing TCP connections; ``error`` holds the last errno."""

    def __init__(self):
        self.error = 0

    def connect(self, server_address):
        """Return a connected :class:`Link`, or None on failure."""
        family = _config_family(server_address)
        if family == Family.UNSPEC:
            _log.error("invalid socket address for connect")
            return None
        link = Link(Config(family, SockType.STREAM, IPProto.IP))
        if not link.open():
            return None
        try:
            link.socket.connect(server_address.to_sockaddr())
        except OSError as exc:
            self.error = exc.errno or 0
            link.close()
            return None
        return link


class TCPListener:
    """Accepts incoming TCP connections on a bound address."""

    def __init__(self):
        self.link = None

    def bind(self, listen_address):
        """Create a reusable socket and bind it to ``listen_address``."""
        family = _config_family(listen_address)
        self.link = Link(Config(family, SockType.STREAM, IPProto.TCP))
        if not self.link.open():
            return False
        self.link.set_reuseable(True)
        try:
            self.link.socket.bind(listen_address.to_sockaddr())
        except (OSError, ValueError) as exc:
            _log.error("socket:[%d] bind e:%s", self.link.handle, getattr(exc, "errno", None))
            return False
        return True

    def set_non_block(self, flag):
        return self.link is not None and self.link.set_non_block(flag)

    def set_reuseable(self, flag):
        return self.link is not None and self.link.set_reuseable(flag)

    def listen(self, backlog):
        if self.link is None or not self.link.is_valid_handle():
            return False
        try:
            self.link.socket.listen(backlog)
        except OSError as exc:
            _log.error("socket:[%d] listen e:%s", self.link.handle, exc.errno)
            return False
        return True

    def accept(self):
        """Return a :class:`Link` for the next connection, or None."""
        if self.link is None or not self.link.is_valid_handle():
            return None
        try:
            conn, _addr = self.link.socket.accept()
        except OSError as exc:
            if not _is_transient(exc):
                _log.error("socket[%d]: accept e:%s", self.link.handle, exc.errno)
            return None
        return Link(self.link.config, conn)