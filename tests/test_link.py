import errno
import socket
import time

import pytest

from zenkit.ip import Config, Family, MsgType, make_address
from zenkit.link import Link, LinkStatus, TCPConnector, TCPListener


def _recv_exact(link, size, timeout=5.0):
    deadline = time.monotonic() + timeout
    data = b""
    while len(data) < size and time.monotonic() < deadline:
        data += link.recv(size - len(data))
    return data


@pytest.fixture
def pair():
    listener = TCPListener()
    assert listener.bind(make_address(127, 0, 0, 1, 0))
    assert listener.listen(4)
    port = listener.link.local_address().port
    client = TCPConnector().connect(make_address(127, 0, 0, 1, port))
    server = listener.accept()
    yield listener, client, server
    client.close()
    server.close()
    listener.link.close()


def test_new_link_is_ok_and_invalid():
    link = Link(Config())
    assert link.status == LinkStatus.OK
    assert link.is_valid_handle() is False
    assert link.handle == -1


def test_open_twice_fails():
    with Link(Config()) as link:
        assert link.open() is True
        assert link.open() is False
        assert link.is_valid_handle() is True


def test_close_without_socket_succeeds():
    link = Link(Config())
    assert link.close() is True


def test_operations_on_closed_link_fail():
    link = Link(Config())
    assert link.set_timeout(1.0, True, True) is False
    assert link.set_non_block(True) is False
    assert link.shutdown(Link and 2) is False
    assert link.recv(10) == b""
    assert link.send(b"abc") == 0
    assert link.can_recv_size() == 0


def test_set_timeout_on_open_link():
    with Link(Config()) as link:
        assert link.open()
        assert link.set_timeout(1.5, True, True) is True


def test_send_and_receive(pair):
    _listener, client, server = pair
    assert client.send(b"hello") == 5
    assert _recv_exact(server, 5) == b"hello"
    assert server.status == LinkStatus.OK


def test_peer_and_local_addresses_match(pair):
    _listener, client, server = pair
    assert client.peer_address() == server.local_address()
    assert server.peer_address() == client.local_address()
    assert client.local_address().family == Family.INET


def test_can_recv_size_reports_pending_bytes(pair):
    _listener, client, server = pair
    client.send(b"abcd")
    deadline = time.monotonic() + 5
    while server.can_recv_size() < 4 and time.monotonic() < deadline:
        time.sleep(0.01)
    assert server.can_recv_size() == 4


def test_peek_does_not_consume(pair):
    _listener, client, server = pair
    client.send(b"xy")
    deadline = time.monotonic() + 5
    peeked = b""
    while len(peeked) < 2 and time.monotonic() < deadline:
        peeked = server.recv(2, MsgType.PEEK)
    assert peeked == b"xy"
    assert _recv_exact(server, 2) == b"xy"


def test_recv_zero_size_returns_empty(pair):
    _listener, _client, server = pair
    assert server.recv(0) == b""
    assert server.status == LinkStatus.OK


def test_non_blocking_recv_without_data_keeps_link_open(pair):
    _listener, _client, server = pair
    assert server.set_non_block(True)
    assert server.recv(10) == b""
    assert server.status == LinkStatus.OK


def test_peer_close_marks_recv_closed(pair):
    _listener, client, server = pair
    client.close()
    deadline = time.monotonic() + 5
    while not server.status & LinkStatus.RECV_CLOSED and time.monotonic() < deadline:
        server.recv(10)
    assert server.status == LinkStatus.RECV_CLOSED
    assert server.recv(10) == b""
    server.clear()
    assert server.status == LinkStatus.OK


def test_connect_to_unspecified_address_fails():
    connector = TCPConnector()
    assert connector.connect(make_address(127, 0, 0, 1, 1).__class__()) is None
    assert connector.error == 0


def test_connect_refused_records_errno():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    connector = TCPConnector()
    assert connector.connect(make_address(127, 0, 0, 1, port)) is None
    assert connector.error == errno.ECONNREFUSED


def test_listener_without_bind_refuses():
    listener = TCPListener()
    assert listener.listen(1) is False
    assert listener.accept() is None
    assert listener.set_non_block(True) is False


def test_non_blocking_accept_without_client_returns_none():
    listener = TCPListener()
    assert listener.bind(make_address(127, 0, 0, 1, 0))
    try:
        assert listener.listen(1)
        assert listener.set_non_block(True)
        assert listener.accept() is None
    finally:
        listener.link.close()