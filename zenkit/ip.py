"""Socket enumerations, configuration and IP endpoint addresses."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from enum import IntEnum


class Family(IntEnum):
    """Address families."""

    UNSPEC = socket.AF_UNSPEC
    INET = socket.AF_INET
    INET6 = socket.AF_INET6


class SockType(IntEnum):
    """Socket types."""

    UNSPEC = 0
    STREAM = socket.SOCK_STREAM
    DATAGRAM = socket.SOCK_DGRAM
    RAW = socket.SOCK_RAW


class IPProto(IntEnum):
    """IP protocol numbers."""

    IP = getattr(socket, "IPPROTO_IP", 0)
    ICMP = getattr(socket, "IPPROTO_ICMP", 1)
    IGMP = getattr(socket, "IPPROTO_IGMP", 2)
    TCP = getattr(socket, "IPPROTO_TCP", 6)
    PUP = getattr(socket, "IPPROTO_PUP", 12)
    UDP = getattr(socket, "IPPROTO_UDP", 17)
    IDP = getattr(socket, "IPPROTO_IDP", 22)
    RAW = getattr(socket, "IPPROTO_RAW", 255)
    MAX = getattr(socket, "IPPROTO_MAX", 256)


class Shut(IntEnum):
    """Which direction of a connection to shut down."""

    RD = getattr(socket, "SHUT_RD", 0)
    WR = getattr(socket, "SHUT_WR", 1)
    RDWR = getattr(socket, "SHUT_RDWR", 2)


class MsgType(IntEnum):
    """Flags for sending and receiving."""

    DEFAULT = 0
    OUT_BAND = socket.MSG_OOB
    PEEK = socket.MSG_PEEK
    NO_ROUTE = getattr(socket, "MSG_DONTROUTE", 4)
    NO_WAIT = getattr(socket, "MSG_DONTWAIT", 0)


@dataclass
class Config:
    """Parameters used to create a socket."""

    family: Family = Family.INET
    type: SockType = SockType.STREAM
    ipp: IPProto = IPProto.IP


@dataclass(frozen=True)
class Address:
    """An IPv4 or IPv6 endpoint; ``UNSPEC`` marks an unresolved address."""

    family: Family = Family.UNSPEC
    ip: str = ""
    port: int = 0

    @property
    def is_specified(self):
        """True when the address names an IPv4 or IPv6 endpoint."""
        return self.family != Family.UNSPEC

    def to_sockaddr(self):
        """Return the tuple the socket module takes for this address."""
        if self.family == Family.INET:
            return (self.ip, self.port)
        if self.family == Family.INET6:
            return (self.ip, self.port, 0, 0)
        raise ValueError("address family is unspecified")

    @classmethod
    def from_sockaddr(cls, family, sockaddr):
        """Build from a family and a socket-module address tuple."""
        try:
            family = Family(family)
        except ValueError:
            return cls()
        if family == Family.UNSPEC:
            return cls()
        ip, port = sockaddr[0], sockaddr[1]
        return cls(family, ip, int(port) & 0xFFFF)

    def with_port(self, port):
        """Return the same address with another port."""
        return Address(self.family, self.ip, port & 0xFFFF)

    def __str__(self):
        if self.family == Family.INET:
            return f"{self.ip}:{self.port}"
        if self.family == Family.INET6:
            return f"[{self.ip}]:{self.port}"
        return ""


def make_address(ip0, ip1, ip2, ip3, port):
    """Build an IPv4 address from its four bytes and a port."""
    octets = (ip0 & 0xFF, ip1 & 0xFF, ip2 & 0xFF, ip3 & 0xFF)
    return Address(Family.INET, ".".join(str(o) for o in octets), port & 0xFFFF)


def resolve_address(host_name, port, family=Family.INET):
    """Resolve ``host_name`` to the first address of ``family``.

    An unspecified address is returned when nothing matches.
    """
    try:
        infos = socket.getaddrinfo(host_name, None)
    except (OSError, UnicodeError):
        return Address()
    for info_family, _type, _proto, _name, sockaddr in infos:
        if info_family != family:
            continue
        return Address.from_sockaddr(info_family, sockaddr).with_port(port)
    return Address()