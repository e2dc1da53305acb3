# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Socket endpoint for IP-literal origins.

Purpose
=======
An ``Origin`` whose host is an IP literal maps directly onto a socket
endpoint. ``Address`` is that endpoint: an IP address plus a port, ready
to hand to ``socket.connect`` or ``asyncio.open_connection``. Domain
origins never produce an Address because that would require resolution.

Socket Mapping::

    https://192.168.0.1:8080/   →  Address(192.168.0.1, 8080)  AF_INET
    https://[fe80::1]:8080/     →  Address(fe80::1, 8080)      AF_INET6
    https://example.com:8080/   →  None (no resolution)

Definition::

    class Address:
        __slots__ = ("ip", "port")

        def __init__(self, ip: IPv4Address | IPv6Address, port: int) -> None
        @property host -> str
        @property family -> socket.AddressFamily
        def as_tuple(self) -> tuple[str, int]
        def __eq__(self, other: object) -> bool
            # Compares with Address or (host, port) tuple
        def __hash__(self) -> int

Example::

    from ipaddress import ip_address
    from genro_url import Address

    addr = Address(ip_address("192.168.0.1"), 8080)
    print(addr.host)    # "192.168.0.1"
    print(addr.family)  # AddressFamily.AF_INET
    assert addr == ("192.168.0.1", 8080)

Design Notes
============
- Uses ``__slots__`` for memory efficiency
- Compares equal to ``tuple[str, int]`` so it can be checked against
  socket-style pairs
"""

import socket
from ipaddress import IPv4Address, IPv6Address

__all__ = ["Address"]


class Address:
    """
    IP socket endpoint.

    Attributes:
        ip: The IP address.
        port: The port number.

    Example:
        >>> addr = Address(IPv4Address("127.0.0.1"), 8080)
        >>> addr.host
        '127.0.0.1'
        >>> addr == ("127.0.0.1", 8080)
        True
    """

    __slots__ = ("ip", "port")

    def __init__(self, ip: IPv4Address | IPv6Address, port: int) -> None:
        """
        Initialize an Address.

        Args:
            ip: The IP address.
            port: The port number.
        """
        self.ip = ip
        self.port = port

    @property
    def host(self) -> str:
        """Text form of the IP address, without brackets."""
        return str(self.ip)

    @property
    def family(self) -> socket.AddressFamily:
        """Socket address family matching the IP version."""
        return socket.AF_INET6 if self.ip.version == 6 else socket.AF_INET

    def as_tuple(self) -> tuple[str, int]:
        """Return ``(host, port)`` suitable for ``socket.connect``."""
        return (self.host, self.port)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Address(host={self.host!r}, port={self.port})"

    def __eq__(self, other: object) -> bool:
        """
        Compare with another Address or tuple.

        Args:
            other: An Address instance or a ``(host, port)`` tuple.

        Returns:
            True if host and port match, False otherwise.
        """
        if isinstance(other, Address):
            return self.ip == other.ip and self.port == other.port
        if isinstance(other, tuple) and len(other) == 2:
            return bool(self.host == other[0] and self.port == other[1])
        return False

    def __hash__(self) -> int:
        return hash((self.host, self.port))
