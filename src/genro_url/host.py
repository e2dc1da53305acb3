# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Host and Origin value types.

Purpose
=======
``Host`` is a closed three-way variant: a domain name, an IPv4 address or
an IPv6 address. ``Origin`` is the non-opaque ``(scheme, host, port)``
triple of a URL that has both a host and a port.

Host Variants::

    https://example.com/     →  Host(DOMAIN, "example.com")
    https://192.168.0.1/     →  Host(IPV4, IPv4Address("192.168.0.1"))
    https://[fe80::1]/       →  Host(IPV6, IPv6Address("fe80::1"))

Definition::

    class HostKind(IntEnum): DOMAIN, IPV4, IPV6

    class Host:
        __slots__ = ("kind", "value")

        @classmethod domain(name) / ipv4(addr) / ipv6(addr) / from_raw(raw)
        @property is_domain / is_ip -> bool
        @property ip -> IPv4Address | IPv6Address | None
        def __str__(self) -> str        # URL form, IPv6 in brackets
        # eq / hash / ordering: kind first, then payload

    class Origin:
        __slots__ = ("scheme", "host", "port")

        @property ascii_serialization -> str
        def socket_address(self) -> Address | None

Design Notes
============
- ``kind`` + ``value`` instead of a class per variant: the set is closed
  and callers match on ``kind``.
- ``Origin.socket_address`` never resolves domains.
"""

from __future__ import annotations

from enum import IntEnum
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Union

from .address import Address

__all__ = ["Host", "HostKind", "Origin"]

HostValue = Union[str, IPv4Address, IPv6Address]


class HostKind(IntEnum):
    """Host variant. Integer values give the cross-variant ordering."""

    DOMAIN = 0
    IPV4 = 1
    IPV6 = 2


class Host:
    """
    Domain name or IP address of a URL.

    Attributes:
        kind: The HostKind variant.
        value: ``str`` for DOMAIN, ``IPv4Address`` or ``IPv6Address`` for IPs.

    Example:
        >>> Host.from_raw("github.com") == Host.domain("github.com")
        True
        >>> str(Host.from_raw("fe80::1"))
        '[fe80::1]'
    """

    __slots__ = ("kind", "value")

    def __init__(self, kind: HostKind, value: HostValue) -> None:
        self.kind = kind
        self.value = value

    @classmethod
    def domain(cls, name: str) -> Host:
        return cls(HostKind.DOMAIN, name)

    @classmethod
    def ipv4(cls, address: IPv4Address | str) -> Host:
        return cls(HostKind.IPV4, IPv4Address(address))

    @classmethod
    def ipv6(cls, address: IPv6Address | str) -> Host:
        return cls(HostKind.IPV6, IPv6Address(address))

    @classmethod
    def from_raw(cls, raw: str) -> Host:
        """
        Classify a host string already accepted by the grammar.

        IP literals come back from the grammar without brackets and in
        compressed form; anything that is not an IP address is a domain.

        Args:
            raw: Host text as serialized in the URL, brackets removed.

        Returns:
            The matching Host variant.
        """
        try:
            address = ip_address(raw)
        except ValueError:
            return cls.domain(raw)
        if address.version == 6:
            return cls(HostKind.IPV6, address)
        return cls(HostKind.IPV4, address)

    @property
    def is_domain(self) -> bool:
        return self.kind is HostKind.DOMAIN

    @property
    def is_ip(self) -> bool:
        return self.kind is not HostKind.DOMAIN

    @property
    def ip(self) -> IPv4Address | IPv6Address | None:
        """The IP address, or None for domains."""
        if isinstance(self.value, str):
            return None
        return self.value

    def _key(self) -> tuple[int, HostValue]:
        return (self.kind, self.value)

    def __str__(self) -> str:
        if self.kind is HostKind.IPV6:
            return f"[{self.value}]"
        return str(self.value)

    def __repr__(self) -> str:
        return f"Host({self.kind.name}, {str(self.value)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Host):
            return self.kind is other.kind and self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        if self.kind != other.kind:
            return self.kind < other.kind
        return self.value < other.value  # type: ignore[operator]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return other < self

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return self == other or other < self


class Origin:
    """
    Non-opaque origin: scheme, host and port of a URL.

    Only built when a URL has both a host and a port. The scheme string is
    the same object the parsed URL holds.

    Attributes:
        scheme: Lower-case scheme.
        host: The Host.
        port: Port number.

    Example:
        >>> origin = Url("https://192.168.0.1:8080/").origin
        >>> origin.ascii_serialization
        'https://192.168.0.1:8080'
        >>> origin.socket_address() == ("192.168.0.1", 8080)
        True
    """

    __slots__ = ("scheme", "host", "port")

    def __init__(self, scheme: str, host: Host, port: int) -> None:
        self.scheme = scheme
        self.host = host
        self.port = port

    @property
    def ascii_serialization(self) -> str:
        """``scheme://host:port``."""
        return f"{self.scheme}://{self.host}:{self.port}"

    def socket_address(self) -> Address | None:
        """
        Return the socket endpoint for IP hosts.

        Returns:
            Address for IPv4/IPv6 hosts, None for domains.
        """
        ip = self.host.ip
        if ip is None:
            return None
        return Address(ip, self.port)

    def __repr__(self) -> str:
        return f"Origin(scheme={self.scheme!r}, host={self.host!r}, port={self.port})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Origin):
            return (
                self.scheme == other.scheme
                and self.host == other.host
                and self.port == other.port
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.scheme, self.host, self.port))
