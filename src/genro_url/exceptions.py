# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Fault classes for URL parsing.

Every failed parse raises exactly one fault. Faults form a closed taxonomy
identified by ``FaultKind`` and split into two tiers:

1. Grammar faults - raised by the grammar layer (``genro_url.grammar``)
   when the text is not a URL at all: bad host, bad port, bad IP literal,
   missing scheme, oversized input.
2. Decoding faults - raised by the decomposition step
   (``genro_url.parser``) when a percent-decoded component is not valid
   UTF-8. There is one kind per component so callers can tell which field
   is malformed.

Module Structure
----------------
- FaultKind - enum of the fourteen fault kinds
- UrlFault(ValueError) - base class, carries ``kind``
- GrammarFault(UrlFault) - grammar tier
- DecodingFault(UrlFault) - decoding tier
- UrlDeserializationError(ValueError) - error of the JSON layer, wraps a
  UrlFault when the payload was a string that failed to parse

Design Decisions
----------------
- Faults subclass ``ValueError``: a malformed URL is a bad value.
- A fault never carries the offending input. Callers that want richer
  diagnostics keep the input themselves.
- ``kind`` is the authoritative discriminator; the subclasses only let
  callers catch a whole tier at once.

Example:
    >>> try:
    ...     Url("ftps://%ff@example.com")
    ... except DecodingFault as e:
    ...     assert e.kind is FaultKind.USERNAME_UTF8
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "FaultKind",
    "UrlFault",
    "GrammarFault",
    "DecodingFault",
    "UrlDeserializationError",
]


class FaultKind(Enum):
    """Closed set of parse fault kinds. Values are display messages."""

    EMPTY_HOST = "empty host"
    IDNA_ERROR = "invalid international domain name"
    INVALID_PORT = "invalid port number"
    INVALID_IPV4_ADDRESS = "invalid IPv4 address"
    INVALID_IPV6_ADDRESS = "invalid IPv6 address"
    INVALID_DOMAIN_CHARACTER = "invalid domain character"
    RELATIVE_URL_WITHOUT_BASE = "relative URL without a base"
    RELATIVE_URL_WITH_CANNOT_BE_A_BASE_BASE = "relative URL with a cannot-be-a-base base"
    SET_HOST_ON_CANNOT_BE_A_BASE_URL = "a cannot-be-a-base URL doesn't have a host to set"
    OVERFLOW = "URLs more than 4 GB are not supported"

    USERNAME_UTF8 = "username is not valid UTF-8 after percent-decoding"
    PASSWORD_UTF8 = "password is not valid UTF-8 after percent-decoding"
    PATH_UTF8 = "path is not valid UTF-8 after percent-decoding"
    FULL_QUERY_UTF8 = "query is not valid UTF-8 after percent-decoding"

    @property
    def is_decoding(self) -> bool:
        """True for the four component decoding kinds."""
        return self in _DECODING_KINDS

    @property
    def is_grammar(self) -> bool:
        """True for kinds reported by the grammar layer."""
        return self not in _DECODING_KINDS


_DECODING_KINDS = frozenset(
    {
        FaultKind.USERNAME_UTF8,
        FaultKind.PASSWORD_UTF8,
        FaultKind.PATH_UTF8,
        FaultKind.FULL_QUERY_UTF8,
    }
)


class UrlFault(ValueError):
    """
    URL parse failure of a single kind.

    Attributes:
        kind: The FaultKind identifying what went wrong.

    Example:
        >>> raise GrammarFault(FaultKind.INVALID_PORT)
    """

    def __init__(self, kind: FaultKind) -> None:
        """
        Initialize fault.

        Args:
            kind: The fault kind. Its value is used as the message.
        """
        self.kind = kind
        super().__init__(kind.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UrlFault):
            return self.kind is other.kind
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{type(self).__name__}(kind={self.kind.name})"


class GrammarFault(UrlFault):
    """The text is not a URL the grammar accepts."""


class DecodingFault(UrlFault):
    """A percent-decoded component is not valid UTF-8."""


class UrlDeserializationError(ValueError):
    """
    Deserialization of a URL value failed.

    Raised by ``genro_url.serialization.load_url``. When the payload was a
    string that did not parse, ``fault`` holds the UrlFault (also chained as
    ``__cause__``). When the payload was not a string, ``fault`` is None.
    """

    def __init__(self, message: str, fault: UrlFault | None = None) -> None:
        self.fault = fault
        super().__init__(message)

    def __repr__(self) -> str:
        kind = self.fault.kind.name if self.fault is not None else None
        return f"UrlDeserializationError({str(self)!r}, kind={kind})"
