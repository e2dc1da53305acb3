# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
URL decomposition: percent-decoding, query indexing and origin derivation.

Purpose
=======
``ParsedUrl`` is the immutable result of one successful parse. It takes the
grammar breakdown from ``genro_url.grammar`` and:

1. percent-decodes username, password, path and full query to text,
   failing with the component's own ``DecodingFault`` kind;
2. builds the query index (``genro_url.query``);
3. derives the origin on demand when both host and port are present.

Parse Flow::

    text ─→ split_url ─→ GrammarBreakdown ─→ percent_decode ×4 ─→ ParsedUrl
                │                                  │
            GrammarFault                     DecodingFault

``UrlParser`` wraps ``ParsedUrl.parse`` with the configured input limit and
an LRU cache, so parsing the same text twice hands back the same
``ParsedUrl``. ``default_parser()`` returns the process-wide instance used
by ``Url``.

Definition::

    def percent_decode(raw: str | None, kind: FaultKind) -> str | None

    class ParsedUrl:
        @classmethod parse(text, max_length=...) -> ParsedUrl
        string, input, scheme, has_authority, cannot_be_a_base,
        username, password, host, port, origin, path, path_str,
        full_query, fragment, query_index, query_info
        def get_query(self, key: str) -> QueryValues | None

    class UrlParser:
        def __init__(self, settings: ParserSettings | None = None) -> None
        def parse(self, text: str) -> ParsedUrl
        def cache_clear(self) -> None

    def default_parser() -> UrlParser
    def configure(settings: ParserSettings) -> UrlParser

Design Notes
============
- A present but empty raw component decodes to None, not "".
- No partial ParsedUrl ever escapes: all fields are computed before the
  instance is built.
- Parse results are shared freely between threads; nothing is mutated
  after construction.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import PurePosixPath
from typing import Callable
from urllib.parse import unquote_to_bytes

from .exceptions import DecodingFault, FaultKind, UrlFault
from .grammar import GrammarBreakdown, split_url
from .host import Host, Origin
from .query import QueryIndex, QueryValues, build_query_index
from .settings import MAX_URL_LENGTH, ParserSettings

__all__ = [
    "ParsedUrl",
    "UrlParser",
    "configure",
    "default_parser",
    "percent_decode",
]

logger = logging.getLogger("genro_url.parser")


def percent_decode(raw: str | None, kind: FaultKind) -> str | None:
    """
    Percent-decode a raw URL component to text.

    ``%XX`` triplets become bytes, everything else is kept as is, and the
    result must be valid UTF-8.

    Args:
        raw: Encoded component, or None.
        kind: Decoding fault kind to raise on invalid UTF-8.

    Returns:
        Decoded text, or None if raw is None or empty.

    Raises:
        DecodingFault: If the decoded bytes are not valid UTF-8.
    """
    if not raw:
        return None
    try:
        return unquote_to_bytes(raw).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodingFault(kind) from exc


class ParsedUrl:
    """
    Immutable decomposition of a parsed URL.

    Build with ``ParsedUrl.parse``. All text accessors return decoded text;
    ``fragment`` is the exception and stays encoded.

    Example:
        >>> parsed = ParsedUrl.parse("ftps://john%20doe@google.com")
        >>> parsed.string
        'ftps://john%20doe@google.com'
        >>> parsed.username
        'john doe'
    """

    __slots__ = (
        "_breakdown",
        "_input",
        "_username",
        "_password",
        "_path",
        "_full_query",
        "_query_index",
    )

    def __init__(
        self,
        breakdown: GrammarBreakdown,
        input: str,
        username: str | None,
        password: str | None,
        path: str | None,
        full_query: str | None,
        query_index: dict[str, QueryValues],
    ) -> None:
        self._breakdown = breakdown
        self._input = input
        self._username = username
        self._password = password
        self._path = path
        self._full_query = full_query
        self._query_index = QueryIndex(full_query, query_index)

    @classmethod
    def parse(cls, text: str, max_length: int = MAX_URL_LENGTH) -> ParsedUrl:
        """
        Parse and decompose URL text.

        Args:
            text: The URL text.
            max_length: Inputs longer than this fail with OVERFLOW.

        Returns:
            The fully populated ParsedUrl.

        Raises:
            GrammarFault: If the grammar rejects the text.
            DecodingFault: If a component does not decode to valid UTF-8.
        """
        breakdown = split_url(text, max_length)
        username = percent_decode(breakdown.raw_username, FaultKind.USERNAME_UTF8)
        password = percent_decode(breakdown.raw_password, FaultKind.PASSWORD_UTF8)
        path = percent_decode(breakdown.raw_path, FaultKind.PATH_UTF8)
        full_query = percent_decode(breakdown.raw_query, FaultKind.FULL_QUERY_UTF8)
        return cls(
            breakdown,
            text,
            username,
            password,
            path,
            full_query,
            build_query_index(breakdown.raw_query),
        )

    @property
    def string(self) -> str:
        """Canonical serialization, used for equality, hashing and display."""
        return self._breakdown.serialization

    @property
    def input(self) -> str:
        """The text that was parsed, unchanged."""
        return self._input

    @property
    def scheme(self) -> str:
        return self._breakdown.scheme

    @property
    def has_authority(self) -> bool:
        return self._breakdown.has_authority

    @property
    def cannot_be_a_base(self) -> bool:
        """True for URLs like ``mailto:x`` whose path does not start with /."""
        return self._breakdown.cannot_be_a_base

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def password(self) -> str | None:
        return self._password

    @property
    def host(self) -> Host | None:
        return self._breakdown.host

    @property
    def port(self) -> int | None:
        """Explicit port, None when absent or equal to the scheme default."""
        return self._breakdown.port

    @property
    def origin(self) -> Origin | None:
        """Origin, present only when both host and port are present."""
        host = self._breakdown.host
        port = self._breakdown.port
        if host is None or port is None:
            return None
        return Origin(self._breakdown.scheme, host, port)

    @property
    def path(self) -> PurePosixPath | None:
        """Decoded path as a PurePosixPath."""
        if self._path is None:
            return None
        return PurePosixPath(self._path)

    @property
    def path_str(self) -> str | None:
        """Decoded path as text."""
        return self._path

    @property
    def full_query(self) -> str | None:
        """Decoded query string without the leading "?"."""
        return self._full_query

    @property
    def fragment(self) -> str | None:
        """Fragment without the leading "#", still percent-encoded."""
        return self._breakdown.raw_fragment or None

    @property
    def query_index(self) -> QueryIndex:
        """Query index; empty when the URL has no query."""
        return self._query_index

    @property
    def query_info(self) -> QueryIndex | None:
        """Query index, or None when the URL has no query."""
        if self._full_query is None:
            return None
        return self._query_index

    def get_query(self, key: str) -> QueryValues | None:
        """Three-way lookup: None if absent, else the key's QueryValues."""
        return self._query_index.get_key(key)

    def __repr__(self) -> str:
        return f"ParsedUrl({self.string!r})"


class UrlParser:
    """
    Configured parser with a cache of successful parses.

    Equal input texts parse to the same ParsedUrl while cached. Failed
    parses are never cached.

    Example:
        >>> parser = UrlParser(ParserSettings(max_length=2048))
        >>> parser.parse("http://a/") is parser.parse("http://a/")
        True
    """

    __slots__ = ("settings", "_parse")

    def __init__(self, settings: ParserSettings | None = None) -> None:
        self.settings = settings or ParserSettings()
        self._parse: Callable[[str], ParsedUrl] = lru_cache(
            maxsize=self.settings.cache_size
        )(self._parse_uncached)

    def _parse_uncached(self, text: str) -> ParsedUrl:
        try:
            parsed = ParsedUrl.parse(text, self.settings.max_length)
        except UrlFault as e:
            logger.debug(f"Rejected URL ({len(text)} chars): {e.kind.name}")
            raise
        # input may carry credentials
        logger.debug(
            f"Parsed URL ({len(text)} chars): scheme={parsed.scheme} host={parsed.host}"
        )
        return parsed

    def parse(self, text: str) -> ParsedUrl:
        """
        Parse URL text.

        Raises:
            TypeError: If text is not a str.
            UrlFault: GrammarFault or DecodingFault on invalid input.
        """
        if not isinstance(text, str):
            raise TypeError(f"URL text must be str, got {type(text).__name__}")
        return self._parse(text)

    def cache_clear(self) -> None:
        """Drop all cached parses."""
        self._parse.cache_clear()  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"UrlParser({self.settings!r})"


_default_parser: UrlParser | None = None


def default_parser() -> UrlParser:
    """Return the process-wide parser, creating it on first use."""
    global _default_parser
    if _default_parser is None:
        _default_parser = UrlParser()
    return _default_parser


def configure(settings: ParserSettings) -> UrlParser:
    """
    Replace the process-wide parser.

    Args:
        settings: Settings for the new parser.

    Returns:
        The new default parser.
    """
    global _default_parser
    _default_parser = UrlParser(settings)
    logger.info(f"URL parser configured: {settings!r}")
    return _default_parser
