# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Query string index with ``+``-split multi-value grouping.

Purpose
=======
Indexes the pairs of a URL query string by key. Each value is further split
on the literal ``+`` character and classified into ``QueryValues``:

- ``NO_VALUE``: key present, no non-empty segment (``?k`` or ``?k=``)
- ``single``: exactly one non-empty segment (``?k=x``)
- ``multiple``: two or more non-empty segments (``?k=x+y``)

Multi-value via ``+`` is NOT part of the URL standard. A value that
legitimately contains ``+`` (including an escaped ``%2B``) is split too.

Parsing Schema::

    Raw query: "a=1+2&b=&c=x&a2=%2B&d"
                        ↓
            split on "&", partition on first "="
            percent-decode key and value ("+" stays "+")
                        ↓
            split value on "+", drop empty segments
                        ↓
    Index: {
        "a":  QueryValues.multiple(["1", "2"]),
        "b":  QueryValues.NO_VALUE,
        "c":  QueryValues.single("x"),
        "a2": QueryValues.NO_VALUE,
        "d":  QueryValues.NO_VALUE,
    }

Lookup Results::

    index.get("a")        →  QueryValues.multiple(["1", "2"])   present
    index.get("b")        →  QueryValues.NO_VALUE               present, no value
    index.get("missing")  →  None                               absent

Definition::

    class QueryValues:
        __slots__ = ("kind", "values")
        NO_VALUE: QueryValues

        @classmethod single(value) / multiple(values) / from_segments(segments)
        @property value -> str | None
        def as_json(self) -> None | str | list[str]

    class QueryIndex:
        __slots__ = ("full_query", "_index")

        def get(self, key: str) -> QueryValues | None
        def key_exists(self, key: str) -> bool
        def get_key(self, key: str) -> QueryValues | None
        def keys / values / items
        def __getitem__ / __contains__ / __iter__ / __len__ / __bool__

    def build_query_index(raw_query: str | None) -> dict[str, QueryValues]

Design Notes
============
- Uses ``__slots__`` for memory efficiency
- Case-sensitive keys
- Repeated keys: the last pair wins
- Keys and values are decoded from the raw query pair by pair, not taken
  from the fully decoded query string
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import ClassVar
from urllib.parse import unquote_to_bytes

__all__ = ["QueryIndex", "QueryValues", "QueryValuesKind", "build_query_index"]


class QueryValuesKind(Enum):
    """How many non-empty ``+`` segments a query value had."""

    NO_VALUE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"


class QueryValues:
    """
    Grouped value(s) of one query key.

    Attributes:
        kind: The QueryValuesKind.
        values: Non-empty segments in order (empty tuple for NO_VALUE).

    Example:
        >>> QueryValues.from_segments("1+2".split("+"))
        QueryValues.multiple(['1', '2'])
        >>> QueryValues.from_segments(["", ""]) is QueryValues.NO_VALUE
        True
    """

    __slots__ = ("kind", "values")

    NO_VALUE: ClassVar[QueryValues]

    def __init__(self, kind: QueryValuesKind, values: tuple[str, ...]) -> None:
        self.kind = kind
        self.values = values

    @classmethod
    def single(cls, value: str) -> QueryValues:
        return cls(QueryValuesKind.SINGLE, (value,))

    @classmethod
    def multiple(cls, values: Iterable[str]) -> QueryValues:
        return cls(QueryValuesKind.MULTIPLE, tuple(values))

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> QueryValues:
        """
        Classify ``+``-split segments, dropping empty ones.

        Args:
            segments: The segments of one value.

        Returns:
            NO_VALUE, single or multiple depending on the non-empty count.
        """
        data = tuple(segment for segment in segments if segment)
        if not data:
            return cls.NO_VALUE
        if len(data) == 1:
            return cls(QueryValuesKind.SINGLE, data)
        return cls(QueryValuesKind.MULTIPLE, data)

    @property
    def value(self) -> str | None:
        """The value of a single, None otherwise."""
        if self.kind is QueryValuesKind.SINGLE:
            return self.values[0]
        return None

    def as_json(self) -> None | str | list[str]:
        """JSON-friendly form: None, a string, or a list of strings."""
        if self.kind is QueryValuesKind.NO_VALUE:
            return None
        if self.kind is QueryValuesKind.SINGLE:
            return self.values[0]
        return list(self.values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryValues):
            return self.kind is other.kind and self.values == other.values
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.kind, self.values))

    def __repr__(self) -> str:
        if self.kind is QueryValuesKind.NO_VALUE:
            return "QueryValues.NO_VALUE"
        if self.kind is QueryValuesKind.SINGLE:
            return f"QueryValues.single({self.values[0]!r})"
        return f"QueryValues.multiple({list(self.values)!r})"


QueryValues.NO_VALUE = QueryValues(QueryValuesKind.NO_VALUE, ())


def _decode_pair_part(raw: str) -> str:
    # Only reached after the full query decoded as UTF-8, so "replace"
    # never changes a byte here.
    return unquote_to_bytes(raw).decode("utf-8", "replace")


def build_query_index(raw_query: str | None) -> dict[str, QueryValues]:
    """
    Build the key → QueryValues mapping from a raw (encoded) query.

    Args:
        raw_query: Query string without the leading "?", or None.

    Returns:
        Dict of decoded keys to grouped values. Empty if no query.
    """
    index: dict[str, QueryValues] = {}
    if not raw_query:
        return index
    for pair in raw_query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        index[_decode_pair_part(key)] = QueryValues.from_segments(
            _decode_pair_part(value).split("+")
        )
    return index


class QueryIndex:
    """
    Read-only index of query keys to grouped values.

    Lookups distinguish three cases: key absent (``None``), key present
    without a value (``QueryValues.NO_VALUE``) and key present with
    value(s).

    Attributes:
        full_query: The percent-decoded query string, or None.

    Example:
        >>> index = QueryIndex("a=1+2&b=", build_query_index("a=1+2&b="))
        >>> index.get("a")
        QueryValues.multiple(['1', '2'])
        >>> index.get("b") is QueryValues.NO_VALUE
        True
        >>> index.get("c") is None
        True
    """

    __slots__ = ("full_query", "_index")

    def __init__(self, full_query: str | None, index: dict[str, QueryValues]) -> None:
        """
        Initialize QueryIndex.

        Args:
            full_query: The decoded query string, or None if there is none.
            index: Mapping produced by ``build_query_index``.
        """
        self.full_query = full_query
        self._index = index

    def get(self, key: str, default: QueryValues | None = None) -> QueryValues | None:
        """
        Get the grouped values for a key.

        Args:
            key: Query key (case-sensitive).
            default: Value to return if the key is absent.

        Returns:
            QueryValues if the key is present (possibly NO_VALUE),
            otherwise default.
        """
        return self._index.get(key, default)

    def get_key(self, key: str) -> QueryValues | None:
        """Three-way lookup: None if absent, else the QueryValues."""
        return self._index.get(key)

    def key_exists(self, key: str) -> bool:
        """Check if a key is present, with or without a value."""
        return key in self._index

    def keys(self) -> list[str]:
        return list(self._index.keys())

    def values(self) -> list[QueryValues]:
        return list(self._index.values())

    def items(self) -> list[tuple[str, QueryValues]]:
        return list(self._index.items())

    def __getitem__(self, key: str) -> QueryValues:
        """
        Get grouped values by key, raising KeyError if absent.

        Raises:
            KeyError: If the key is not present.
        """
        return self._index[key]

    def __contains__(self, key: object) -> bool:
        """Check if key exists (case-sensitive)."""
        if not isinstance(key, str):
            return False
        return key in self._index

    def __iter__(self) -> Iterator[str]:
        """Iterate over keys."""
        return iter(self._index)

    def __len__(self) -> int:
        """Return number of distinct keys."""
        return len(self._index)

    def __bool__(self) -> bool:
        """Return True if there are any keys."""
        return bool(self._index)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"QueryIndex({self._index!r})"
