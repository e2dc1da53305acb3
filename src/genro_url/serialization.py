# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
JSON serialization of Url values.

A Url serializes as its canonical string. Deserialization is not a trusted
shortcut: the string goes through the full parse again, and a parse fault
comes back wrapped in ``UrlDeserializationError``.

Example:
    >>> dumps({"home": Url("https://example.com")})
    b'{"home":"https://example.com/"}'
    >>> load_url(b'"https://example.com"')
    Url('https://example.com/')
"""

from __future__ import annotations

from typing import Any

import orjson

from .exceptions import UrlDeserializationError, UrlFault
from .url import Url

__all__ = ["dumps", "json_default", "load_url"]


def json_default(obj: Any) -> Any:
    """
    ``default`` hook for ``orjson.dumps``.

    Raises:
        TypeError: For anything that is not a Url, as orjson expects.
    """
    if isinstance(obj, Url):
        return obj.string
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def dumps(obj: Any, option: int | None = None) -> bytes:
    """Serialize obj to JSON bytes, writing Url values as strings."""
    if option is None:
        return orjson.dumps(obj, default=json_default)
    return orjson.dumps(obj, default=json_default, option=option)


def load_url(data: bytes | str) -> Url:
    """
    Deserialize a JSON string into a Url.

    Args:
        data: A JSON document whose top-level value is a string.

    Returns:
        The parsed Url.

    Raises:
        orjson.JSONDecodeError: If data is not valid JSON.
        UrlDeserializationError: If the value is not a string or does not
            parse as a URL.
    """
    value = orjson.loads(data)
    if not isinstance(value, str):
        raise UrlDeserializationError(f"expected a URL string, got {type(value).__name__}")
    try:
        return Url(value)
    except UrlFault as e:
        raise UrlDeserializationError(f"invalid URL: {e}", fault=e) from e
