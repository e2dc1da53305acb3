# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""genro-url - Immutable, validated URL values with decoded accessors.

Main components:
    Url: Shared handle over a parse, acts like its canonical string
    ParsedUrl: Decomposed URL (decoded credentials, path, query index)
    Host, Origin, Address: Host variants, origin triple, socket endpoint
    QueryIndex, QueryValues: Query keys grouped by "+"-split values

Errors:
    UrlFault: Base class, ``kind`` is a FaultKind
    GrammarFault: Text is not an acceptable URL
    DecodingFault: A component does not percent-decode to UTF-8

Usage:
    from genro_url import Url

    url = Url("https://example.com/search?tags=a+b&page=2")
    url.get_query("tags")  # QueryValues.multiple(['a', 'b'])
    url.get_query("page")  # QueryValues.single('2')
    url.get_query("q")     # None
"""

__version__ = "0.1.0"

from .address import Address
from .exceptions import (
    DecodingFault,
    FaultKind,
    GrammarFault,
    UrlDeserializationError,
    UrlFault,
)
from .grammar import GrammarBreakdown, split_url
from .host import Host, HostKind, Origin
from .parser import ParsedUrl, UrlParser, configure, default_parser, percent_decode
from .query import QueryIndex, QueryValues, QueryValuesKind, build_query_index
from .serialization import dumps, json_default, load_url
from .settings import ParserSettings
from .url import Url

__all__ = [
    "__version__",
    # Value types
    "Url",
    "ParsedUrl",
    "Host",
    "HostKind",
    "Origin",
    "Address",
    "QueryIndex",
    "QueryValues",
    "QueryValuesKind",
    # Parsing
    "GrammarBreakdown",
    "UrlParser",
    "ParserSettings",
    "build_query_index",
    "configure",
    "default_parser",
    "percent_decode",
    "split_url",
    # Serialization
    "dumps",
    "json_default",
    "load_url",
    # Errors
    "FaultKind",
    "UrlFault",
    "GrammarFault",
    "DecodingFault",
    "UrlDeserializationError",
]
