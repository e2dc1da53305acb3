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

"""
genro-url CLI entry point.

Usage:
    genro-url inspect https://example.com/a?b=1+2    # Print decomposition
    python -m genro_url inspect URL [URL ...]

Each URL is printed as indented JSON. Rejected URLs are reported on stderr
and make the exit status 1.
"""

from __future__ import annotations

import sys

import orjson

from .exceptions import UrlFault
from .serialization import dumps
from .url import Url


def cmd_inspect(argv: list[str]) -> int:
    """Print the decomposition of each URL argument."""
    if not argv:
        print("Error: missing URL", file=sys.stderr)
        return 1

    status = 0
    for text in argv:
        try:
            url = Url(text)
        except UrlFault as e:
            print(f"Error: {text}: {e}", file=sys.stderr)
            status = 1
            continue
        print(dumps(url.as_dict(), option=orjson.OPT_INDENT_2).decode("utf-8"), flush=True)
    return status


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    # Handle --version
    if "--version" in args or "-v" in args:
        from . import __version__

        print(f"genro-url {__version__}")
        return 0

    # Handle --help
    if "--help" in args or "-h" in args or not args:
        print("Usage: genro-url inspect <url> [<url> ...]")
        print()
        print("Arguments:")
        print("  url               URL to parse and decompose")
        print()
        print("Options:")
        print("  --version, -v     Show version")
        print("  --help, -h        Show this help")
        return 0

    subcommand = args[0]
    if subcommand != "inspect":
        print(f"Error: unknown subcommand '{subcommand}'", file=sys.stderr)
        return 1

    return cmd_inspect(args[1:])


if __name__ == "__main__":
    sys.exit(main())
