# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Parser settings - layered configuration for the URL parser."""

from __future__ import annotations

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

__all__ = ["ParserSettings", "DEFAULTS", "MAX_URL_LENGTH"]

# Largest input the grammar accepts; anything longer is an OVERFLOW fault.
MAX_URL_LENGTH = 4294967295

DEFAULTS = {"max_length": MAX_URL_LENGTH, "cache_size": 256}


def _parser_opts_spec(
    max_length: int,
    cache_size: int,
) -> None:
    """Reference function for SmartOptions type extraction (no defaults)."""


class ParserSettings:
    """Parser settings resolved from defaults, environment, argv and caller."""

    __slots__ = ("_opts",)

    def __init__(
        self,
        max_length: int | None = None,
        cache_size: int | None = None,
        argv: list[str] | None = None,
    ) -> None:
        self._opts = self._build_config(
            max_length=max_length,
            cache_size=cache_size,
            argv=argv or [],
        )

    def _build_config(
        self,
        max_length: int | None,
        cache_size: int | None,
        argv: list[str],
    ) -> SmartOptions:
        """Build parser configuration from multiple sources.

        Config precedence (later overrides earlier):
        1. Built-in DEFAULTS
        2. Environment variables: GENRO_URL_*
        3. Command line arguments
        4. Explicit constructor parameters
        """
        env_argv_opts = SmartOptions(_parser_opts_spec, env="GENRO_URL", argv=argv)

        caller_opts = SmartOptions(
            dict(max_length=max_length, cache_size=cache_size),
            ignore_none=True,
        )

        return SmartOptions(DEFAULTS) + env_argv_opts + caller_opts

    @property
    def max_length(self) -> int:
        """Maximum accepted input length in characters."""
        return int(self._opts["max_length"])

    @property
    def cache_size(self) -> int:
        """Number of parsed URLs kept in the parse cache (0 disables it)."""
        return int(self._opts["cache_size"])

    def __repr__(self) -> str:
        return f"ParserSettings(max_length={self.max_length}, cache_size={self.cache_size})"
