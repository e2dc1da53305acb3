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

"""Tests for fault classes."""

import pytest

from genro_url.exceptions import (
    DecodingFault,
    FaultKind,
    GrammarFault,
    UrlDeserializationError,
    UrlFault,
)


class TestFaultKind:
    """Tests for the FaultKind taxonomy."""

    def test_closed_set(self) -> None:
        """Test that there are ten grammar and four decoding kinds."""
        kinds = list(FaultKind)
        assert len(kinds) == 14
        assert len([k for k in kinds if k.is_grammar]) == 10
        assert len([k for k in kinds if k.is_decoding]) == 4

    def test_tiers_are_exclusive(self) -> None:
        """Test that every kind belongs to exactly one tier."""
        for kind in FaultKind:
            assert kind.is_grammar != kind.is_decoding

    def test_decoding_kinds(self) -> None:
        """Test the per-component decoding kinds."""
        assert FaultKind.USERNAME_UTF8.is_decoding
        assert FaultKind.PASSWORD_UTF8.is_decoding
        assert FaultKind.PATH_UTF8.is_decoding
        assert FaultKind.FULL_QUERY_UTF8.is_decoding
        assert FaultKind.EMPTY_HOST.is_grammar
        assert FaultKind.OVERFLOW.is_grammar


class TestUrlFault:
    """Tests for UrlFault and its tiers."""

    def test_kind_and_message(self) -> None:
        """Test that the message is the kind's display text."""
        exc = GrammarFault(FaultKind.INVALID_PORT)
        assert exc.kind is FaultKind.INVALID_PORT
        assert str(exc) == "invalid port number"

    def test_hierarchy(self) -> None:
        """Test that both tiers are UrlFault and ValueError."""
        assert isinstance(GrammarFault(FaultKind.EMPTY_HOST), UrlFault)
        assert isinstance(DecodingFault(FaultKind.PATH_UTF8), UrlFault)
        assert isinstance(DecodingFault(FaultKind.PATH_UTF8), ValueError)

    def test_catch_by_tier(self) -> None:
        """Test catching a whole tier."""
        with pytest.raises(DecodingFault):
            raise DecodingFault(FaultKind.USERNAME_UTF8)
        with pytest.raises(UrlFault):
            raise GrammarFault(FaultKind.OVERFLOW)

    def test_equality_by_kind(self) -> None:
        """Test that faults of the same kind compare equal."""
        assert GrammarFault(FaultKind.IDNA_ERROR) == GrammarFault(FaultKind.IDNA_ERROR)
        assert GrammarFault(FaultKind.IDNA_ERROR) != GrammarFault(FaultKind.EMPTY_HOST)
        assert hash(GrammarFault(FaultKind.IDNA_ERROR)) == hash(GrammarFault(FaultKind.IDNA_ERROR))

    def test_repr(self) -> None:
        """Test repr shows class and kind."""
        assert repr(DecodingFault(FaultKind.PATH_UTF8)) == "DecodingFault(kind=PATH_UTF8)"


class TestUrlDeserializationError:
    """Tests for UrlDeserializationError."""

    def test_wraps_fault(self) -> None:
        """Test that the wrapped fault is kept."""
        fault = GrammarFault(FaultKind.RELATIVE_URL_WITHOUT_BASE)
        exc = UrlDeserializationError("invalid URL", fault=fault)
        assert exc.fault is fault
        assert "RELATIVE_URL_WITHOUT_BASE" in repr(exc)

    def test_without_fault(self) -> None:
        """Test error for non-string payloads."""
        exc = UrlDeserializationError("expected a URL string, got int")
        assert exc.fault is None
        assert str(exc) == "expected a URL string, got int"
        assert isinstance(exc, ValueError)
