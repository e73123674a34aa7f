"""Tests for match_at(): anchored, non-empty, first-in-order matching."""

from __future__ import annotations

import pytest

from scanlet import LiteralEngine, TokenRegistryBuilder, create_registry
from scanlet.lexer.matcher import TokenMatch, match_at


class TestAnchoring:
    """A match must begin exactly at the cursor."""

    def test_match_at_cursor(self) -> None:
        registry = create_registry([("NUM", r"[0-9]+")])
        result = match_at(registry, "ab123", 2, 5)

        assert result.matched
        assert result.definition is not None
        assert result.definition.identifier == "NUM"
        assert (result.start, result.end) == (2, 5)

    def test_later_match_does_not_count(self) -> None:
        registry = create_registry([("B", r"b")])
        result = match_at(registry, "ab", 0, 2)

        assert not result.matched
        assert result.definition is None
        assert result.start == result.end == 0

    def test_caret_is_not_needed(self) -> None:
        """Patterns without ^ are still anchored at the cursor."""
        registry = create_registry([("WORD", r"\w+")])
        result = match_at(registry, "  word", 0, 6)

        assert not result.matched


class TestNonEmpty:
    """Zero-length matches are rejected."""

    def test_zero_length_skipped_for_next_definition(self) -> None:
        registry = create_registry([("OPT_A", r"a*"), ("B", r"b")])
        result = match_at(registry, "b", 0, 1)

        assert result.definition is not None
        assert result.definition.identifier == "B"

    def test_only_zero_length_is_failure(self) -> None:
        registry = create_registry([("OPT_A", r"a*"), ("LOOKAHEAD", r"(?=b)")])
        result = match_at(registry, "b", 0, 1)

        assert not result.matched
        assert result.end == 0

    def test_same_pattern_nonempty_when_possible(self) -> None:
        registry = create_registry([("OPT_A", r"a*")])
        result = match_at(registry, "aab", 0, 3)

        assert result.end == 2


class TestPriority:
    """The first matching definition in registry order wins."""

    @pytest.mark.parametrize(
        ("pairs", "expected"),
        [
            ([("KW", r"if"), ("ID", r"[a-z]+")], ("KW", 2)),
            ([("ID", r"[a-z]+"), ("KW", r"if")], ("ID", 4)),
            ([("NOPE", r"[0-9]"), ("ID", r"[a-z]+"), ("KW", r"if")], ("ID", 4)),
        ],
    )
    def test_order_decides(self, pairs: list[tuple[str, str]], expected: tuple[str, int]) -> None:
        result = match_at(create_registry(pairs), "ifxy", 0, 4)

        assert result.definition is not None
        assert (result.definition.identifier, result.end) == expected

    def test_duplicate_identifiers_allowed(self) -> None:
        registry = create_registry([("NUM", r"0x[0-9a-f]+"), ("NUM", r"[0-9]+")])

        assert match_at(registry, "0x1f", 0, 4).end == 4
        assert match_at(registry, "42", 0, 2).end == 2


class TestBounds:
    """Matching never extends past end and fails at or beyond it."""

    def test_end_limits_match(self) -> None:
        registry = create_registry([("WORD", r"[a-z]+")])

        assert match_at(registry, "abcdef", 0, 3).end == 3

    def test_cursor_at_end(self) -> None:
        registry = create_registry([("WORD", r"[a-z]+")])
        result = match_at(registry, "abc", 3, 3)

        assert result == TokenMatch(None, 3, 3)

    def test_empty_registry(self) -> None:
        registry = TokenRegistryBuilder[str]().build()

        assert not match_at(registry, "abc", 0, 3).matched


class TestLiteralEngine:
    """The matcher works with any PatternEngine."""

    def test_literal_priority(self) -> None:
        registry = (
            TokenRegistryBuilder(LiteralEngine())
            .define("EQ", "=")
            .define("EQEQ", "==")
            .build()
        )
        result = match_at(registry, "==", 0, 2)

        assert result.definition is not None
        assert result.definition.identifier == "EQ"
        assert result.end == 1

    def test_literal_respects_end(self) -> None:
        registry = TokenRegistryBuilder(LiteralEngine()).define("ARROW", "->").build()

        assert not match_at(registry, "->", 0, 1).matched
