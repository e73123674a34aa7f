"""First-match, position-anchored pattern search.

Definitions are tried in registry order and the first one that matches
exactly at the cursor with a non-empty lexeme wins. This is priority
matching, not maximal munch: a later definition that would match a
longer lexeme is never consulted once an earlier one succeeds.

Thread Safety:
Pure function over immutable inputs.

"""

from __future__ import annotations

from dataclasses import dataclass

from scanlet.registry import TokenDefinition, TokenRegistry


@dataclass(frozen=True, slots=True)
class TokenMatch[IdT]:
    """Result of one match attempt.

    On failure ``definition`` is None and ``start == end``: nothing was
    consumed and the cursor must not move.

    Attributes:
        definition: Winning definition, or None
        start: Cursor the attempt was made at
        end: End of the lexeme (== start on failure)

    """

    definition: TokenDefinition[IdT] | None
    start: int
    end: int

    @property
    def matched(self) -> bool:
        return self.definition is not None


def match_at[IdT](
    registry: TokenRegistry[IdT],
    source: str,
    cursor: int,
    end: int,
) -> TokenMatch[IdT]:
    """Find the highest-priority non-empty match starting at cursor.

    Args:
        registry: Definitions to try, in priority order
        source: Complete source buffer
        cursor: Position the match must start at
        end: Matches may not extend past this position

    Returns:
        TokenMatch; check ``matched`` before using ``definition``.

    Complexity: O(d) engine calls for d definitions.
    """
    if cursor < end:
        engine = registry.engine
        for definition in registry.definitions:
            match_end = engine.match_at(definition.pattern, source, cursor, end)
            # Zero-length matches would stall the scan; try the next definition
            if match_end is not None and match_end > cursor:
                return TokenMatch(definition, cursor, match_end)
    return TokenMatch(None, cursor, cursor)
