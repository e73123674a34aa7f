"""Token record produced by the collecting driver.

Lexer.analyze() hands each match to a callback as (location, identifier,
span). Lexer.tokenize() packages the same three values into a Token so
callers that simply want a list do not need to write a callback.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from scanlet.location import Location, Span


@dataclass(frozen=True, slots=True)
class Token[IdT]:
    """A classified lexeme with its source location.

    Attributes:
        identifier: Identifier of the definition that matched
        span: View of the lexeme in the source buffer
        location: Where the lexeme starts

    """

    identifier: IdT
    span: Span
    location: Location

    @property
    def value(self) -> str:
        """The lexeme text."""
        return self.span.text

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.line

    @property
    def column(self) -> int:
        """Column (convenience accessor)."""
        return self.location.column

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        name = getattr(self.identifier, "name", self.identifier)
        return f"Token({name}, {val!r}, {self.location.line}:{self.location.column})"
