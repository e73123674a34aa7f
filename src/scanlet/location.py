"""Source location and span types for scan results.

Location tells a caller where a token (or a failure) starts; Span is a
zero-copy view of the text a token covers.

Thread Safety:
Both types are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Position of a token or scan failure in the source buffer.

    Attributes:
        line: Line number (1-indexed)
        column: Column, counted from the most recent line start (1-indexed)
        offset: Absolute position in the source buffer (0-indexed)
        source_file: Source file path (optional, for diagnostics)

    Examples:
            >>> loc = Location(line=3, column=12, offset=40)
            >>> str(loc)
            '3:12'

            >>> loc = Location(1, 5, 4, "demo.src")
            >>> str(loc)
            'demo.src:1:5'

    """

    line: int = 1
    column: int = 1
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.src:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range ``[start, end)`` over a source buffer.

    Holds a reference to the buffer rather than a copy of the lexeme, so
    handing spans to callbacks costs no substring allocation. Call
    ``text`` (or ``str()``) when a copy is actually wanted.

    Attributes:
        source: The complete source buffer (read-only)
        start: Start index (inclusive)
        end: End index (exclusive)

    """

    source: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        return self.end > self.start

    def __str__(self) -> str:
        return self.source[self.start : self.end]

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Span({self.start}, {self.end}, {val!r})"

    @property
    def text(self) -> str:
        """The lexeme covered by this span (copied on access)."""
        return self.source[self.start : self.end]
