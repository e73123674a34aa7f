"""Line and column tracking for the scan driver.

Columns are derived, not counted: the tracker remembers where the current
line started and computes ``column = 1 + cursor - line_start``. Only
consumed text is inspected for newlines, once per token.

Thread Safety:
Tracker instances are single-use. Create one per scan.

"""

from __future__ import annotations

from scanlet.location import Location


class LocationTracker:
    """Incremental (line, column, offset) state over one source buffer.

    Usage:
            >>> tracker = LocationTracker("ab\\ncd")
            >>> tracker.location_at(0)
            Location(line=1, column=1, offset=0, source_file=None)
            >>> tracker.advance(0, 3)
            1
            >>> tracker.location_at(3)
            Location(line=2, column=1, offset=3, source_file=None)

    """

    __slots__ = ("_source", "_source_file", "_line", "_line_start")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._source = source
        self._source_file = source_file
        self._line = 1
        self._line_start = 0

    @property
    def line(self) -> int:
        """Current line number (1-indexed)."""
        return self._line

    @property
    def line_start(self) -> int:
        """Offset of the first character of the current line."""
        return self._line_start

    def location_at(self, cursor: int) -> Location:
        """Location of cursor on the current line.

        Does not mutate tracker state, so it is safe to call repeatedly
        at a position where nothing matched.
        """
        return Location(
            line=self._line,
            column=1 + cursor - self._line_start,
            offset=cursor,
            source_file=self._source_file,
        )

    def advance(self, start: int, end: int) -> int:
        """Account for newlines in consumed text ``[start, end)``.

        A lexeme that spans lines (block comment, run of blank lines) moves
        the line start to just past its last newline.

        Returns:
            Number of newlines consumed.
        """
        count = self._source.count("\n", start, end)
        if count:
            self._line += count
            self._line_start = self._source.rfind("\n", start, end) + 1
        return count
