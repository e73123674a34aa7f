"""Exception classes for Scanlet.

Provides standardized exceptions for error handling throughout Scanlet.

Two categories exist:
- PatternError: a token definition could not be compiled (setup time)
- ScanError: no definition matched at some position (scan time)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from scanlet.location import Location


class ScanletError(Exception):
    """Base exception for all Scanlet errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(ScanletError):
    """Error when a token pattern cannot be compiled.

    Raised by TokenRegistryBuilder.define() so that an invalid registry
    can never be built or scanned with.
    """

    def __init__(self, identifier: Any, pattern: str, message: str) -> None:
        """Initialize pattern error.

        Args:
            identifier: Identifier the pattern was being registered for
            pattern: The offending pattern text
            message: Description from the pattern engine
        """
        self.identifier = identifier
        self.pattern = pattern
        self.message = message
        super().__init__(f"Invalid pattern {pattern!r} for {identifier!r}: {message}")


class ScanError(ScanletError):
    """Error when no token definition matches at a scan position.

    Never raised by Lexer.analyze() itself; error callbacks raise it to
    abort a scan, and Lexer.tokenize() raises it at the first unmatched
    position.
    """

    def __init__(
        self,
        message: str,
        location: Location | None = None,
        context: str = "",
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            location: Where scanning got stuck
            context: Remaining text of the offending line
        """
        self.message = message
        self.location = location
        self.context = context

        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")

    @property
    def line(self) -> int | None:
        """Line number of the failure (convenience accessor)."""
        return self.location.line if self.location is not None else None

    @property
    def column(self) -> int | None:
        """Column of the failure (convenience accessor)."""
        return self.location.column if self.location is not None else None


def raise_scan_error(location: Location) -> None:
    """Error callback that aborts the scan with a ScanError.

    Pass as ``on_error`` to Lexer.analyze() when any unmatched input
    should stop scanning.

    Raises:
        ScanError: Always
    """
    raise ScanError("no token definition matches", location)
