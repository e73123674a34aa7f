"""Scan driver: the loop tying registry, matcher and tracker together.

Each step computes the location at the cursor, asks the matcher for the
highest-priority non-empty match there, and reports the outcome through
a callback:

- match:    on_match(location, identifier, span), cursor moves to span.end
- no match: on_error(location), cursor does NOT move

There is no resynchronization. If on_error returns normally the next step
retries the same position, gets the same result and calls on_error again,
forever. Error callbacks must raise (see raise_scan_error) unless the
caller deliberately wants to observe the repeat.

Thread Safety:
Lexer instances are immutable. Scan state lives in locals of each
analyze()/tokenize() call, so one Lexer may serve many threads, each
scanning its own buffer.

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from scanlet.config import ScanConfig, get_scan_config
from scanlet.errors import ScanError
from scanlet.lexer.matcher import TokenMatch, match_at
from scanlet.lexer.tracker import LocationTracker
from scanlet.location import Location, Span
from scanlet.profiling import get_scan_accumulator
from scanlet.registry import TokenRegistry
from scanlet.tokens import Token

logger = logging.getLogger(__name__)

type MatchCallback[IdT] = Callable[[Location, IdT, Span], object]
type ErrorCallback = Callable[[Location], object]


class Lexer[IdT]:
    """Priority-ordered regular-expression tokenizer.

    Usage:
        >>> from scanlet import create_registry
        >>> registry = create_registry([("WORD", r"[a-z]+"), ("SPACE", r" +")])
        >>> for token in Lexer(registry).tokenize("hi there"):
        ...     print(token)
        Token(WORD, 'hi', 1:1)
        Token(SPACE, ' ', 1:3)
        Token(WORD, 'there', 1:4)

    Args:
        registry: Token definitions, highest priority first
        config: Scan configuration (defaults to the context's config at
            scan time)
    """

    __slots__ = ("_registry", "_config")

    def __init__(
        self,
        registry: TokenRegistry[IdT],
        config: ScanConfig | None = None,
    ) -> None:
        self._registry = registry
        self._config = config

    @property
    def registry(self) -> TokenRegistry[IdT]:
        return self._registry

    @property
    def config(self) -> ScanConfig:
        """Config the next scan will use."""
        return self._config if self._config is not None else get_scan_config()

    def analyze(
        self,
        source: str,
        on_match: MatchCallback[IdT],
        on_error: ErrorCallback,
    ) -> None:
        """Scan source, reporting every step through a callback.

        Callbacks run synchronously in left-to-right order. Any exception a
        callback raises propagates out of analyze() unchanged; tokens
        delivered before it stay delivered.

        Args:
            source: Complete input buffer
            on_match: Called as on_match(location, identifier, span) per token
            on_error: Called as on_error(location) per attempt at a position
                no definition matches. Must raise to stop the scan.

        Complexity: O(n * d) engine calls worst case (n tokens, d definitions)
        """
        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(len(source))

        logger.debug("Scanning %d chars with %d definitions", len(source), len(self._registry))
        for location, match in self._steps(source):
            if match.definition is None:
                logger.debug("No token definition matches at %s", location)
                if acc is not None:
                    acc.record_error()
                on_error(location)
            else:
                if acc is not None:
                    acc.record_token()
                on_match(location, match.definition.identifier, Span(source, match.start, match.end))
        logger.debug("Finished scanning %d chars", len(source))

    def tokenize(self, source: str) -> Iterator[Token[IdT]]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time, in source order

        Raises:
            ScanError: At the first position no definition matches
        """
        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(len(source))

        for location, match in self._steps(source):
            if match.definition is None:
                logger.debug("No token definition matches at %s", location)
                if acc is not None:
                    acc.record_error()
                raise ScanError(
                    "no token definition matches",
                    location,
                    context=_line_remainder(source, match.start),
                )
            if acc is not None:
                acc.record_token()
            yield Token(
                match.definition.identifier,
                Span(source, match.start, match.end),
                location,
            )

    def _steps(self, source: str) -> Iterator[tuple[Location, TokenMatch[IdT]]]:
        """Drive the scan state machine.

        The tracker and cursor are updated only after the consumer resumes
        the generator, i.e. after the callback for that step has returned.
        """
        registry = self._registry
        tracker = LocationTracker(source, self.config.source_file)
        cursor = 0
        end = len(source)
        while cursor < end:
            location = tracker.location_at(cursor)
            match = match_at(registry, source, cursor, end)
            yield location, match
            if match.definition is not None:
                tracker.advance(match.start, match.end)
                cursor = match.end


def _line_remainder(source: str, pos: int) -> str:
    """Text from pos to the end of its line (newline excluded)."""
    line_end = source.find("\n", pos)
    return source[pos:] if line_end == -1 else source[pos:line_end]
