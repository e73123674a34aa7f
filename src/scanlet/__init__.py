"""
Scanlet: Priority-Ordered Regular-Expression Tokenizer

A small, embeddable lexer front end: give it an ordered list of
(identifier, pattern) definitions and a source buffer, and it reports a
stream of classified lexemes with line, column and offset.
Zero runtime dependencies.

Quick Start:
    >>> from enum import Enum, auto
    >>> from scanlet import Lexer, create_registry, raise_scan_error
    >>> class Tok(Enum):
    ...     NUMBER = auto()
    ...     SPACE = auto()
    >>> lexer = Lexer(create_registry([(Tok.NUMBER, r"[0-9]+"), (Tok.SPACE, r" +")]))
    >>> [t.value for t in lexer.tokenize("12 345")]
    ['12', ' ', '345']

Callback API:
    >>> def on_match(location, identifier, span):
    ...     print(location, identifier.name, repr(span.text))
    >>> lexer.analyze("7 8", on_match, raise_scan_error)
    1:1 NUMBER '7'
    1:2 SPACE ' '
    1:3 NUMBER '8'

Matching Rules:
    - Definitions are tried in registration order; the first non-empty
      match anchored at the cursor wins (no longest-match).
    - At a position nothing matches, on_error(location) is called and the
      cursor stays put. on_error must raise to end the scan.
"""

from collections.abc import Iterable

from scanlet.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from scanlet.errors import PatternError, ScanError, ScanletError, raise_scan_error
from scanlet.lexer import ErrorCallback, Lexer, LocationTracker, MatchCallback, TokenMatch, match_at
from scanlet.location import Location, Span
from scanlet.patterns import LiteralEngine, PatternEngine, RegexEngine
from scanlet.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from scanlet.registry import (
    TokenDefinition,
    TokenRegistry,
    TokenRegistryBuilder,
    create_registry,
)
from scanlet.tokens import Token

__version__ = "0.1.0"


def tokenize[IdT](
    source: str,
    definitions: Iterable[tuple[IdT, str]] | TokenRegistry[IdT],
    *,
    config: ScanConfig | None = None,
) -> list[Token[IdT]]:
    """Tokenize source in one call.

    Args:
        source: Complete input buffer
        definitions: A built registry, or (identifier, pattern) pairs in
            priority order
        config: Optional scan configuration

    Returns:
        All tokens, in source order

    Raises:
        PatternError: If a pattern in definitions is invalid
        ScanError: At the first position no definition matches

    Example:
        >>> tokens = tokenize("a1", [("ALPHA", r"[a-z]"), ("DIGIT", r"[0-9]")])
        >>> [(t.identifier, t.value) for t in tokens]
        [('ALPHA', 'a'), ('DIGIT', '1')]
    """
    if isinstance(definitions, TokenRegistry):
        registry = definitions
    else:
        registry = create_registry(definitions)
    return list(Lexer(registry, config=config).tokenize(source))


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    "Lexer",
    "MatchCallback",
    "ErrorCallback",
    # Registry
    "TokenDefinition",
    "TokenRegistry",
    "TokenRegistryBuilder",
    "create_registry",
    # Pattern engines
    "PatternEngine",
    "RegexEngine",
    "LiteralEngine",
    # Building blocks
    "LocationTracker",
    "TokenMatch",
    "match_at",
    # Results
    "Location",
    "Span",
    "Token",
    # Errors
    "ScanletError",
    "PatternError",
    "ScanError",
    "raise_scan_error",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
